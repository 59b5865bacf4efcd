from textual import on
from textual.app import ComposeResult
from textual.containers import Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label


class ProjectNameModal(ModalScreen[str]):
    """
    Blocking dialog asking for the project name.
    Dismisses with the trimmed name; there is no way to cancel it.
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="div-project-name"):
            yield Label("Nome do Projeto", id="label-project-name")
            yield Input(placeholder="Digite o nome do projeto", id="input-project-name")
            yield Button("Começar", id="btn-start", variant="primary")

    def on_mount(self):
        self.query_one("#input-project-name").focus()

    @on(Input.Submitted, "#input-project-name")
    @on(Button.Pressed, "#btn-start")
    def handle_submit(self) -> None:
        input_name = self.query_one("#input-project-name", Input)
        name = input_name.value.strip()

        # silently stay open, like a required field left blank
        if not name:
            input_name.add_class("-invalid")
            input_name.focus()
            return

        self.dismiss(name)

    def on_input_changed(self, message: Input.Changed) -> None:
        if message.value.strip():
            message.input.remove_class("-invalid")
