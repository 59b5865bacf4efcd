from textual import work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.events import Resize
from textual.screen import Screen
from textual.widgets import Footer, Header, Label, Markdown

from utils.messages import QuitRequestedMessage
from utils.pure import generate_markdown_table
from views.modal_dialog import QuitDialogModal
from views.modal_resize import ResizeScreenPromptModal

APP_TITLE = "Gerenciador de Produtos"


class Sidebar(Container):
    """Project summary: name, number of records and total quantity."""

    def compose(self) -> ComposeResult:
        yield Label("Projeto", id="label-info-1")
        yield Markdown("", id="md-project-info")

    async def on_mount(self):
        await self.refresh_summary()

    async def refresh_summary(self) -> None:
        state = self.app.state
        if state.project is None:
            return
        table_rows = [
            ["Nome", state.project.name],
            ["Produtos", len(state.registry)],
            ["Quantidade total", state.registry.total_quantity()],
        ]
        md_table_str = generate_markdown_table(None, table_rows, ["l", "l"])
        await self.query_one("#md-project-info", Markdown).update(md_table_str)


class BaseScreen(Screen):
    """
    Inherited by all screens, contains common elements like
    headers, footers, sidebar, and keybindings.
    """

    BINDINGS = [
        Binding("ctrl+z", "quit", "Sair", show=True),
    ]

    MIN_WIDTH = 60
    MIN_HEIGHT = 20

    def __init__(self):
        super().__init__()

        self.configure()

    def configure(
        self,
        header_sub_title: str = "",
        show_sidebar: bool = True,
    ) -> None:
        """
        configure behavior of the base screen
        """
        self.app.title = APP_TITLE
        project = self.app.state.project
        self.sub_title = header_sub_title or (project.name if project else "")
        self._show_sidebar = show_sidebar

    def compose(self) -> ComposeResult:
        if self._show_sidebar:
            yield Sidebar()
        yield Header()
        yield Footer(show_command_palette=False)

    async def on_resize(self, event: Resize) -> None:
        if isinstance(self.app.screen, ResizeScreenPromptModal):
            return
        if event.size.width < self.MIN_WIDTH or event.size.height < self.MIN_HEIGHT:
            self.app.push_screen(
                ResizeScreenPromptModal(self.MIN_WIDTH, self.MIN_HEIGHT)
            )

    @work()
    async def action_quit(self):
        if await self.app.push_screen_wait(QuitDialogModal()):
            self.post_message(QuitRequestedMessage())
