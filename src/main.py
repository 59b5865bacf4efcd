import os
from typing import Optional, Union

from textual import on, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import LoadingIndicator

from store.export import EXPORT_DIR
from utils.logger import get_logger
from utils.messages import CsvExportedMessage, ProjectStartedMessage, QuitRequestedMessage
from utils.state import SessionState
from views.modal_project_name import ProjectNameModal
from views.scr_products import ProductsScreen

_logger = get_logger(__name__)


class ProductManagerApp(App):
    BINDINGS = [
        Binding("ctrl+t", "switch_light", "Alternar Tema", show=True),
    ]

    CSS_PATH = [
        "styles/index.tcss",
        "styles/project_name.tcss",
        "styles/products.tcss",
    ]

    state: SessionState

    def __init__(self, export_dir: Union[str, os.PathLike, None] = None):
        super().__init__()
        self.state = SessionState()
        self.export_dir = export_dir if export_dir is not None else EXPORT_DIR

    def compose(self) -> ComposeResult:
        yield LoadingIndicator()

    async def on_mount(self) -> None:
        self.main_flow()

    def action_switch_light(self):
        if self.theme == "textual-dark":
            self.theme = "solarized-light"
        else:
            self.theme = "textual-dark"
        self.notify(f"Tema alterado para {self.theme}")

    @on(QuitRequestedMessage)
    def handle_quit(self):
        self.exit()

    @on(ProjectStartedMessage)
    async def handle_project_started(self, message: ProjectStartedMessage):
        _logger.debug(f"Opening product screen for '{message.project_name}'")
        await self.push_screen(ProductsScreen())

    @on(CsvExportedMessage)
    def handle_csv_exported(self, message: CsvExportedMessage):
        self.notify(f"CSV exportado: {message.path}")

    @work
    async def main_flow(self):
        # the dialog only ever returns a non-empty name
        name = await self.push_screen_wait(ProjectNameModal())
        if self.state.start_project(name):
            self.post_message(ProjectStartedMessage(self.state.project.name))


def main(export_dir: Optional[str] = None) -> None:
    app = ProductManagerApp(export_dir)
    app.run()


if __name__ == "__main__":
    main()
