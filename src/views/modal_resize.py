from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Resize
from textual.screen import ModalScreen
from textual.widgets import Label


class ResizeScreenPromptModal(ModalScreen[None]):
    """
    Covers the screen until the terminal is at least min_width x min_height.
    """

    def __init__(self, min_width: int, min_height: int) -> None:
        super().__init__()
        self.min_width = min_width
        self.min_height = min_height

    def compose(self) -> ComposeResult:
        with Container(id="div-resize"):
            yield Label(
                f"Aumente o terminal para pelo menos "
                f"{self.min_width}x{self.min_height}",
                id="prompt",
            )

    def fits(self, width: int, height: int) -> bool:
        return width >= self.min_width and height >= self.min_height

    def on_resize(self, event: Resize) -> None:
        if self.fits(event.size.width, event.size.height):
            self.dismiss()
