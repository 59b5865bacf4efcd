from pathlib import Path

from textual.message import Message


class QuitRequestedMessage(Message):
    """
    broadcasted when the app is about to quit
    """

    bubble = True


class ProjectStartedMessage(Message):
    """
    Fired once the project name is accepted and the session becomes active
    """

    bubble = True

    def __init__(self, project_name: str) -> None:
        super().__init__()
        self.project_name = project_name


class ProductsChangedMessage(Message):
    """
    Fired after a record is added or removed.
    Refreshes the product table, the sidebar summary and the export button.
    """

    bubble = True


class CsvExportedMessage(Message):
    """
    Fired after the CSV file is written
    """

    bubble = True

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = path
