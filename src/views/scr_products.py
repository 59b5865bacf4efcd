from typing import Dict

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.validation import Number
from textual.widgets import Button, DataTable, Input, Label

from utils.logger import get_logger
from utils.messages import CsvExportedMessage, ProductsChangedMessage
from utils.pure import next_focus
from views.base_screen import BaseScreen, Sidebar

_logger = get_logger(__name__)

# form field -> input widget selector
FIELD_INPUTS: Dict[str, str] = {
    "code": "#input-code",
    "description": "#input-description",
    "quantity": "#input-quantity",
}

TABLE_COLUMNS = ("Código", "Descrição", "Quantidade", "Ações")
ACTION_COLUMN = 3
ACTION_LABEL = "Remover"


class ProductsScreen(BaseScreen):
    """
    Main screen: add-product form, product table and CSV export.

    Enter walks code -> description -> quantity, and submits from quantity.
    """

    BINDINGS = [
        Binding("delete", "remove_selected", "Remover Produto", show=True),
    ]

    def __init__(self) -> None:
        super().__init__()

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical(id="div-products"):
            with Horizontal(id="hort-form"):
                with Vertical():
                    yield Label("Código")
                    yield Input(id="input-code")
                with Vertical():
                    yield Label("Descrição")
                    yield Input(id="input-description")
                with Vertical():
                    yield Label("Quantidade")
                    yield Input(
                        "0",
                        id="input-quantity",
                        type="integer",
                        validators=[Number(minimum=0)],
                    )
            yield Button("+ Adicionar Produto", id="btn-add", variant="primary")
            with Horizontal(id="hort-list-header"):
                yield Label("Lista de Produtos", id="label-list")
                yield Button("Exportar CSV", id="btn-export")
            yield DataTable(id="table-products")

    def on_mount(self) -> None:
        table = self.query_one(DataTable)
        table.cursor_type = "cell"
        table.zebra_stripes = True
        table.add_columns(*TABLE_COLUMNS)

        self.render_products()
        self.query_one("#input-code").focus()

    def _field_of(self, input_widget: Input) -> str:
        return (input_widget.id or "").removeprefix("input-")

    def on_input_changed(self, message: Input.Changed) -> None:
        draft = self.app.state.draft
        field = self._field_of(message.input)

        if field == "code":
            code = draft.set_code(message.value)
            if message.value != code:
                message.input.value = code
        elif field == "description":
            draft.set_description(message.value)
        elif field == "quantity":
            # the Number validator owns the invalid marker here
            draft.set_quantity(message.value)
            return
        else:
            return

        if message.value:
            message.input.remove_class("-invalid")

    @on(Input.Submitted)
    def handle_enter(self, message: Input.Submitted) -> None:
        target = next_focus(self._field_of(message.input), "enter")
        if target is None:
            return
        if target == "submit":
            self.handle_add()
        else:
            self.query_one(FIELD_INPUTS[target]).focus()

    @on(Button.Pressed, "#btn-add")
    def handle_add(self) -> None:
        state = self.app.state
        record = state.submit_draft()

        if record is None:
            # nothing is added and nothing is said, just point at the gap
            for field in ("code", "description"):
                if not getattr(state.draft, field):
                    input_widget = self.query_one(FIELD_INPUTS[field], Input)
                    input_widget.add_class("-invalid")
                    input_widget.focus()
                    break
            return

        _logger.debug(f"Product {record.code} added to '{state.project.name}'")
        self.query_one("#input-code", Input).value = ""
        self.query_one("#input-description", Input).value = ""
        self.query_one("#input-quantity", Input).value = "0"
        self.query_one("#input-code").focus()

        self.post_message(ProductsChangedMessage())

    @on(DataTable.CellSelected)
    def handle_cell_selected(self, event: DataTable.CellSelected) -> None:
        if event.coordinate.column != ACTION_COLUMN:
            return
        code = event.data_table.get_row_at(event.coordinate.row)[0]
        self.remove_product(code)

    def action_remove_selected(self) -> None:
        table = self.query_one(DataTable)
        if table.row_count == 0:
            return
        code = table.get_row_at(table.cursor_coordinate.row)[0]
        self.remove_product(code)

    def remove_product(self, code: str) -> None:
        removed = self.app.state.remove_product(code)
        if removed:
            self.notify(f"Produto {code} removido.")
            self.post_message(ProductsChangedMessage())

    @on(Button.Pressed, "#btn-export")
    def handle_export(self) -> None:
        try:
            path = self.app.state.export_csv(self.app.export_dir)
        except OSError as e:
            _logger.exception("CSV export failed")
            self.notify(f"Falha ao exportar CSV: {e}", severity="error")
            return

        self.post_message(CsvExportedMessage(path))

    @on(ProductsChangedMessage)
    async def handle_products_changed(self) -> None:
        self.render_products()
        await self.query_one(Sidebar).refresh_summary()

    def render_products(self) -> None:
        """
        Fill the table from the registry.
        The list and the export button only show when there is something in it.
        """
        registry = self.app.state.registry

        table = self.query_one(DataTable)
        table.clear()
        table.add_rows(
            [(r.code, r.description, str(r.quantity), ACTION_LABEL) for r in registry]
        )

        for selector in ("#hort-list-header", "#table-products"):
            self.query_one(selector).set_class(registry.is_empty(), "hidden")
