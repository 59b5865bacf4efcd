from __future__ import annotations

from dataclasses import dataclass

from store.models import ProductRecord
from utils.pure import normalize_code, parse_quantity_or_default


@dataclass
class ProductDraft:
    """
    The not-yet-submitted record behind the add-product form.

    Fields mirror the inputs on screen: code is kept upper case, description
    verbatim, quantity as the parsed integer (0 when the text is not a number).
    """

    code: str = ""
    description: str = ""
    quantity: int = 0

    def set_code(self, text: str) -> str:
        self.code = normalize_code(text)
        return self.code

    def set_description(self, text: str) -> str:
        self.description = text
        return self.description

    def set_quantity(self, text: str) -> int:
        self.quantity = parse_quantity_or_default(text)
        return self.quantity

    def is_submittable(self) -> bool:
        # whitespace-only code/description count as filled in
        return bool(self.code) and bool(self.description) and self.quantity >= 0

    def to_record(self) -> ProductRecord:
        return ProductRecord(
            code=self.code, description=self.description, quantity=self.quantity
        )

    def reset(self) -> None:
        self.code = ""
        self.description = ""
        self.quantity = 0
