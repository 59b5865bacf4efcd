# in-memory product registry, lives as long as the app does
from __future__ import annotations

from typing import Iterator, List

from store.models import ProductRecord
from utils.logger import get_logger
from utils.pure import normalize_code

_logger = get_logger(__name__)


class ProductRegistry:
    """
    Ordered collection of product records.

    Insertion order is kept and duplicate codes are allowed; the registry
    never checks codes against each other.
    """

    def __init__(self) -> None:
        self._records: List[ProductRecord] = []

    def add(self, record: ProductRecord) -> None:
        """Append a record to the end. Always succeeds."""
        self._records.append(record)
        _logger.debug(f"Added {record.code} ({len(self._records)} records)")

    def remove(self, code: str) -> int:
        """Remove every record with the given code.

        Returns the number of records removed, 0 when nothing matched.
        """
        code = normalize_code(code)
        kept = [r for r in self._records if r.code != code]
        removed = len(self._records) - len(kept)
        if removed:
            self._records = kept
            _logger.debug(f"Removed {removed} record(s) with code {code}")
        return removed

    def list(self) -> List[ProductRecord]:
        return list(self._records)

    def is_empty(self) -> bool:
        return not self._records

    def total_quantity(self) -> int:
        return sum(r.quantity for r in self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[ProductRecord]:
        return iter(list(self._records))

    def __bool__(self) -> bool:
        return bool(self._records)
