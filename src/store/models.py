# provide dataclass models

from dataclasses import dataclass


@dataclass(frozen=True)
class ProjectSession:
    name: str  # trimmed, never empty

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Project name cannot be empty.")


@dataclass(frozen=True)
class ProductRecord:
    code: str  # always upper case
    description: str
    quantity: int

    def __post_init__(self):
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError(f"Quantity must be an integer, got {self.quantity!r}")
        if self.quantity < 0:
            raise ValueError(f"Quantity cannot be negative, got {self.quantity}")
        object.__setattr__(self, "code", self.code.upper())
