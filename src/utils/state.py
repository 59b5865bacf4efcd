from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from store import export
from store.draft import ProductDraft
from store.models import ProductRecord, ProjectSession
from store.registry import ProductRegistry
from utils.logger import get_logger

_logger = get_logger(__name__)


class Phase(Enum):
    AWAITING_NAME = "awaiting_name"
    ACTIVE = "active"


@dataclass
class SessionState:
    """
    Centralized application state shared by screens.

    Fields:
      - project: the named project, None until the name dialog is submitted
      - registry: products entered so far, in the order they were added
      - draft: values currently typed into the add-product form
    """

    project: Optional[ProjectSession] = None
    registry: ProductRegistry = field(default_factory=ProductRegistry)
    draft: ProductDraft = field(default_factory=ProductDraft)

    @property
    def phase(self) -> Phase:
        return Phase.AWAITING_NAME if self.project is None else Phase.ACTIVE

    def start_project(self, name: str) -> bool:
        """Name the project and activate the session.
        Returns False, leaving the state untouched, when the trimmed name is
        empty or a project is already active.
        """
        if self.phase is Phase.ACTIVE:
            return False
        name = (name or "").strip()
        if not name:
            return False
        self.project = ProjectSession(name)
        _logger.info(f"Project '{name}' started.")
        return True

    def submit_draft(self) -> Optional[ProductRecord]:
        """
        Commit the draft to the registry.
        Returns the new record, or None when code or description is empty.
        """
        if not self.draft.is_submittable():
            return None
        record = self.draft.to_record()
        self.registry.add(record)
        self.draft.reset()
        return record

    def remove_product(self, code: str) -> int:
        return self.registry.remove(code)

    def export_csv(
        self,
        directory: Union[str, os.PathLike, None] = None,
        when: Optional[datetime] = None,
    ) -> Path:
        if self.project is None:
            raise RuntimeError("Cannot export before the project is named.")
        return export.export_csv(self.project, self.registry, directory, when)
