# CSV export of the product registry
from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Union
from zoneinfo import ZoneInfo

from store.models import ProductRecord, ProjectSession
from utils.logger import get_logger

_logger = get_logger(__name__)

EXPORT_DIR = os.getenv("EXPORT_DIR", "exports")
TIMEZONE = ZoneInfo("America/Sao_Paulo")

BOM = "\ufeff"
HEADER = "Código;Descrição;Quantidade"
DELIMITER = ";"
ENCODING = "utf-8"

# pt-BR short date + medium time, e.g. "17/10/2026, 14:05:09"
_TIMESTAMP_FORMAT = "%d/%m/%Y, %H:%M:%S"
_FILENAME_UNSAFE = "/: "


def build_csv(records: Iterable[ProductRecord]) -> str:
    """
    Render records as the semicolon-delimited document spreadsheets expect.

    Fields are written as-is: a ';' inside a description is not quoted.
    The last line has no trailing newline.
    """
    body = "\n".join(
        DELIMITER.join([r.code, r.description, str(r.quantity)]) for r in records
    )
    return BOM + HEADER + "\n" + body


def csv_bytes(records: Iterable[ProductRecord]) -> bytes:
    return build_csv(records).encode(ENCODING)


def read_csv(data: Union[bytes, str]) -> List[ProductRecord]:
    """
    Parse a document produced by `build_csv` back into records.

    Code is everything before the first ';' and quantity everything after the
    last one, so descriptions containing ';' survive. A code containing
    ';' does not: its tail is read back as part of the description.
    """
    if isinstance(data, bytes):
        data = data.decode(ENCODING)
    data = data.removeprefix(BOM)

    lines = data.split("\n")
    if lines[0] != HEADER:
        raise ValueError(f"Unexpected CSV header: {lines[0]!r}")

    records = []
    for lineno, line in enumerate(lines[1:], start=2):
        if not line:
            continue
        if line.count(DELIMITER) < 2:
            raise ValueError(f"Line {lineno} has fewer than 3 fields: {line!r}")
        code, rest = line.split(DELIMITER, 1)
        description, quantity = rest.rsplit(DELIMITER, 1)
        records.append(ProductRecord(code, description, int(quantity)))
    return records


def format_timestamp(when: datetime) -> str:
    return when.astimezone(TIMEZONE).strftime(_TIMESTAMP_FORMAT)


def build_filename(project_name: str, when: datetime) -> str:
    stamp = format_timestamp(when)
    for ch in _FILENAME_UNSAFE:
        stamp = stamp.replace(ch, "_")
    return f"{project_name.strip()}_{stamp}.csv"


def export_csv(
    session: ProjectSession,
    records: Iterable[ProductRecord],
    directory: Union[str, os.PathLike, None] = None,
    when: Optional[datetime] = None,
) -> Path:
    """
    Write the records to `directory` and return the path of the new file.

    An empty registry still produces a file holding the BOM and header.
    """
    directory = Path(directory if directory is not None else EXPORT_DIR)
    when = when or datetime.now(TIMEZONE)

    filename = build_filename(session.name, when)
    # a name like "a/b" must not escape the export directory
    for sep in filter(None, (os.sep, os.altsep)):
        filename = filename.replace(sep, "_")

    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    payload = csv_bytes(records)
    path.write_bytes(payload)

    _logger.info(f"Exported {len(payload)} bytes to {path}")
    return path
