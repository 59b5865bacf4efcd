import re
from typing import Dict, List, Literal, Optional

FocusTarget = Literal["description", "quantity", "submit"]

# "enter" walks the form top to bottom, the last field submits
_FOCUS_ORDER: Dict[str, FocusTarget] = {
    "code": "description",
    "description": "quantity",
    "quantity": "submit",
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def normalize_code(code: str) -> str:
    return code.upper()


def parse_quantity_or_default(text: str, default: int = 0) -> int:
    """
    Read the leading integer of a quantity field.

    "12abc" gives 12 and "3.9" gives 3. Text without a leading integer
    ("", "abc", "-") falls back to `default` instead of being rejected.
    """
    match = _LEADING_INT.match(text or "")
    if not match:
        return default
    return int(match.group(1))


def next_focus(field: str, key: str) -> Optional[FocusTarget]:
    """
    Decide where focus goes when `key` is pressed inside a form field.

    Returns the next field id, "submit" when the form should be submitted,
    or None when the key does not move focus.
    """
    if key != "enter":
        return None
    return _FOCUS_ORDER.get(field)


def generate_markdown_table(
    headers: Optional[List[str]],
    rows: List[List[str]],
    aligns: Optional[List[Literal["l", "c", "r"]]] = None,
) -> str:
    """
    Generate a Markdown table.

    Args:
        headers: List of column headers, or None to use first row as headers.
        rows: List of rows, each a list of values (converted with str).
        aligns: List of alignments ('l', 'c', 'r') for each column.
                Defaults to all left ('l').

    Returns:
        str: Markdown formatted table, empty when there are no rows.
    """
    if not rows:
        return ""

    if not headers:
        headers, rows = rows[0], rows[1:]

    headers = [str(h) for h in headers]
    num_cols = len(headers)
    if aligns is None:
        aligns = ["l"] * num_cols
    elif len(aligns) != num_cols:
        raise ValueError("Length of aligns must match number of headers.")

    align_map = {"l": ":---", "c": ":---:", "r": "---:"}

    lines = [
        "| " + " | ".join(headers) + " |",
        "| " + " | ".join(align_map[a] for a in aligns) + " |",
    ]
    lines += ["| " + " | ".join(str(cell) for cell in row) + " |" for row in rows]
    return "\n".join(lines)
