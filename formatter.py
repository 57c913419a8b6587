# formatter.py
import re
from typing import List, Optional

_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)

BOLD_PATTERN = re.compile(r"\*\*(.+?)\*\*")
CODE_PATTERN = re.compile(r"`([^`\n]+)`")
BULLET_PATTERN = re.compile(r"^[-*•]\s+")
ORDERED_PATTERN = re.compile(r"^\d+[.)]\s+")
SPACER = "<p></p>"
SPACER_RUN = re.compile(r"(?:<p></p>){2,}")


def escape_html(text: str) -> str:
    out = str(text)
    for raw, entity in _ESCAPES:
        out = out.replace(raw, entity)
    return out


def _list_kind(line: str) -> Optional[str]:
    if BULLET_PATTERN.match(line):
        return "ul"
    if ORDERED_PATTERN.match(line):
        return "ol"
    return None


def _next_non_blank(lines: List[str], start: int) -> Optional[str]:
    for line in lines[start:]:
        if line:
            return line
    return None


def format_text_to_html(text: str) -> str:
    """Render markdown-lite text as an HTML fragment.

    Supports paragraphs, ``-``/``*``/``•`` bullets, ``1.``/``1)`` ordered items,
    ``**bold**`` and ``code`` spans. Ordered lists are renumbered from 1 since
    the source prefixes are dropped. A blank line between two list items does
    not split the list.
    """
    safe = escape_html(text)
    safe = BOLD_PATTERN.sub(r"<strong>\1</strong>", safe)
    safe = CODE_PATTERN.sub(r"<code>\1</code>", safe)

    lines = [raw.strip() for raw in re.split(r"\r?\n", safe)]

    parts: List[str] = []
    open_list: Optional[str] = None

    def close_list() -> None:
        nonlocal open_list
        if open_list:
            parts.append(f"</{open_list}>")
            open_list = None

    for index, line in enumerate(lines):
        if not line:
            if open_list:
                upcoming = _next_non_blank(lines, index + 1)
                if upcoming is not None and _list_kind(upcoming):
                    continue
            close_list()
            parts.append(SPACER)
            continue

        kind = _list_kind(line)
        if kind is None:
            close_list()
            parts.append(f"<p>{line}</p>")
            continue

        if open_list != kind:
            close_list()
            parts.append(f"<{kind}>")
            open_list = kind
        marker = BULLET_PATTERN if kind == "ul" else ORDERED_PATTERN
        parts.append(f"<li>{marker.sub('', line, count=1)}</li>")

    close_list()
    return SPACER_RUN.sub(SPACER, "".join(parts))
