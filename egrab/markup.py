import re
from typing import Optional

from egrab.constants import VOID_TAGS
from egrab.dom import ElementNode
from egrab.report import CaptureReport, ErrorKind

INDENT = "  "

CLOSING_TAG_RE = re.compile(r"^</\w")
OPENING_TAG_RE = re.compile(r"^<\w[^>]*[^/]>$")
VOID_TAG_RE = re.compile(r"^<(" + "|".join(VOID_TAGS) + r")", re.IGNORECASE)


def format_html(html: str) -> str:
    """Re-indent serialized markup by splitting adjacent tags onto lines.

    Line classification only; text sharing a line with its tags stays there.
    """
    formatted = []
    indent = 0
    for line in html.replace("><", ">\n<").split("\n"):
        line = line.strip()
        if not line:
            continue

        if CLOSING_TAG_RE.match(line):
            indent = max(0, indent - 1)

        formatted.append(INDENT * indent + line)

        if OPENING_TAG_RE.match(line) and not VOID_TAG_RE.match(line):
            indent += 1

    return "\n".join(formatted).strip()


def extract_markup(node: Optional[ElementNode]) -> CaptureReport:
    if node is None:
        return CaptureReport.no_selection()
    try:
        return CaptureReport.ok(format_html(node.outer_html))
    except Exception as exc:
        return CaptureReport.fail(ErrorKind.SERIALIZATION_FAILURE, str(exc))
