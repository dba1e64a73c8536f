from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional

from egrab.constants import BANNER_WIDTH, SECTION_WIDTH
from egrab.dom import ElementNode, PageDocument
from egrab.javascript import extract_script_context
from egrab.markup import extract_markup
from egrab.report import CaptureReport, ErrorKind
from egrab.selector import selector_for
from egrab.styles import extract_styles


def section(title: str, report: CaptureReport) -> List[str]:
    rule = "─" * SECTION_WIDTH
    return ["\n" + rule, title, rule, report.render()]


def extract_all(
    node: Optional[ElementNode],
    document: Optional[PageDocument] = None,
    captured_at: Optional[datetime] = None,
) -> CaptureReport:
    """HTML, CSS and JavaScript sections in one export.

    Section failures are rendered inline; only a missing node fails the export.
    """
    if node is None:
        return CaptureReport.no_selection()
    document = document or PageDocument()
    captured_at = captured_at or datetime.now(timezone.utc)
    banner = "═" * BANNER_WIDTH

    results = [
        banner,
        f"eGrab Export - {selector_for(node)}",
        f"Captured at: {captured_at.isoformat()}",
        banner,
    ]
    results.extend(section("📋 HTML", extract_markup(node)))
    results.extend(section("🎨 CSS", extract_styles(node, document)))
    results.extend(section("⚡ JavaScript", extract_script_context(node, document)))
    results.append("\n" + banner)
    results.append("End of eGrab Export")
    results.append(banner)

    return CaptureReport.ok("\n".join(results))


ACTIONS: Dict[str, Callable[[Optional[ElementNode], PageDocument], CaptureReport]] = {
    "html": lambda node, document: extract_markup(node),
    "css": extract_styles,
    "js": extract_script_context,
    "all": extract_all,
}

# Action names used by the browser extension's context menu
ACTION_ALIASES = {
    "copyHTML": "html",
    "copyCSS": "css",
    "copyJS": "js",
    "copyAll": "all",
}


def run_action(action: str, node: Optional[ElementNode], document: Optional[PageDocument] = None) -> CaptureReport:
    handler = ACTIONS.get(ACTION_ALIASES.get(action, action))
    if handler is None:
        return CaptureReport.fail(ErrorKind.UNKNOWN_ACTION)
    return handler(node, document or PageDocument())
