from typing import Dict, List, Optional, Set, Tuple

from egrab.constants import COMPUTED_PROPS, UNINFORMATIVE_VALUES
from egrab.dom import ElementNode, PageDocument, StyleRule
from egrab.report import CaptureReport, ErrorKind
from egrab.selector import selector_for

RULE_BANNER = "/* ═══════════════════════════════════════════════════════ */"
NO_MATCHED_RULES = "/* No matched stylesheet rules found (may be blocked by CORS) */"

DedupKey = Tuple[str, str, Tuple[str, ...]]


def dedup_key(node: ElementNode) -> DedupKey:
    return selector_for(node), node.tag_name, tuple(node.class_list)


def informative_computed(node: ElementNode) -> Dict[str, str]:
    computed = node.computed_style
    if not computed:
        return {}
    values = {}
    for prop in COMPUTED_PROPS:
        value = computed.get(prop) or ""
        if value and value not in UNINFORMATIVE_VALUES:
            values[prop] = value
    return values


def element_css(node: ElementNode, include_computed: bool = True) -> List[str]:
    """Inline and computed rule blocks for a single element."""
    result: List[str] = []
    selector = selector_for(node)

    if node.inline_style:
        result.append(f"/* Inline Styles for: {selector} */")
        result.append(f"{selector} {{")
        result.extend(f"  {decl.render()}" for decl in node.inline_style)
        result.append("}")

    if include_computed:
        try:
            computed = informative_computed(node)
        except Exception:
            computed = {}
        if computed:
            result.append(f"/* Computed Styles for: {selector} */")
            result.append(f"{selector} {{")
            result.extend(f"  {prop}: {value};" for prop, value in computed.items())
            result.append("}")

    return result


def format_rule_style(rule: StyleRule) -> str:
    return "\n".join(f"  {decl.render()}" for decl in rule.declarations)


def render_rule(rule: StyleRule) -> str:
    return f"{rule.selector} {{\n{format_rule_style(rule)}\n}}"


def matched_rules(node: ElementNode, document: PageDocument) -> List[str]:
    """Stylesheet rules whose selector matches ``node``, rendered as CSS text.

    Unreadable stylesheets and selectors the matcher rejects are skipped.
    """
    matched = []
    for sheet in document.stylesheets:
        if not sheet.accessible:
            continue
        for rule in sheet.style_rules():
            try:
                if document.matches(node, rule.selector):
                    matched.append(render_rule(rule))
            except Exception:
                continue
    return matched


def extract_styles(node: Optional[ElementNode], document: Optional[PageDocument] = None) -> CaptureReport:
    """CSS for ``node`` and all of its descendants."""
    if node is None:
        return CaptureReport.no_selection()
    document = document or PageDocument()

    try:
        result: List[str] = []
        seen: Set[DedupKey] = set()

        root_selector = selector_for(node)
        result.append(RULE_BANNER)
        result.append(f"/* CSS for: {root_selector} (including children) */")
        result.append(f"{RULE_BANNER}\n")

        result.append("/* ─── Root Element ─── */")
        result.extend(element_css(node))

        children = [child for child in node.descendants() if not document.is_own_ui(child)]
        if children:
            result.append("\n/* ─── Child Elements ─── */")
            for child in children:
                key = dedup_key(child)
                if key in seen:
                    continue
                seen.add(key)

                child_css = element_css(child)
                if child_css:
                    result.append("")
                    result.extend(child_css)

        result.append("\n/* ─── Matched CSS Rules from Stylesheets ─── */")
        rules: Dict[str, None] = {}
        for el in [node] + children:
            if document.is_own_ui(el):
                continue
            for rule in matched_rules(el, document):
                rules.setdefault(rule, None)

        if rules:
            result.extend(rules)
        else:
            result.append(NO_MATCHED_RULES)

        return CaptureReport.ok("\n".join(result))
    except Exception as exc:
        return CaptureReport.fail(ErrorKind.SERIALIZATION_FAILURE, str(exc))
