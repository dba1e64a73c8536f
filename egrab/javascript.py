from typing import List, Optional

from egrab.constants import (
    EVENT_ATTRIBUTES,
    FRAMEWORK_ATTR_PREFIXES,
    MAX_CLASS_TERMS,
    MAX_SCRIPT_REFERENCES,
    MIN_CLASS_TERM_LENGTH,
    REFERENCE_LINE_WIDTH,
)
from egrab.dom import ElementNode, PageDocument
from egrab.report import CaptureReport, ErrorKind
from egrab.selector import selector_for


def search_terms(node: ElementNode) -> List[str]:
    terms = []
    if node.id:
        terms.append(node.id)
    if node.class_name and isinstance(node.class_name, str):
        classes = [c for c in node.class_name.split(" ") if len(c) >= MIN_CLASS_TERM_LENGTH]
        terms.extend(classes[:MAX_CLASS_TERMS])
    return terms


def find_script_references(node: ElementNode, document: PageDocument) -> List[str]:
    """Lines of inline scripts that mention the node's id or classes.

    Each script is scanned for its first matching term only; at most
    MAX_SCRIPT_REFERENCES lines are returned overall.
    """
    references: List[str] = []
    terms = search_terms(node)
    if not terms:
        return references

    for script in document.inline_scripts():
        content = script.text or ""
        for term in terms:
            if term not in content:
                continue
            for number, line in enumerate(content.split("\n"), start=1):
                if term in line:
                    references.append(f"// Line ~{number}: {line.strip()[:REFERENCE_LINE_WIDTH]}")
                    if len(references) >= MAX_SCRIPT_REFERENCES:
                        break
            break
        if len(references) >= MAX_SCRIPT_REFERENCES:
            break

    return references


def framework_attributes(node: ElementNode) -> List[tuple]:
    return [
        (name, value)
        for name, value in node.attributes.items()
        if name.startswith(FRAMEWORK_ATTR_PREFIXES)
    ]


def element_selection(node: ElementNode) -> str:
    tag = node.tag_name.lower()
    if node.id:
        return f"const element = document.getElementById('{node.id}');"
    if node.class_name and isinstance(node.class_name, str):
        class_name = node.class_name.split(" ")[0]
        if class_name:
            return f"const element = document.querySelector('.{class_name}');"
    return f"const element = document.querySelector('{tag}');"


def extract_script_context(node: Optional[ElementNode], document: Optional[PageDocument] = None) -> CaptureReport:
    if node is None:
        return CaptureReport.no_selection()
    document = document or PageDocument()

    try:
        result: List[str] = []
        found = False
        selector = selector_for(node)
        result.append(f"/* JavaScript related to: {selector} */\n")

        handlers = [(event, node.get_attribute(event)) for event in EVENT_ATTRIBUTES]
        handlers = [(event, handler) for event, handler in handlers if handler]
        if handlers:
            found = True
            result.append("/* Inline Event Handlers */")
            for event, handler in handlers:
                result.append(f"// {event}")
                result.append(f"element.{event} = function(event) {{")
                result.append(f"  {handler}")
                result.append("};\n")

        attrs = framework_attributes(node)
        if attrs:
            found = True
            result.append("/* Data/Framework Attributes */")
            result.append("const elementAttributes = {")
            for name, value in attrs:
                escaped = value.replace('"', '\\"')
                result.append(f'  "{name}": "{escaped}",')
            result.append("};\n")

        references = find_script_references(node, document)
        if references:
            found = True
            result.append("/* Potentially Related Script References */")
            result.extend(references)

        result.append("\n/* Element Selection */")
        result.append(element_selection(node))

        if not found:
            result.append("\n// No inline JavaScript handlers or data attributes found.")
            result.append("// Note: addEventListener() bindings cannot be detected from content scripts.")

        return CaptureReport.ok("\n".join(result))
    except Exception as exc:
        return CaptureReport.fail(ErrorKind.SERIALIZATION_FAILURE, str(exc))
