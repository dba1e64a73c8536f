"""In-memory view of the live document the engine reads.

Nodes are built once per capture (usually from a Playwright snapshot) and
never mutated by the extractors.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Optional, Set

from egrab.constants import ENGINE_CLASS, ENGINE_CONTAINER_IDS, ENGINE_ID_PREFIX


@dataclass(frozen=True)
class Declaration:
    name: str
    value: str
    important: bool = False

    def render(self) -> str:
        priority = " !important" if self.important else ""
        return f"{self.name}: {self.value}{priority};"


def parse_declarations(css_text: str) -> List[Declaration]:
    """Split a ``style`` attribute's cssText into declarations, in order."""
    declarations = []
    for part in (css_text or "").split(";"):
        part = part.strip()
        if not part or ":" not in part:
            continue
        name, value = part.split(":", 1)
        value = value.strip()
        important = value.lower().endswith("!important")
        if important:
            value = value[: -len("!important")].rstrip()
        declarations.append(Declaration(name.strip(), value, important))
    return declarations


@dataclass(eq=False)
class ElementNode:
    tag_name: str
    id: str = ""
    # Non-string values (e.g. SVGAnimatedString on SVG elements) are kept as-is
    class_name: Any = ""
    # Ordered classList tokens as reported by the host; covers SVG elements too
    classes: Optional[List[str]] = None
    inline_style: List[Declaration] = field(default_factory=list)
    attributes: Dict[str, str] = field(default_factory=dict)
    outer_html: str = ""
    children: List["ElementNode"] = field(default_factory=list)
    computed_style: Optional[Dict[str, str]] = None
    matched_selectors: Set[str] = field(default_factory=set)
    parent: Optional["ElementNode"] = field(default=None, repr=False)

    def __post_init__(self):
        if not self.tag_name:
            raise ValueError("ElementNode requires a non-empty tag name")
        for child in self.children:
            child.parent = self

    @property
    def class_list(self) -> List[str]:
        if self.classes is not None:
            return list(self.classes)
        if not isinstance(self.class_name, str):
            return []
        return self.class_name.split()

    def get_attribute(self, name: str) -> Optional[str]:
        return self.attributes.get(name)

    def descendants(self) -> Iterator["ElementNode"]:
        for child in self.children:
            yield child
            yield from child.descendants()

    def ancestors_and_self(self) -> Iterator["ElementNode"]:
        node: Optional[ElementNode] = self
        while node is not None:
            yield node
            node = node.parent


@dataclass(frozen=True)
class StyleRule:
    selector: str
    declarations: List[Declaration] = field(default_factory=list)
    kind: str = "style"


@dataclass(frozen=True)
class StyleSheet:
    """One stylesheet, or the reason its rules could not be read.

    ``rules`` is None when the host refused access (cross-origin sheets).
    """

    href: Optional[str] = None
    rules: Optional[List[StyleRule]] = None
    error: Optional[str] = None

    @property
    def accessible(self) -> bool:
        return self.rules is not None

    def style_rules(self) -> List[StyleRule]:
        if not self.accessible:
            return []
        return [rule for rule in self.rules if rule.kind == "style"]


@dataclass(frozen=True)
class ScriptBlock:
    text: str = ""
    src: Optional[str] = None

    @property
    def inline(self) -> bool:
        return not self.src


def is_engine_element(node: Optional[ElementNode]) -> bool:
    """True for nodes injected by eGrab's own overlay and toast UI."""
    if node is None:
        return False
    if node.id.startswith(ENGINE_ID_PREFIX):
        return True
    if ENGINE_CLASS in node.class_list:
        return True
    return any(n.id in ENGINE_CONTAINER_IDS for n in node.ancestors_and_self())


def reported_match(node: ElementNode, selector: str) -> bool:
    return selector in node.matched_selectors


@dataclass
class PageDocument:
    stylesheets: List[StyleSheet] = field(default_factory=list)
    scripts: List[ScriptBlock] = field(default_factory=list)
    matcher: Callable[[ElementNode, str], bool] = reported_match
    is_own_ui: Callable[[ElementNode], bool] = is_engine_element
    limits: List[str] = field(default_factory=list)

    def matches(self, node: ElementNode, selector: str) -> bool:
        return self.matcher(node, selector)

    def inline_scripts(self) -> List[ScriptBlock]:
        return [script for script in self.scripts if script.inline]
