"""Fixed lists the capture engine works from.

These are literal configuration, kept in the order the output relies on.
"""

ENGINE_PREFIX = "egrab"
ENGINE_ID_PREFIX = "egrab-"
ENGINE_CLASS = "egrab-element"
ENGINE_CONTAINER_IDS = ("egrab-overlay", "egrab-toast")

COMPUTED_PROPS = [
    "display",
    "position",
    "top",
    "right",
    "bottom",
    "left",
    "width",
    "height",
    "max-width",
    "max-height",
    "min-width",
    "min-height",
    "margin",
    "margin-top",
    "margin-right",
    "margin-bottom",
    "margin-left",
    "padding",
    "padding-top",
    "padding-right",
    "padding-bottom",
    "padding-left",
    "border",
    "border-radius",
    "box-shadow",
    "background",
    "background-color",
    "background-image",
    "color",
    "font-family",
    "font-size",
    "font-weight",
    "line-height",
    "text-align",
    "flex",
    "flex-direction",
    "justify-content",
    "align-items",
    "gap",
    "grid",
    "grid-template-columns",
    "grid-template-rows",
    "overflow",
    "opacity",
    "z-index",
    "transform",
    "transition",
]

UNINFORMATIVE_VALUES = {"none", "normal", "auto", "0px"}

VOID_TAGS = ("br", "hr", "img", "input", "meta", "link")

EVENT_ATTRIBUTES = [
    "onclick",
    "ondblclick",
    "onmousedown",
    "onmouseup",
    "onmouseover",
    "onmouseout",
    "onmousemove",
    "onkeydown",
    "onkeyup",
    "onkeypress",
    "onfocus",
    "onblur",
    "onchange",
    "oninput",
    "onsubmit",
    "onreset",
    "onload",
    "onerror",
    "onscroll",
    "onresize",
    "ondragstart",
    "ondrag",
    "ondragend",
    "ondragover",
    "ondragenter",
    "ondragleave",
    "ondrop",
    "ontouchstart",
    "ontouchmove",
    "ontouchend",
    "ontouchcancel",
]

FRAMEWORK_ATTR_PREFIXES = ("data-", "ng-", "v-", "x-", "@", ":")

MAX_SCRIPT_REFERENCES = 5
REFERENCE_LINE_WIDTH = 100
MAX_CLASS_TERMS = 3
MIN_CLASS_TERM_LENGTH = 3

BANNER_WIDTH = 60
SECTION_WIDTH = 40

DEFAULT_VIEWPORT = {"width": 1440, "height": 900}
