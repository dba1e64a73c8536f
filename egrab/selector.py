from egrab.constants import ENGINE_PREFIX
from egrab.dom import ElementNode


def selector_for(node: ElementNode) -> str:
    """Short readable selector: ``#id``, ``tag.class1.class2`` or ``tag``."""
    tag = node.tag_name.lower()
    if node.id:
        return f"#{node.id}"

    if node.class_name and isinstance(node.class_name, str):
        classes = [c for c in node.class_name.strip().split() if c and not c.startswith(ENGINE_PREFIX)]
        if classes:
            return f"{tag}.{'.'.join(classes[:2])}"

    return tag
