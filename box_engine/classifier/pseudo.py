"""
Pseudo-element matcher.

A generated box is recognised by the selector of the rule that produced it:
the box is a ``::before`` when that selector ends in ``::before``.
"""

from typing import Any, Iterable

from .accessors import BoxAccessors


def is_pseudo(node: Any, access: BoxAccessors, name: str) -> bool:
    """
    Check if the node is the named pseudo-element.

    Args:
        node: The node to check
        access: Provider facade
        name: Pseudo-element name, "before" and "::before" are equivalent

    Returns:
        False when no rule generated the node
    """
    if name.startswith("::"):
        name = name[2:]
    selector_text = access.selector_text(node)
    if not selector_text:
        return False
    return selector_text.endswith(f"::{name}")


def pseudo_one_of(node: Any, access: BoxAccessors, names: Iterable[str]) -> bool:
    return any(is_pseudo(node, access, name) for name in names)
