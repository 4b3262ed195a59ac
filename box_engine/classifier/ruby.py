"""
Ruby role classifier.
"""

from enum import Enum
from typing import Any, Optional

from .accessors import BoxAccessors
from .categories import INTERNAL_RUBY_DISPLAYS, RUBY_BASE_CONTAINER_ELEMENT
from .style import style_equals


class RubyRole(Enum):
    BASE = "ruby-base"
    ANNOTATION = "ruby-text"
    ANNOTATION_CONTAINER = "ruby-text-container"
    BASE_CONTAINER = "rbc"


def ruby_base(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("ruby-base",))


def ruby_annotation(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("ruby-text",))


def ruby_annotation_container(node: Any, access: BoxAccessors) -> bool:
    return style_equals(node, access, "display", ("ruby-text-container",))


def ruby_base_container(node: Any, access: BoxAccessors) -> bool:
    """There is no display keyword for base containers, so this goes by element kind."""
    return access.node_name(node) == RUBY_BASE_CONTAINER_ELEMENT


def internal_ruby_box(node: Any, access: BoxAccessors) -> bool:
    """Ruby bases, annotations, base containers and annotation containers."""
    if style_equals(node, access, "display", INTERNAL_RUBY_DISPLAYS):
        return True
    return ruby_base_container(node, access)


def ruby_role(node: Any, access: BoxAccessors) -> Optional[RubyRole]:
    """The ruby role of the node's box, or None outside the ruby model."""
    if ruby_base(node, access):
        return RubyRole.BASE
    if ruby_annotation(node, access):
        return RubyRole.ANNOTATION
    if ruby_annotation_container(node, access):
        return RubyRole.ANNOTATION_CONTAINER
    if ruby_base_container(node, access):
        return RubyRole.BASE_CONTAINER
    return None
