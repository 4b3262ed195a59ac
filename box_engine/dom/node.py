"""
Node implementation for the reference DOM.
This module implements the subset of the DOM Node interface the box
inspector navigates: parent, children and siblings.
"""

from enum import IntEnum
from typing import List, Optional


class NodeType(IntEnum):
    """Node types as defined in the DOM specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9


class Node:
    """
    Base Node implementation for the reference DOM.

    Keeps the parent/child/sibling links in sync whenever the tree changes.
    """

    def __init__(self, node_type: NodeType, owner_document: Optional['Document'] = None):
        """
        Initialize a new Node.

        Args:
            node_type: The type of this node
            owner_document: The document that owns this node
        """
        self.node_type = node_type
        self.owner_document = owner_document

        # Node relationships
        self.parent_node: Optional['Node'] = None
        self.child_nodes: List['Node'] = []
        self.previous_sibling: Optional['Node'] = None
        self.next_sibling: Optional['Node'] = None

        self.node_name: str = "#node"
        self.node_value: Optional[str] = None

    @property
    def first_child(self) -> Optional['Node']:
        return self.child_nodes[0] if self.child_nodes else None

    @property
    def last_child(self) -> Optional['Node']:
        return self.child_nodes[-1] if self.child_nodes else None

    @property
    def children(self) -> List['Element']:
        """Get a list of child elements."""
        return [child for child in self.child_nodes if child.node_type == NodeType.ELEMENT_NODE]

    @property
    def parent_element(self) -> Optional['Element']:
        """Get the parent node if it is an element."""
        parent = self.parent_node
        if parent is not None and parent.node_type == NodeType.ELEMENT_NODE:
            return parent
        return None

    def append_child(self, child: 'Node') -> 'Node':
        """
        Append a child node to this node.

        Args:
            child: The node to append

        Returns:
            The appended node
        """
        return self.insert_before(child, None)

    def insert_before(self, new_child: 'Node', reference_child: Optional['Node'] = None) -> 'Node':
        """
        Insert a node before a reference node.

        Args:
            new_child: The node to insert
            reference_child: The reference node to insert before, or None to append

        Returns:
            The inserted node

        Raises:
            ValueError: If the reference node is not a child of this node, or
                the insertion would create a cycle
        """
        if new_child.contains(self):
            raise ValueError("Cannot insert a node into its own subtree")
        if reference_child is not None and reference_child.parent_node is not self:
            raise ValueError("Reference child not found in child nodes")

        if new_child.parent_node is not None:
            new_child.parent_node.remove_child(new_child)

        if reference_child is None:
            index = len(self.child_nodes)
        else:
            index = self.child_nodes.index(reference_child)

        self.child_nodes.insert(index, new_child)
        new_child.parent_node = self
        self._relink_siblings(index)
        return new_child

    def remove_child(self, child: 'Node') -> 'Node':
        """
        Remove a child node from this node.

        Args:
            child: The node to remove

        Returns:
            The removed node

        Raises:
            ValueError: If the node is not a child of this node
        """
        if child.parent_node is not self:
            raise ValueError("Child not found in child nodes")

        index = self.child_nodes.index(child)
        del self.child_nodes[index]
        child.parent_node = None
        child.previous_sibling = None
        child.next_sibling = None
        self._relink_siblings(index - 1 if index else 0)
        return child

    def _relink_siblings(self, index: int) -> None:
        """Refresh sibling links around ``index``."""
        for i in range(max(index - 1, 0), min(index + 2, len(self.child_nodes))):
            node = self.child_nodes[i]
            node.previous_sibling = self.child_nodes[i - 1] if i > 0 else None
            node.next_sibling = self.child_nodes[i + 1] if i + 1 < len(self.child_nodes) else None

    def has_child_nodes(self) -> bool:
        """Check if this node has any child nodes."""
        return len(self.child_nodes) > 0

    def contains(self, other: Optional['Node']) -> bool:
        """
        Check if this node is ``other`` or one of its ancestors.

        Args:
            other: The node to check

        Returns:
            True if this node contains the other node, False otherwise
        """
        current = other
        while current is not None:
            if current is self:
                return True
            current = current.parent_node
        return False

    def iter_descendants(self):
        """Yield descendant nodes in document order."""
        for child in self.child_nodes:
            yield child
            yield from child.iter_descendants()

    @property
    def text_content(self) -> str:
        """Concatenated text of all descendant text nodes."""
        if self.node_type == NodeType.TEXT_NODE:
            return self.node_value or ""
        return "".join(child.text_content for child in self.child_nodes
                       if child.node_type in (NodeType.TEXT_NODE, NodeType.ELEMENT_NODE))
