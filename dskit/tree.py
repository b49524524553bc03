"""Linked binary trees: traversals and basic measurements."""

from dataclasses import dataclass
from typing import Any, Optional

from dskit.queues import LinkedQueue


@dataclass(eq=False)
class TreeNode:
    """A binary tree node; nodes compare by identity."""

    data: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def preorder(node):
    """Return the node data in root-left-right order."""
    if node is None:
        return []
    return [node.data, *preorder(node.left), *preorder(node.right)]


def inorder(node):
    """Return the node data in left-root-right order."""
    if node is None:
        return []
    return [*inorder(node.left), node.data, *inorder(node.right)]


def postorder(node):
    """Return the node data in left-right-root order."""
    if node is None:
        return []
    return [*postorder(node.left), *postorder(node.right), node.data]


def levelorder(root):
    """Return the node data level by level, left to right."""
    result = []
    if root is None:
        return result
    queue = LinkedQueue()
    queue.enqueue(root)
    while not queue.is_empty():
        node = queue.dequeue()
        result.append(node.data)
        for child in (node.left, node.right):
            if child is not None:
                queue.enqueue(child)
    return result


def count_nodes(node):
    """Return the number of nodes in the tree."""
    if node is None:
        return 0
    return 1 + count_nodes(node.left) + count_nodes(node.right)


def count_leaves(node):
    """Return the number of nodes without children."""
    if node is None:
        return 0
    if node.left is None and node.right is None:
        return 1
    return count_leaves(node.left) + count_leaves(node.right)


def height(node):
    """Return the number of levels in the tree."""
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))


def mirror(node):
    """Swap left and right children throughout the tree, in place; return it."""
    if node is not None:
        node.left, node.right = node.right, node.left
        mirror(node.left)
        mirror(node.right)
    return node


def node_level(root, target, level=1):
    """Return the level of ``target`` below ``root`` (root at ``level``), or 0."""
    if root is None:
        return 0
    if root is target:
        return level
    found = node_level(root.left, target, level + 1)
    if found > 0:
        return found
    return node_level(root.right, target, level + 1)