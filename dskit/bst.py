"""Binary search trees of linked nodes: search, insertion, deletion, sorting."""

from dskit.tree import TreeNode, inorder


def search_bst(root, key):
    """Return the node holding ``key``, or None if the key is absent."""
    node = root
    while node is not None:
        if key == node.data:
            return node
        node = node.left if key < node.data else node.right
    return None


def insert_bst(root, key):
    """Insert ``key`` and return the root; a key already present is ignored."""
    new_node = TreeNode(key)
    if root is None:
        return new_node
    node = root
    while True:
        if key < node.data:
            if node.left is None:
                node.left = new_node
                break
            node = node.left
        elif key > node.data:
            if node.right is None:
                node.right = new_node
                break
            node = node.right
        else:
            break
    return root


def delete_bst(root, key):
    """Remove ``key`` and return the root, which may have changed.

    A node with two children takes the smallest key of its right subtree.
    Deleting a key that is absent leaves the tree unchanged.
    """
    parent = None
    node = root
    while node is not None and key != node.data:
        parent = node
        node = node.left if key < node.data else node.right
    if node is None:
        return root

    if node.left is None or node.right is None:
        child = node.left if node.left is not None else node.right
        if parent is None:
            return child
        if parent.left is node:
            parent.left = child
        else:
            parent.right = child
        return root

    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.data = successor.data
    node.right = delete_bst(node.right, successor.data)
    return root


def sort_by_bst(values):
    """Return the distinct values in ascending order, sorted through a BST."""
    root = None
    for value in values:
        root = insert_bst(root, value)
    return inorder(root)