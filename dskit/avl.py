"""AVL trees: height-balanced binary search trees with rotations."""

from dskit.tree import TreeNode


def calc_height(node):
    """Return the number of levels below and including ``node``."""
    if node is None:
        return 0
    return 1 + max(calc_height(node.left), calc_height(node.right))


def calc_balance(node):
    """Return the balance factor: left height minus right height."""
    if node is None:
        return 0
    return calc_height(node.left) - calc_height(node.right)


def rotate_ll(node):
    """Rotate right around ``node`` and return the new subtree root."""
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    return pivot


def rotate_rr(node):
    """Rotate left around ``node`` and return the new subtree root."""
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    return pivot


def rotate_rl(node):
    """Rotate the right child right, then ``node`` left; return the new root."""
    node.right = rotate_ll(node.right)
    return rotate_rr(node)


def rotate_lr(node):
    """Rotate the left child left, then ``node`` right; return the new root."""
    node.left = rotate_rr(node.left)
    return rotate_ll(node)


def insert_avl(root, key):
    """Insert ``key``, rebalance, and return the new root; duplicates are ignored."""
    if root is None:
        return TreeNode(key)
    if key < root.data:
        root.left = insert_avl(root.left, key)
    elif key > root.data:
        root.right = insert_avl(root.right, key)
    else:
        return root

    balance = calc_balance(root)
    if balance > 1:
        if key < root.left.data:
            return rotate_ll(root)
        return rotate_lr(root)
    if balance < -1:
        if key < root.right.data:
            return rotate_rl(root)
        return rotate_rr(root)
    return root


def search_avl(root, key):
    """Return the node holding ``key``, or None."""
    node = root
    while node is not None:
        if key == node.data:
            return node
        node = node.left if key < node.data else node.right
    return None


def format_preorder(root):
    """Return the tree as ``(root (left)(right))`` text in preorder."""
    if root is None:
        return ""
    return f"({root.data} {format_preorder(root.left)}{format_preorder(root.right)})"