"""An English word dictionary kept in a binary search tree, with a command loop."""

from dataclasses import dataclass

from dskit.tree import TreeNode

_HELP = "\n**** i: insert, d: delete, s: search, p: print, q: quit ****: "


@dataclass(frozen=True)
class Entry:
    """A word and its meaning."""

    word: str
    meaning: str


def _max_node(node):
    while node.right is not None:
        node = node.right
    return node


class EnglishDictionary:
    """Words and meanings stored in a binary search tree ordered by word."""

    def __init__(self):
        self._root = None

    def insert(self, word, meaning):
        """Add a word; raise ValueError if it is already present."""
        entry = Entry(word, meaning)
        if self._root is None:
            self._root = TreeNode(entry)
            return entry
        node = self._root
        while True:
            if word == node.data.word:
                raise ValueError(f"word already present: {word}")
            side = "left" if word < node.data.word else "right"
            child = getattr(node, side)
            if child is None:
                setattr(node, side, TreeNode(entry))
                return entry
            node = child

    def search(self, word):
        """Return the entry for ``word``; raise KeyError if it is absent."""
        node = self._root
        while node is not None:
            if word == node.data.word:
                return node.data
            node = node.left if word < node.data.word else node.right
        raise KeyError(word)

    def delete(self, word):
        """Remove ``word`` and return its entry; raise KeyError if absent."""
        self.search(word)
        removed = []
        self._root = self._delete(self._root, word, removed)
        return removed[0]

    def _delete(self, node, word, removed):
        if node is None:
            return None
        if word < node.data.word:
            node.left = self._delete(node.left, word, removed)
            return node
        if word > node.data.word:
            node.right = self._delete(node.right, word, removed)
            return node
        if not removed:
            removed.append(node.data)
        if node.left is None:
            return node.right
        if node.right is None:
            return node.left
        predecessor = _max_node(node.left)
        node.data = predecessor.data
        node.left = self._delete(node.left, predecessor.data.word, removed)
        return node

    def display(self):
        """Return the tree as nested ``(left word:meaning right)`` groups."""

        def walk(node):
            if node is None:
                return ""
            return (
                f"({walk(node.left)}{node.data.word}:{node.data.meaning}"
                f"{walk(node.right)})"
            )

        return walk(self._root)

    def __len__(self):
        def count(node):
            if node is None:
                return 0
            return 1 + count(node.left) + count(node.right)

        return count(self._root)


def _ask(prompt):
    try:
        return input(prompt)
    except EOFError:
        return None


def main(argv=None):
    """Run the interactive dictionary on standard input and output."""
    dictionary = EnglishDictionary()
    while True:
        line = _ask(_HELP)
        if line is None:
            break
        command = line[:1]
        if command == "q":
            break
        if command == "i":
            word = _ask("word:")
            meaning = None if word is None else _ask("meaning:")
            if meaning is None:
                break
            try:
                dictionary.insert(word, meaning)
            except ValueError:
                print("\nThe word is already in the dictionary!")
        elif command == "d":
            word = _ask("word:")
            if word is None:
                break
            try:
                dictionary.delete(word)
            except KeyError:
                print("\nThe word is not in the dictionary!")
        elif command == "p":
            print(dictionary.display())
        elif command == "s":
            word = _ask("word:")
            if word is None:
                break
            try:
                print(f"meaning:{dictionary.search(word).meaning}")
            except KeyError:
                print("\nThe word is not in the dictionary!")
    return 0