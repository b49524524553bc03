"""A restaurant waiting list kept in a doubly linked list."""

from dataclasses import dataclass

from dskit.errors import UnderflowError
from dskit.lists import DoublyLinkedList


@dataclass(frozen=True)
class Waiting:
    """One party on the waiting list."""

    id: int
    nperson: int
    info: str


class WaitingList:
    """Parties waiting in order, each with an automatically assigned number."""

    def __init__(self):
        self._entries = DoublyLinkedList()
        self._last_id = 0

    def reserve(self, nperson, info):
        """Add a party at the end and return its entry."""
        self._last_id += 1
        entry = Waiting(self._last_id, nperson, info)
        self._entries.insert(len(self._entries), entry)
        return entry

    def find(self, wid):
        """Return ``(teams, people)`` waiting ahead of ``wid``, or None."""
        teams = people = 0
        for entry in self._entries:
            if entry.id == wid:
                return teams, people
            teams += 1
            people += entry.nperson
        return None

    def cancel(self, wid):
        """Remove party ``wid`` and return its entry, or None if absent."""
        for pos, entry in enumerate(list(self._entries)):
            if entry.id == wid:
                return self._entries.delete(pos)
        return None

    def delay(self, wid):
        """Move party ``wid`` back one place; return whether it moved.

        The last party cannot be delayed.
        """
        entries = list(self._entries)
        for pos, entry in enumerate(entries[:-1]):
            if entry.id == wid:
                self._entries.delete(pos)
                self._entries.insert(pos + 1, entry)
                return True
        return False

    def service(self):
        """Remove and return the party at the head of the list."""
        if self._entries.is_empty():
            raise UnderflowError()
        return self._entries.delete(0)

    def format(self):
        """Return one line per waiting party, in order."""
        return "\n".join(
            f" No {entry.id:2d}: {entry.nperson} persons {entry.info}"
            for entry in self._entries
        )

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)