"""Disjoint-set (union-find) over arbitrary hashable elements."""

from typing import Dict, Hashable, Iterable, List


class _Node:
    """One element of the partition; a root is its own parent."""

    __slots__ = ("data", "parent", "rank")

    def __init__(self, data):
        self.data = data
        self.parent = self
        self.rank = 0


class DisjointSet:
    """
    Union by rank with path halving.

    Elements are stored in a dict keyed by the element itself, so any
    hashable value works (points, room ids, tuples).
    """

    def __init__(self, entries: Iterable[Hashable] = ()):
        self._nodes: Dict[Hashable, _Node] = {}
        for entry in entries:
            self.add(entry)

    def __contains__(self, entry) -> bool:
        return entry in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def add(self, entry: Hashable) -> None:
        """Add entry as a singleton partition; no-op if already present."""
        if entry not in self._nodes:
            self._nodes[entry] = _Node(entry)

    def _find_node(self, entry) -> _Node:
        try:
            node = self._nodes[entry]
        except KeyError:
            raise KeyError(f"{entry!r} is not in the disjoint set") from None

        while node.parent is not node:
            node.parent = node.parent.parent
            node = node.parent
        return node

    def find(self, entry: Hashable) -> Hashable:
        """Return the representative element of entry's partition."""
        return self._find_node(entry).data

    def disjoint(self, one: Hashable, other: Hashable) -> bool:
        """True if the two entries are in different partitions."""
        return self._find_node(one) is not self._find_node(other)

    def union(self, one: Hashable, other: Hashable) -> bool:
        """
        Merge the partitions of two entries.

        Returns:
            True if two partitions were merged, False if already joined
        """
        n1 = self._find_node(one)
        n2 = self._find_node(other)
        if n1 is n2:
            return False

        if n1.rank < n2.rank:
            n1.parent = n2
        elif n2.rank < n1.rank:
            n2.parent = n1
        else:
            n2.parent = n1
            n1.rank += 1
        return True

    def groups(self) -> List[List[Hashable]]:
        """Partitions as lists, in first-insertion order of their members."""
        grouped: Dict[int, List[Hashable]] = {}
        for entry in self._nodes:
            grouped.setdefault(id(self._find_node(entry)), []).append(entry)
        return list(grouped.values())
