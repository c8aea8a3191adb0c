import itertools
from typing import Any, Dict, Iterator, Optional


class NodeChain:
    """
    Singly linked chain stored as an id-addressed node arena.

    The chain always starts with a sentinel node (``head``) that never holds a
    value, so splicing at the front needs no special case. Only primitive link
    operations live here: no bounds checks and no size bookkeeping.
    """

    def __init__(self):
        self._id_iter = itertools.count()
        self.nodes: Dict[int, Dict[str, Any]] = {}
        self.head = self._new_node(None)["id"]

    def __len__(self) -> int:
        return len(self.nodes) - 1

    def _new_node(self, value):
        node_id = next(self._id_iter)
        node = {"id": node_id, "value": value, "next": None}
        self.nodes[node_id] = node
        return node

    # ---------- Links ----------

    def next_of(self, node_id: int) -> Optional[int]:
        return self.nodes[node_id]["next"]

    def value_of(self, node_id: int):
        return self.nodes[node_id]["value"]

    def set_value(self, node_id: int, value):
        self.nodes[node_id]["value"] = value

    def splice_after(self, prev_id: int, value) -> int:
        """Create a node holding ``value`` right after ``prev_id``; return its id."""
        prev = self.nodes[prev_id]
        node = self._new_node(value)
        node["next"] = prev["next"]
        prev["next"] = node["id"]
        return node["id"]

    def unlink_after(self, prev_id: int):
        """Detach and discard the node following ``prev_id``; return its value."""
        prev = self.nodes[prev_id]
        removed = self.nodes.pop(prev["next"])
        prev["next"] = removed["next"]
        return removed["value"]

    def truncate_after(self, node_id: int) -> int:
        """Drop every node after ``node_id``. Returns how many were dropped."""
        current = self.nodes[node_id]["next"]
        self.nodes[node_id]["next"] = None
        dropped = 0
        while current is not None:
            current = self.nodes.pop(current)["next"]
            dropped += 1
        return dropped

    # ---------- Traversal ----------

    def walk(self, count: int, start: Optional[int] = None) -> int:
        """Follow ``next`` ``count`` times from ``start`` (the head by default)."""
        current = self.head if start is None else start
        for _ in range(count):
            current = self.nodes[current]["next"]
        return current

    def values(self) -> Iterator[Any]:
        current = self.nodes[self.head]["next"]
        while current is not None:
            node = self.nodes[current]
            yield node["value"]
            current = node["next"]
