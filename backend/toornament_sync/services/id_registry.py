"""
Identifier registry: dense integer surrogate keys for Toornament string ids.

One registry per entity category (stages, groups, rounds, matches,
participants) per conversion run. Categories never share a key space.
"""

from typing import Dict


class IdRegistry:
    """Get-or-create keyed counter.

    The first distinct external id gets 0, the next one 1, and so on.
    Looking up an id and registering it are the same operation; there is no
    removal or reset.
    """

    def __init__(self):
        self._ids: Dict[str, int] = {}
        self._next_id = 0

    def get(self, external_id: str) -> int:
        """Return the surrogate id for external_id, assigning the next one if unseen."""
        surrogate_id = self._ids.get(external_id)
        if surrogate_id is None:
            surrogate_id = self._next_id
            self._ids[external_id] = surrogate_id
            self._next_id += 1
        return surrogate_id

    __call__ = get

    def mapping(self) -> Dict[str, int]:
        """Snapshot of the external id -> surrogate id mapping, in first-seen order."""
        return dict(self._ids)

    def __len__(self) -> int:
        return self._next_id

    def __repr__(self) -> str:
        return f"IdRegistry(size={self._next_id})"
