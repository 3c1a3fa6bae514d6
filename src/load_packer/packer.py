"""Greedy multi-bin packer with bin escalation."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from load_packer.geometry import ORIGIN, Axis, Pivot, RotationType, candidate_pivot
from load_packer.models import Bin, Item

logger = logging.getLogger(__name__)

# (bin, its item list) pairs and (item, rotation, position) triples
Snapshot = tuple[
    list[tuple[Bin, list[Item]]],
    list[tuple[Item, RotationType, Pivot]],
]


class Packer:
    """
    Packs a queue of items into a set of bins.

    A Packer is single-owner: `pack()` mutates the bins' item lists and the
    items' rotation/position in place, so it must not be called concurrently,
    nor on bins or items shared with another Packer that is packing.
    """

    def __init__(
        self,
        bins: Optional[list[Bin]] = None,
        items: Optional[list[Item]] = None,
    ) -> None:
        self.bins: list[Bin] = list(bins or [])
        self.items: list[Item] = list(items or [])
        self.unfit_items: list[Item] = []

    def add_bin(self, *bins: Bin) -> None:
        self.bins.extend(bins)

    def add_item(self, *items: Item) -> None:
        self.items.extend(items)

    def pack(self) -> None:
        """
        Pack every queued item into a bin, or move it to `unfit_items`.

        Bins are sorted smallest first and items largest first, once. The
        largest remaining item picks the smallest bin it fits in, then that bin
        is filled with as many of the remaining items as possible.
        """
        requested = len(self.items)
        self.bins.sort(key=lambda b: b.volume)
        self.items.sort(key=lambda i: i.volume, reverse=True)

        while self.items:
            fitted = self.find_fitted_bin(self.items[0])
            if fitted is None:
                logger.debug(f"No bin fits {self.items[0].name}, marking unfit")
                self.unfit_item()
                continue
            self.items = self.pack_to_bin(fitted, self.items)

        logger.info(
            f"packed={requested - len(self.unfit_items)}, "
            f"unfit={len(self.unfit_items)}, "
            f"bins_used={sum(1 for b in self.bins if b.items)}"
        )

    def unfit_item(self) -> None:
        if not self.items:
            return
        self.unfit_items.append(self.items.pop(0))

    def find_fitted_bin(self, item: Item) -> Optional[Bin]:
        """First bin (in bin order) that accepts `item` at the origin. Nothing is committed."""
        for b in self.bins:
            if b.find_placement(item, ORIGIN) is not None:
                return b
        return None

    def get_bigger_bin_than(self, b: Bin) -> Optional[Bin]:
        """First bin (in bin order) whose volume is strictly greater than `b`'s."""
        v = b.volume
        for b2 in self.bins:
            if b2.volume > v:
                return b2
        return None

    def pack_to_bin(self, b: Bin, items: list[Item]) -> list[Item]:
        """
        Fill `b` starting with `items[0]` and return the items left unpacked.

        `b` may be swapped for a bigger bin along the way (see `_fill`).
        """
        _, unpacked = self._fill(b, items)
        return unpacked

    def _fill(self, b: Bin, items: list[Item]) -> tuple[Bin, list[Item]]:
        """
        Returns the bin that ended up being filled and the unpacked items.

        If the head item does not fit at the origin, the next bigger bin is
        tried; with no bigger bin the whole batch is reported unpacked.
        """
        head = items[0]
        while not b.put_item(head, ORIGIN):
            bigger = self.get_bigger_bin_than(b)
            if bigger is None:
                return b, list(items)
            logger.debug(f"{head.name} does not fit {b.name}, trying {bigger.name}")
            b = bigger

        unpacked: list[Item] = []
        for item in items[1:]:
            if self._put_at_pivots(b, item):
                continue
            escalated = self._escalate(b, item)
            if escalated is None:
                unpacked.append(item)
            else:
                b = escalated
        return b, unpacked

    def _put_at_pivots(self, b: Bin, item: Item) -> bool:
        # axis-major, placed-item-minor
        for axis in Axis:
            for placed in b.items:
                pivot = candidate_pivot(placed.position, placed.get_dimension(), axis)
                if b.put_item(item, pivot):
                    return True
        return False

    def _escalate(self, b: Bin, item: Item) -> Optional[Bin]:
        """
        Move the whole load of `b` plus `item` into a strictly bigger bin.

        Walks up the chain of bigger bins. A failed attempt is rolled back
        before the next one. On success `b` is emptied and the bin now holding
        the load is returned.
        """
        candidate = self.get_bigger_bin_than(b)
        while candidate is not None:
            batch = list(b.items) + [item]
            snapshot = self._snapshot(batch)
            target, left = self._fill(candidate, batch)
            if not left:
                logger.debug(f"Moved {len(batch)} items from {b.name} to {target.name}")
                b.items.clear()
                return target
            logger.debug(f"{candidate.name} cannot take the load of {b.name}, rolling back")
            self._restore(snapshot)
            candidate = self.get_bigger_bin_than(candidate)
        return None

    def _snapshot(self, batch: Iterable[Item]) -> Snapshot:
        bins_state = [(b, list(b.items)) for b in self.bins]
        tracked = {id(i): i for b in self.bins for i in b.items}
        tracked.update((id(i), i) for i in batch)
        items_state = [(i, i.rotation_type, i.position) for i in tracked.values()]
        return bins_state, items_state

    @staticmethod
    def _restore(snapshot: Snapshot) -> None:
        bins_state, items_state = snapshot
        for b, contents in bins_state:
            b.items[:] = contents
        for i, rotation_type, position in items_state:
            i.rotation_type = rotation_type
            i.position = position
