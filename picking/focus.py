"""Merging picking events from several cameras into per-pointer hit lists."""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Tuple

from picking.hits import HitRecord, PointerHits


def merge_pointer_hits(events: Iterable[PointerHits]) -> Dict[str, List[HitRecord]]:
    """
    Combine events into one ordered hit list per pointer.

    Hits from higher-order cameras come first (they draw on top); within a
    camera order, smaller depth comes first. Pointers with no events are
    absent from the result.
    """
    keyed: Dict[str, List[Tuple[float, float, int, HitRecord]]] = defaultdict(list)
    seq = 0
    for event in events:
        entries = keyed[event.pointer_id]
        for hit in event.picks:
            entries.append((-event.order, hit.depth, seq, hit))
            seq += 1

    return {
        pointer_id: [entry[3] for entry in sorted(entries, key=lambda e: e[:3])]
        for pointer_id, entries in keyed.items()
    }


def hits_for_pointer(events: Iterable[PointerHits], pointer_id: str) -> List[HitRecord]:
    """Merged hits of one pointer; empty if it hit nothing or had no camera."""
    return merge_pointer_hits(events).get(pointer_id, [])


def hovered_cells(events: Iterable[PointerHits]) -> Dict[str, HitRecord]:
    """Topmost hit per pointer."""
    return {
        pointer_id: hits[0]
        for pointer_id, hits in merge_pointer_hits(events).items()
        if hits
    }
