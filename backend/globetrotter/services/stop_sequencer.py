"""
Ordering operations for a trip's stops.

The list position is the render order. Each stop also carries an `order`
sort key which may go non-contiguous after deletions; `renumber` rewrites it
densely, as the itinerary store does on every save.

Works with anything exposing `id` and `order` attributes: ORM rows, pydantic
schemas, or plain objects.
"""

import logging
from typing import Callable, Optional, Sequence

logger = logging.getLogger(__name__)


def next_order(items: Sequence) -> int:
    """Sort key for an item appended after `items`."""
    orders = [i.order for i in items if i.order is not None]
    return max(orders) + 1 if orders else 0


def move_stop(stops: Sequence, from_index: int, to_index: int) -> list:
    """
    Move one stop, keeping everyone else's relative order.

    Out-of-bounds indices leave the list unchanged.
    """
    result = list(stops)
    size = len(result)
    if not (0 <= to_index < size) or not (0 <= from_index < size):
        return result
    item = result.pop(from_index)
    result.insert(to_index, item)
    return result


def add_stop(stops: Sequence, new_stop) -> list:
    new_stop.order = next_order(stops)
    return [*stops, new_stop]


def delete_stop(stops: Sequence, stop_id) -> list:
    if stop_id is None:
        return list(stops)
    return [s for s in stops if s.id != stop_id]


def update_stop(stops: Sequence, stop_id, **changes) -> list:
    """Apply field changes to the matching stop in place."""
    for stop in stops:
        if stop_id is not None and stop.id == stop_id:
            for field, value in changes.items():
                if field in ("id", "order"):
                    continue
                if not hasattr(stop, field):
                    logger.debug(f"Ignoring unknown stop field {field!r}")
                    continue
                setattr(stop, field, value)
            break
    return list(stops)


def renumber(stops: Sequence) -> list:
    for position, stop in enumerate(stops):
        stop.order = position
    return list(stops)


class StopSequencer:
    """
    Editing buffer for one trip's stops.

    Tracks whether there are unsaved changes and notifies subscribers after
    every effective mutation.
    """

    def __init__(self, stops: Optional[Sequence] = None, on_change: Optional[Callable] = None):
        self._stops = list(stops or [])
        self.dirty = False
        self._listeners: list[Callable] = []
        if on_change is not None:
            self.subscribe(on_change)

    @property
    def stops(self) -> list:
        return list(self._stops)

    def __len__(self) -> int:
        return len(self._stops)

    def subscribe(self, callback: Callable) -> None:
        self._listeners.append(callback)

    def unsubscribe(self, callback: Callable) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _commit(self, stops: list) -> None:
        self._stops = stops
        self.dirty = True
        for callback in list(self._listeners):
            callback(self)

    def add(self, stop) -> None:
        self._commit(add_stop(self._stops, stop))

    def delete(self, stop_id) -> bool:
        remaining = delete_stop(self._stops, stop_id)
        if len(remaining) == len(self._stops):
            return False
        self._commit(remaining)
        return True

    def move(self, from_index: int, to_index: int) -> bool:
        size = len(self._stops)
        if not (0 <= to_index < size) or not (0 <= from_index < size):
            return False
        if from_index == to_index:
            return False
        self._commit(move_stop(self._stops, from_index, to_index))
        return True

    def move_up(self, index: int) -> bool:
        return self.move(index, index - 1)

    def move_down(self, index: int) -> bool:
        return self.move(index, index + 1)

    def update(self, stop_id, **changes) -> bool:
        if not any(s.id == stop_id for s in self._stops if stop_id is not None):
            return False
        self._commit(update_stop(self._stops, stop_id, **changes))
        return True

    def renumber(self) -> list:
        self._stops = renumber(self._stops)
        return self.stops

    def mark_saved(self, stops: Optional[Sequence] = None) -> None:
        if stops is not None:
            self._stops = list(stops)
        self.dirty = False
