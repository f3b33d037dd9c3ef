"""
Interaction controller

Owns the "current layout" on behalf of a UI surface and forwards drag,
resize and drop gestures to the pure layout engine. Also owns the only
asynchronous piece of the system: the deferred corrective collision pass.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Mapping, Optional, Sequence
import logging
import threading

from .layout import (
    LayoutEngine,
    LayoutItem,
    MoveResult,
    Placeholder,
    GridCell,
    get_item,
    layouts_equal,
    can_drag,
    can_resize,
)
from .types import EventKind

logger = logging.getLogger(__name__)

Listener = Callable[['LayoutEvent'], None]


@dataclass(frozen=True)
class LayoutEvent:
    """
    Notification sent to controller subscribers

    Attributes:
        kind: What happened ('drag', 'resize_stop', 'layout_change', ...)
        layout: Layout after the change
        item: Current state of the item involved, if any
        old_item: State of that item when the interaction started
        placeholder: Rectangle to render for the active interaction
        is_user_action: True for direct user placements, False for
            corrective passes and packer side effects
    """
    kind: EventKind
    layout: List[LayoutItem]
    item: Optional[LayoutItem] = None
    old_item: Optional[LayoutItem] = None
    placeholder: Optional[Placeholder] = None
    is_user_action: bool = False


class DeferredPass:
    """
    Single-shot, cancellable delayed callback

    Scheduling a new pass cancels the pending one. A pass that was already
    firing when it got superseded is dropped via a generation counter; the
    callback receives its generation so the owner can re-check it with
    is_current() under its own lock.
    """

    def __init__(self, delay_ms: int, timer_factory: Callable[..., Any] = threading.Timer):
        """
        Args:
            delay_ms: Delay before the callback runs (ms)
            timer_factory: Callable(interval_seconds, function) returning an
                object with start() and cancel(); threading.Timer by default
        """
        self.delay_ms = delay_ms
        self._timer_factory = timer_factory
        self._timer = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        """Whether a pass is scheduled and has not fired"""
        return self._timer is not None

    def is_current(self, generation: int) -> bool:
        """Whether generation is still the most recently scheduled pass"""
        with self._lock:
            return generation == self._generation

    def schedule(self, callback: Callable[[int], None]) -> int:
        """
        Run callback(generation) after the delay, replacing any pending pass

        Returns:
            Generation number of the scheduled pass
        """
        with self._lock:
            self._cancel_locked()
            self._generation += 1
            generation = self._generation

            def fire() -> None:
                with self._lock:
                    if generation != self._generation:
                        return
                    self._timer = None
                callback(generation)

            timer = self._timer_factory(self.delay_ms / 1000.0, fire)
            timer.daemon = True
            self._timer = timer
            timer.start()
            return generation

    def cancel(self) -> None:
        """Cancel the pending pass, if any"""
        with self._lock:
            self._cancel_locked()
            self._generation += 1

    def _cancel_locked(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None


class GridController:
    """
    Stateful orchestrator for one grid

    Holds the layout, the active placeholder and the pre-interaction
    snapshot. Every geometry decision is delegated to LayoutEngine.

    Example:
        >>> controller = GridController(LayoutEngine())
        >>> controller.sync(['a', 'b'])
        >>> controller.drag_start('a')
        >>> controller.drag('a', 3, 0)
        >>> controller.drag_stop('a', 3, 0)
    """

    def __init__(
        self,
        engine: Optional[LayoutEngine] = None,
        layout: Sequence[LayoutItem] = (),
        timer_factory: Callable[..., Any] = threading.Timer
    ):
        """
        Initialize controller

        Args:
            engine: Layout engine; defaults to LayoutEngine()
            layout: Initial layout, compacted on entry
            timer_factory: Timer constructor for the deferred pass
        """
        self.engine = engine or LayoutEngine()
        self._lock = threading.RLock()
        self._layout: List[LayoutItem] = self.engine.compact(layout)
        self._listeners: List[Listener] = []
        self.placeholder: Optional[Placeholder] = None
        self._old_layout: Optional[List[LayoutItem]] = None
        self._old_item: Optional[LayoutItem] = None
        self._deferred = DeferredPass(self.engine.interaction.collision_delay_ms, timer_factory)

    # ============================================================
    # STATE
    # ============================================================

    @property
    def layout(self) -> List[LayoutItem]:
        with self._lock:
            return list(self._layout)

    @property
    def deferred_pending(self) -> bool:
        with self._lock:
            return self._deferred.pending

    @property
    def container_height(self) -> int:
        with self._lock:
            return self.engine.container_height(self._layout)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener for LayoutEvents

        Returns:
            Callable that removes the listener
        """
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def _emit(self, kind: EventKind, **kwargs: Any) -> None:
        event = LayoutEvent(kind=kind, layout=list(self._layout), **kwargs)
        for listener in list(self._listeners):
            listener(event)

    def _layout_maybe_changed(self, old_layout: Optional[Sequence[LayoutItem]]) -> None:
        if old_layout is None:
            return
        if not layouts_equal(old_layout, self._layout):
            self._emit('layout_change')

    def _finish_interaction(self) -> None:
        old_layout = self._old_layout
        self.placeholder = None
        self._old_layout = None
        self._old_item = None
        self._layout_maybe_changed(old_layout)

    # ============================================================
    # SYNCHRONIZATION
    # ============================================================

    def sync(self, managed_ids: Iterable[str], declared: Optional[Mapping[str, Any]] = None) -> List[LayoutItem]:
        """
        Reconcile the layout with the managed ids

        Args:
            managed_ids: Ids of the items that should be on the grid
            declared: Optional preferred geometry for new ids

        Returns:
            The new layout
        """
        with self._lock:
            old_layout = self._layout
            self._layout = self.engine.synchronize(self._layout, managed_ids, declared)
            self._layout_maybe_changed(old_layout)
            return list(self._layout)

    # ============================================================
    # DRAG
    # ============================================================

    def drag_start(self, item_id: str) -> Optional[LayoutItem]:
        """
        Begin dragging an item

        Returns:
            The item, or None if it is missing or not draggable
        """
        with self._lock:
            item = get_item(self._layout, item_id)
            if item is None or not can_drag(item, self.engine.interaction.is_draggable):
                logger.debug(f"Drag start ignored for {item_id}")
                return None
            self._old_item = item
            self._old_layout = list(self._layout)
            self._emit('drag_start', item=item, old_item=item, is_user_action=True)
            return item

    def drag(self, item_id: str, x: int, y: int) -> MoveResult:
        """Apply one drag tick"""
        return self._move(item_id, x, y, 'drag')

    def drag_stop(self, item_id: str, x: int, y: int) -> MoveResult:
        """Finish a drag at (x, y)"""
        return self._move(item_id, x, y, 'drag_stop')

    def _move(self, item_id: str, x: int, y: int, kind: EventKind) -> MoveResult:
        final = kind == 'drag_stop'
        with self._lock:
            item = get_item(self._layout, item_id)
            if item is not None and not can_drag(item, self.engine.interaction.is_draggable):
                return MoveResult(layout=list(self._layout), status='disallowed', item=item, is_user_action=True)

            base_layout = list(self._layout)
            if self._old_layout is None:
                self._old_layout = base_layout
            deferred = self.engine.interaction.collision_delay_ms > 0
            result = self.engine.move(base_layout, item_id, x, y, is_user_action=True,
                                      resolve_collisions=not deferred)
            if not result.found:
                return result

            self._apply_move(result, kind, final)
            if deferred:
                self._deferred.schedule(
                    lambda generation: self._corrective_pass(
                        generation, base_layout, item_id, x, y, kind, final
                    )
                )
            return result

    def _apply_move(self, result: MoveResult, kind: EventKind, final: bool) -> None:
        self._layout = result.layout
        self.placeholder = None if final else result.placeholder
        self._emit(kind, item=result.item, old_item=self._old_item,
                   placeholder=self.placeholder, is_user_action=result.is_user_action)
        if final:
            self._finish_interaction()

    def _corrective_pass(
        self,
        generation: int,
        base_layout: List[LayoutItem],
        item_id: str,
        x: int,
        y: int,
        kind: EventKind,
        final: bool
    ) -> None:
        """Authoritative recompute of a move that was applied uncorrected"""
        with self._lock:
            # Superseded while waiting for the lock
            if not self._deferred.is_current(generation):
                logger.debug(f"Dropped stale corrective pass for {item_id}")
                return
            uncorrected = list(self._layout)
            result = self.engine.move(base_layout, item_id, x, y, is_user_action=True)
            logger.debug(f"Corrective pass for {item_id} at ({x},{y}): {result.status}")
            self._layout = result.layout
            if final:
                self._emit(kind, item=result.item, is_user_action=True)
                self._layout_maybe_changed(uncorrected)
            else:
                self.placeholder = result.placeholder
                self._emit(kind, item=result.item, old_item=self._old_item,
                           placeholder=self.placeholder, is_user_action=True)

    # ============================================================
    # RESIZE
    # ============================================================

    def resize_start(self, item_id: str) -> Optional[LayoutItem]:
        """
        Begin resizing an item

        Returns:
            The item, or None if it is missing or not resizable
        """
        with self._lock:
            item = get_item(self._layout, item_id)
            if item is None or not can_resize(item, self.engine.interaction.is_resizable):
                logger.debug(f"Resize start ignored for {item_id}")
                return None
            self._old_item = item
            self._old_layout = list(self._layout)
            self._emit('resize_start', item=item, old_item=item, is_user_action=True)
            return item

    def resize(self, item_id: str, w: int, h: int) -> MoveResult:
        """Apply one resize tick"""
        return self._resize(item_id, w, h, 'resize')

    def resize_stop(self, item_id: str, w: int, h: int) -> MoveResult:
        """Finish a resize at (w, h)"""
        return self._resize(item_id, w, h, 'resize_stop')

    def _resize(self, item_id: str, w: int, h: int, kind: EventKind) -> MoveResult:
        with self._lock:
            item = get_item(self._layout, item_id)
            if item is not None and not can_resize(item, self.engine.interaction.is_resizable):
                return MoveResult(layout=list(self._layout), status='disallowed', item=item)

            if self._old_layout is None:
                self._old_layout = list(self._layout)
            result = self.engine.resize(self._layout, item_id, w, h)
            if not result.found:
                return result
            self._apply_move(result, kind, kind == 'resize_stop')
            return result

    # ============================================================
    # DROP FROM OUTSIDE
    # ============================================================

    def drop_over(self, top: float, left: float) -> MoveResult:
        """
        Track an external item dragged over the grid at a pixel offset

        The first call inserts the dropping item at the nearest cell;
        later calls move it.
        """
        dropping = self.engine.interaction.dropping_item
        with self._lock:
            cell = self.engine.pixel_to_cell(top, left, dropping.w, dropping.h)
            if get_item(self._layout, dropping.id) is None:
                self._old_layout = list(self._layout)
                item = LayoutItem(id=dropping.id, x=cell.x, y=cell.y, w=dropping.w, h=dropping.h,
                                  static=False, is_draggable=True)
                self._old_item = item
                self._layout = self.engine.compact(self._layout + [item])
                logger.debug(f"Dropping item entered over ({cell.x},{cell.y})")
            return self._move(dropping.id, cell.x, cell.y, 'drag')

    def drop_leave(self) -> List[LayoutItem]:
        """Remove the dropping item after the pointer left the grid"""
        dropping_id = self.engine.interaction.dropping_item.id
        with self._lock:
            self._deferred.cancel()
            remaining = [item for item in self._layout if item.id != dropping_id]
            self._layout = self.engine.compact(remaining)
            self.placeholder = None
            self._old_layout = None
            self._old_item = None
            return list(self._layout)

    def drop(self) -> Optional[GridCell]:
        """
        Finish an external drop

        The dropping item is removed; the caller adds the real item at the
        returned cell (for instance through sync() with declared geometry).

        Returns:
            Cell where the item was dropped, or None if nothing was dropping
        """
        dropping_id = self.engine.interaction.dropping_item.id
        with self._lock:
            self._deferred.cancel()
            item = get_item(self._layout, dropping_id)
            if item is None:
                return None
            self._layout = [other for other in self._layout if other.id != dropping_id]
            self.placeholder = None
            self._old_layout = None
            self._old_item = None
            self._emit('drop', item=item, is_user_action=True)
            return GridCell(x=item.x, y=item.y)

    def cancel(self) -> None:
        """Abandon the active interaction"""
        with self._lock:
            self._deferred.cancel()
            self.placeholder = None
            self._old_layout = None
            self._old_item = None
