"""Shape registry.

The Ocean owns every shape of a document. Shapes live in a slot table
addressed by ``SquidRef`` handles; each slot carries a generation counter
that is bumped on removal, so a handle to a removed shape never resolves
again even after its slot is reused.
"""

from collections.abc import Iterable, Iterator

import structlog

from photosquid.core.squid import HANDLE_RADIUS, Squid
from photosquid.domain.camera import Camera
from photosquid.domain.context_menu import ContextMenu
from photosquid.domain.selection import (
    NewSelection,
    Selection,
    SelectOutcome,
    SquidRef,
    TrySelectResult,
    selection_contains,
)
from photosquid.domain.vec import Vec2

logger = structlog.get_logger(__name__)


class Ocean:
    """Generation-checked arena of shapes."""

    def __init__(self) -> None:
        self._slots: list[Squid | None] = []
        self._generations: list[int] = []
        self._free: list[int] = []

    def insert(self, squid: Squid) -> SquidRef:
        """Add a shape and get a handle to it."""
        if self._free:
            index = self._free.pop()
            self._slots[index] = squid
        else:
            index = len(self._slots)
            self._slots.append(squid)
            self._generations.append(0)

        reference = SquidRef(index, self._generations[index])
        logger.debug("Squid inserted", index=index, generation=reference.generation, squid=repr(squid))
        return reference

    def remove(self, reference: SquidRef) -> Squid | None:
        """Remove a shape. Stale handles are ignored.

        Returns:
            The removed shape, or None if the handle did not resolve
        """
        squid = self.get(reference)
        if squid is None:
            return None

        self._slots[reference.index] = None
        self._generations[reference.index] += 1
        self._free.append(reference.index)
        logger.debug("Squid removed", index=reference.index, squid=repr(squid))
        return squid

    def get(self, reference: SquidRef) -> Squid | None:
        """Resolve a handle, or None if its shape has been removed."""
        index, generation = reference
        if not 0 <= index < len(self._slots):
            return None
        if self._generations[index] != generation:
            return None
        return self._slots[index]

    def __contains__(self, reference: object) -> bool:
        return isinstance(reference, SquidRef) and self.get(reference) is not None

    def __len__(self) -> int:
        return len(self._slots) - len(self._free)

    def items(self) -> Iterator[tuple[SquidRef, Squid]]:
        """Iterate (handle, shape) pairs in slot order."""
        for index, squid in enumerate(self._slots):
            if squid is not None:
                yield SquidRef(index, self._generations[index]), squid

    def get_squids_highest(self) -> list[tuple[SquidRef, Squid]]:
        """Shapes newest-first, the order used for hit-testing."""
        return sorted(self.items(), key=lambda item: item[1].get_creation_time(), reverse=True)

    def get_squids_lowest(self) -> list[tuple[SquidRef, Squid]]:
        """Shapes oldest-first, the order used for drawing and export."""
        return sorted(self.items(), key=lambda item: item[1].get_creation_time())

    def try_select(
        self,
        underneath: Vec2,
        camera: Camera,
        selections: Iterable[Selection],
    ) -> TrySelectResult:
        """Hit-test shapes newest-first.

        A shape that is already selected keeps the selection when the cursor
        is over its body or close to one of its handles, so that grabbing a
        handle that sticks out of the silhouette does not deselect it.

        Args:
            underneath: Screen-space cursor position
            camera: Current camera
            selections: Current selections

        Returns:
            A new selection, ``PRESERVE`` or ``DISCARD``
        """
        selections = list(selections)

        for reference, squid in self.get_squids_highest():
            selected = selection_contains(selections, reference)

            if selected:
                for handle in squid.get_opaque_handles():
                    if camera.apply(handle).distance(underneath) < HANDLE_RADIUS * 2.0:
                        return SelectOutcome.PRESERVE

            new_selection: NewSelection | None = squid.try_select(underneath, camera, reference)
            if new_selection is not None:
                return SelectOutcome.PRESERVE if selected else new_selection

        return SelectOutcome.DISCARD

    def try_context_menu(self, underneath: Vec2, camera: Camera) -> ContextMenu | None:
        """Open the context menu of the topmost shape under the cursor."""
        for _, squid in self.get_squids_highest():
            menu = squid.try_context_menu(underneath, camera)
            if menu is not None:
                return menu
        return None

    def clone(self) -> "Ocean":
        """Deep copy that keeps handles valid."""
        ocean = Ocean()
        ocean._slots = [None if squid is None else squid.clone() for squid in self._slots]
        ocean._generations = list(self._generations)
        ocean._free = list(self._free)
        return ocean
