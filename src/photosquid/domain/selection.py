"""Shape handles and selection records."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto
from typing import NamedTuple

from photosquid.domain.color import Color


class SquidRef(NamedTuple):
    """Stable handle to a shape stored in an Ocean.

    The generation distinguishes successive occupants of the same slot, so a
    handle to a removed shape never resolves to a newer one.
    """

    index: int
    generation: int


@dataclass(frozen=True, slots=True)
class Selection:
    """A selected shape, optionally narrowed to one of its parts.

    Attributes:
        squid_id: Handle of the selected shape
        limb_id: Sub-part index, or None for the whole shape
    """

    squid_id: SquidRef
    limb_id: int | None = None


@dataclass(frozen=True, slots=True)
class NewSelectionInfo:
    """Information reported to the UI when a shape becomes selected."""

    color: Color | None = None


@dataclass(frozen=True, slots=True)
class NewSelection:
    """A selection produced by hit-testing."""

    selection: Selection
    info: NewSelectionInfo


class SelectOutcome(Enum):
    """Hit-test outcomes that do not produce a new selection."""

    PRESERVE = auto()
    DISCARD = auto()


TrySelectResult = NewSelection | SelectOutcome


def selection_contains(selections: Iterable[Selection], reference: SquidRef) -> bool:
    """Check whether any selection refers to the given shape."""
    return any(selection.squid_id == reference for selection in selections)
