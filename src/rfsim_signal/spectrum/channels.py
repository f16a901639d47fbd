# src/rfsim_signal/spectrum/channels.py
"""
Named channel groups: ordered subsets of a spectrum's slots treated as a unit.

A `ChannelGroup` is pure definition data. Its `access` method returns a
`ChannelView`, a write-through window onto a signal's power-level storage, so
reading or overwriting a channel never copies the full power-level vector.
"""
import logging
import numbers
from typing import TYPE_CHECKING, Iterable, Iterator, Optional, Sequence, Tuple

import numpy as np

from .base import SlotLike, Spectrum
from .exceptions import DefinitionInvariantViolation, SlotIndexError

if TYPE_CHECKING:
    from ..signal.signal import Signal

logger = logging.getLogger(__name__)


class ChannelGroup:
    """
    A named, ordered subset of slot indices of one spectrum.

    Validation happens once, here, at definition time:
    - the spectrum's frequencies must increase with the slot index,
    - every slot must be valid for the spectrum (`SlotIndexError` otherwise),
    - slots must be unique and there must be at least one,
    - if `center_frequency_mhz` is given, the middle slot must sit on it.
    """

    def __init__(
        self,
        name: str,
        spectrum: Spectrum,
        slots: Sequence[SlotLike],
        center_frequency_mhz: Optional[float] = None,
    ):
        if not spectrum.is_frequency_ordered:
            raise DefinitionInvariantViolation(
                definition_name=name,
                details="Channel groups require a spectrum whose frequency ordering matches its index ordering.",
                spectrum_name=spectrum.name,
            )
        indices = tuple(spectrum.validate_index(slot) for slot in slots)
        if not indices:
            raise DefinitionInvariantViolation(
                definition_name=name, details="A channel group needs at least one slot.", spectrum_name=spectrum.name
            )
        if len(set(indices)) != len(indices):
            raise DefinitionInvariantViolation(
                definition_name=name, details=f"Duplicate slot indices in {indices}.", spectrum_name=spectrum.name
            )

        self.name: str = name
        self.spectrum: Spectrum = spectrum
        self.indices: Tuple[int, ...] = indices
        self._index_array = np.array(indices, dtype=np.intp)

        if center_frequency_mhz is not None:
            spectrum.require_frequency(self.center_index, center_frequency_mhz, name)
        logger.debug(f"Defined channel group '{name}' on '{spectrum.name}' with slots {indices}.")

    @property
    def size(self) -> int:
        return len(self.indices)

    def __len__(self) -> int:
        return self.size

    @property
    def center_index(self) -> int:
        """The middle slot index (the lower middle one for even sizes)."""
        return self.indices[(self.size - 1) // 2]

    @property
    def frequencies_mhz(self) -> np.ndarray:
        return self.spectrum.frequencies_mhz[self._index_array]

    def access(self, signal: "Signal") -> "ChannelView":
        """Returns a read/write view of `signal`'s power levels at this group's slots."""
        signal.require_spectrum(self.spectrum)
        return ChannelView(self, signal.power_levels)

    def values(self, signal: "Signal") -> np.ndarray:
        """Returns a copy of `signal`'s power levels at this group's slots, in declared order."""
        signal.require_spectrum(self.spectrum)
        return signal.power_levels[self._index_array]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"ChannelGroup(name='{self.name}', spectrum='{self.spectrum.name}', indices={self.indices})"


class ChannelView:
    """
    A write-through view of a power-level array restricted to a channel group.

    Position `i` in the view maps to slot `group.indices[i]` of the backing array.
    The view is only meant to live for the duration of a call; it does not own
    the storage.
    """
    __slots__ = ("_group", "_storage")

    def __init__(self, group: ChannelGroup, storage: np.ndarray):
        self._group = group
        self._storage = storage

    @property
    def group(self) -> ChannelGroup:
        return self._group

    def __len__(self) -> int:
        return self._group.size

    def _slot_index(self, position: int) -> int:
        if isinstance(position, bool) or not isinstance(position, numbers.Integral) or not 0 <= position < self._group.size:
            raise SlotIndexError(
                spectrum_name=self._group.spectrum.name, slot=position,
                details=f"Position {position} is outside channel '{self._group.name}' of size {self._group.size}."
            )
        return self._group.indices[position]

    def __getitem__(self, position: int) -> float:
        return float(self._storage[self._slot_index(position)])

    def __setitem__(self, position: int, value: float) -> None:
        self._storage[self._slot_index(position)] = value

    def __iter__(self) -> Iterator[float]:
        for index in self._group.indices:
            yield float(self._storage[index])

    def to_array(self) -> np.ndarray:
        return self._storage[list(self._group.indices)]

    def assign(self, values: Iterable[float]) -> None:
        """Overwrites all slots of the channel at once, in declared order."""
        new_values = np.asarray(list(values), dtype=float)
        if new_values.shape != (self._group.size,):
            raise ValueError(
                f"Channel '{self._group.name}' has {self._group.size} slots, got {new_values.size} values."
            )
        self._storage[list(self._group.indices)] = new_values

    def __repr__(self) -> str:
        return f"ChannelView('{self._group.name}', {self.to_array().tolist()})"
