# src/rfsim_signal/spectrum/base.py
"""
The spectrum model: a fixed, ordered catalog of frequency slots.

A spectrum pairs an `IntEnum` of slot identities (dense, zero-based values) with a
lookup table of slot frequencies. Slot identities are plain data rather than
per-slot types, so any code that holds a slot member can index a power-level
vector with it directly.
"""
import logging
from enum import IntEnum
from typing import Dict, Sequence, Type, Union

import numpy as np

from ..units import Quantity
from .exceptions import DefinitionInvariantViolation, SlotIndexError

logger = logging.getLogger(__name__)

SlotLike = Union[IntEnum, int]


class Spectrum:
    """
    An immutable, ordered catalog of N frequency slots.

    Construction validates the definition: slot values must be exactly
    0..N-1 in declaration order, and there must be one finite, positive frequency
    per slot. Any violation raises `DefinitionInvariantViolation`.
    """

    def __init__(self, name: str, slots: Type[IntEnum], frequencies_mhz: Sequence[float]):
        self.name: str = name
        self.slots: Type[IntEnum] = slots

        slot_values = [int(member) for member in slots]
        if not slot_values:
            raise DefinitionInvariantViolation(
                definition_name=name, details="A spectrum needs at least one frequency slot.", spectrum_name=name
            )
        if slot_values != list(range(len(slot_values))):
            raise DefinitionInvariantViolation(
                definition_name=name,
                details=f"Slot indices must be dense and zero-based in declaration order, got {slot_values}.",
                spectrum_name=name,
            )

        freqs = np.array(frequencies_mhz, dtype=float)
        if freqs.ndim != 1 or len(freqs) != len(slot_values):
            raise DefinitionInvariantViolation(
                definition_name=name,
                details=f"Expected {len(slot_values)} slot frequencies, got {freqs.size}.",
                spectrum_name=name,
            )
        if not np.all(np.isfinite(freqs)) or np.any(freqs <= 0):
            raise DefinitionInvariantViolation(
                definition_name=name,
                details=f"All slot frequencies must be finite and positive, got {freqs.tolist()} MHz.",
                spectrum_name=name,
            )

        freqs.flags.writeable = False
        self._frequencies_mhz = freqs
        self._frequencies_hz = freqs * 1e6
        self._frequencies_hz.flags.writeable = False
        logger.debug(f"Defined spectrum '{name}' with {len(freqs)} slots ({freqs[0]} .. {freqs[-1]} MHz).")

    @property
    def num_frequencies(self) -> int:
        return len(self._frequencies_mhz)

    def __len__(self) -> int:
        return self.num_frequencies

    @property
    def frequencies_mhz(self) -> np.ndarray:
        """Read-only array of slot frequencies in MHz, in index order."""
        return self._frequencies_mhz

    @property
    def frequencies_hz(self) -> np.ndarray:
        """Read-only array of slot frequencies in Hz, in index order."""
        return self._frequencies_hz

    @property
    def is_frequency_ordered(self) -> bool:
        """True if frequencies strictly increase with the slot index."""
        return bool(np.all(np.diff(self._frequencies_mhz) > 0))

    def validate_index(self, slot: SlotLike) -> int:
        """
        Resolves a slot identity or plain integer index to a validated integer index.

        Members of a *different* slot enumeration are rejected even if their value
        happens to be in range, since they name a slot of another spectrum.
        """
        if isinstance(slot, IntEnum):
            if not isinstance(slot, self.slots):
                raise SlotIndexError(
                    spectrum_name=self.name, slot=slot,
                    details=f"Slot belongs to '{type(slot).__name__}', not to '{self.slots.__name__}'."
                )
            return int(slot)
        if isinstance(slot, (bool, np.bool_)) or not isinstance(slot, (int, np.integer)):
            raise SlotIndexError(
                spectrum_name=self.name, slot=slot,
                details=f"Slot must be a '{self.slots.__name__}' member or an integer, got {type(slot).__name__}."
            )
        index = int(slot)
        if not 0 <= index < self.num_frequencies:
            raise SlotIndexError(
                spectrum_name=self.name, slot=slot,
                details=f"Index {index} is outside [0, {self.num_frequencies})."
            )
        return index

    def slot(self, index: SlotLike) -> IntEnum:
        """Returns the slot enumeration member for an index."""
        return self.slots(self.validate_index(index))

    def frequency_mhz(self, slot: SlotLike) -> float:
        return float(self._frequencies_mhz[self.validate_index(slot)])

    def frequency_hz(self, slot: SlotLike) -> float:
        return float(self._frequencies_hz[self.validate_index(slot)])

    def frequency(self, slot: SlotLike) -> Quantity:
        """The frequency of a slot as a pint Quantity in MHz."""
        return Quantity(self.frequency_mhz(slot), 'MHz')

    def index_of_frequency(self, frequency_mhz: float) -> int:
        """Reverse lookup: the index of the slot sitting exactly on `frequency_mhz`."""
        matches = np.flatnonzero(np.isclose(self._frequencies_mhz, frequency_mhz, rtol=0.0, atol=1e-6))
        if len(matches) == 0:
            raise SlotIndexError(
                spectrum_name=self.name, slot=frequency_mhz,
                details=f"No slot has frequency {frequency_mhz} MHz."
            )
        return int(matches[0])

    def require_frequency(self, slot: SlotLike, expected_mhz: float, definition_name: str) -> None:
        """
        Definition-time assertion that `slot` sits on `expected_mhz`.
        Raises `DefinitionInvariantViolation` otherwise.
        """
        actual = self.frequency_mhz(slot)
        if actual != expected_mhz:
            raise DefinitionInvariantViolation(
                definition_name=definition_name,
                details=f"Slot {self.slot(slot).name} has frequency {actual} MHz, but the definition requires {expected_mhz} MHz.",
                spectrum_name=self.name,
            )

    def __repr__(self) -> str:
        return f"Spectrum(name='{self.name}', num_frequencies={self.num_frequencies})"


# --- Global Spectrum Registry ---

SPECTRUM_REGISTRY: Dict[str, Spectrum] = {}


def register_spectrum(spectrum: Spectrum) -> Spectrum:
    """
    Registers a spectrum definition under its name, making it available to the
    configuration parser.
    """
    if not isinstance(spectrum, Spectrum):
        raise TypeError(f"Expected a Spectrum instance, got {type(spectrum).__name__}.")
    if spectrum.name in SPECTRUM_REGISTRY:
        logger.warning(f"Spectrum '{spectrum.name}' is being redefined/overwritten.")
    SPECTRUM_REGISTRY[spectrum.name] = spectrum
    logger.info(f"Registered spectrum '{spectrum.name}' ({spectrum.num_frequencies} slots)")
    return spectrum
