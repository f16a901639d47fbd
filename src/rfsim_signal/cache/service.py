# src/rfsim_signal/cache/service.py
"""
Provides the process-wide, per-spectrum cache of squared wavelengths used by the
free-space path loss model.
"""
import logging
import threading
from typing import Dict

import numpy as np

from ..constants import SPEED_OF_LIGHT_M_PER_S
from ..spectrum.base import Spectrum

logger = logging.getLogger(__name__)


class WavelengthCache:
    """
    A class-level (static) cache mapping a spectrum to the squared wavelength of
    each of its slots.

    Lifecycle is compute-once-then-freeze: the first request for a spectrum computes
    the table under a lock, marks the array read-only and stores it. Every later
    request, from any thread, returns that same array without locking. Entries are
    keyed by spectrum identity, so two distinct spectrum objects never share a table
    even if they carry the same name.
    """
    _process_cache: Dict[Spectrum, np.ndarray] = {}
    _lock = threading.Lock()
    _stats: Dict[str, int] = {'hits': 0, 'misses': 0}

    @classmethod
    def get_wavelengths_squared(cls, spectrum: Spectrum) -> np.ndarray:
        """Returns the read-only array of squared wavelengths (m^2) for `spectrum`, in index order."""
        table = cls._process_cache.get(spectrum)
        if table is not None:
            with cls._lock:
                cls._stats['hits'] += 1
            return table

        with cls._lock:
            table = cls._process_cache.get(spectrum)
            if table is None:
                cls._stats['misses'] += 1
                table = cls._make_wavelengths_squared(spectrum)
                cls._process_cache[spectrum] = table
                logger.debug(f"Cache MISS for spectrum '{spectrum.name}': computed {len(table)} squared wavelengths.")
            else:
                cls._stats['hits'] += 1
            return table

    @staticmethod
    def _make_wavelengths_squared(spectrum: Spectrum) -> np.ndarray:
        wavelengths = SPEED_OF_LIGHT_M_PER_S / spectrum.frequencies_hz
        table = wavelengths * wavelengths
        table.flags.writeable = False
        return table

    @classmethod
    def get_stats(cls) -> Dict[str, int]:
        """Returns a copy of the cache hit/miss statistics."""
        return cls._stats.copy()

    @classmethod
    def clear_process_cache(cls):
        """
        Explicitly clears the persistent process-level cache and its statistics.
        Intended for tests; production code never needs to recompute a table.
        """
        with cls._lock:
            cls._process_cache.clear()
            cls._stats = {'hits': 0, 'misses': 0}
        logger.info("Cleared the persistent process-level wavelength cache.")
