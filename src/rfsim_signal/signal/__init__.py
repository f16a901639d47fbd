# src/rfsim_signal/signal/__init__.py
from .exceptions import StructuralMismatchError, IncompatibleSignalWindow, IncompatibleSpectrum
from .signal import Signal, offset_by_time
from .thresholds import below_at_frequency, below_at_channel, below_everywhere

__all__ = [
    # Exceptions
    "StructuralMismatchError",
    "IncompatibleSignalWindow",
    "IncompatibleSpectrum",
    # Core Classes
    "Signal",
    "offset_by_time",
    # Threshold predicates
    "below_at_frequency",
    "below_at_channel",
    "below_everywhere",
]
