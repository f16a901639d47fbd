# src/rfsim_signal/spectrum/exceptions.py
"""
Defines the diagnosable exceptions for the spectrum and channel catalog subsystem.

Two very different failure modes live here:

- `SlotIndexError` is a caller error raised at call time whenever a frequency slot
  or channel index falls outside a spectrum's declared range.
- `DefinitionInvariantViolation` is raised while a spectrum or channel catalog is
  being *defined* (typically at import time). It signals a broken static catalog,
  never a recoverable runtime condition.
"""
from dataclasses import dataclass
from typing import Any, Optional

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class SlotIndexError(DiagnosableError, IndexError):
    """
    Raised when a frequency slot identity or index is not valid for a spectrum.

    Inherits from `IndexError` so that generic sequence-handling code can catch it.
    """
    spectrum_name: str
    slot: Any
    details: str

    def __str__(self):
        return f"Invalid slot {self.slot!r} for spectrum '{self.spectrum_name}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Frequency Slot Index Out Of Range",
            details=self.details,
            suggestion="Use a slot member of the spectrum's own slot enumeration, or an integer index in [0, num_frequencies).",
            context={'spectrum': self.spectrum_name, 'user_input': repr(self.slot)}
        )


@dataclass()
class DefinitionInvariantViolation(DiagnosableError):
    """
    Raised when a spectrum or channel group definition violates one of its static
    invariants (e.g., the centre slot of a channel does not sit on the standard
    centre frequency). Detected once, when the definition is created.
    """
    definition_name: str
    details: str
    spectrum_name: Optional[str] = None

    def __str__(self):
        return f"Invalid definition '{self.definition_name}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Catalog Definition Invariant Violation",
            details=self.details,
            suggestion="This is a configuration error in a static spectrum or channel catalog. Fix the catalog definition; it cannot be recovered from at runtime.",
            context={'spectrum': self.spectrum_name, 'channel': self.definition_name}
        )
