# src/rfsim_signal/analogue_models/exceptions.py
"""
Defines the canonical, diagnosable exception for analogue-model failures.
"""
from dataclasses import dataclass

from ..errors import DiagnosableError, format_diagnostic_report


@dataclass()
class AnalogueModelError(DiagnosableError):
    """
    Raised when an analogue model cannot process a signal, e.g. because the
    sender/receiver geometry is malformed.

    There is no rollback: the signal is left in whatever partially attenuated state
    it reached and must not be reused.
    """
    model_name: str
    details: str

    def __str__(self):
        return f"Analogue model '{self.model_name}' failed: {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Analogue Model Filter Failure",
            details=self.details,
            suggestion="Check the sender and receiver positions handed to the attenuation chain (finite Coord values). The affected signal is partially attenuated and must be discarded.",
            context={'model': self.model_name}
        )
