# src/rfsim_signal/signal/exceptions.py
"""
Defines the diagnosable exceptions raised by `Signal` arithmetic and access.

Binary operators between two signals are only defined when both signals live on
the same spectrum and cover exactly the same time window. This is a structural
precondition, not a numeric one: a violation is always a caller error and is
signalled immediately instead of being silently coerced.
"""
from abc import abstractmethod
from dataclasses import dataclass
from typing import Tuple

from ..errors import DiagnosableError, format_diagnostic_report


class StructuralMismatchError(DiagnosableError, ValueError):
    """
    Common base for all structural precondition failures between two signals.
    Also a `ValueError`, so generic numeric code can catch it.
    """
    @property
    @abstractmethod
    def details(self) -> str:
        """Human-readable description of the mismatch."""

    @property
    def spectrum_name(self) -> str:
        return ""

    def __str__(self):
        return self.details

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="Structural Signal Mismatch",
            details=self.details,
            suggestion="Only combine signals that share the same spectrum and exactly the same time window. Use scalar operations or offset_by_time() to align signals first.",
            context={'spectrum': self.spectrum_name}
        )


@dataclass()
class IncompatibleSignalWindow(StructuralMismatchError):
    """Raised when a binary operator is applied to signals with different time windows."""
    operation: str
    lhs_window: Tuple[float, float]
    rhs_window: Tuple[float, float]

    @property
    def details(self) -> str:
        return (
            f"Cannot apply '{self.operation}' to signals with different time windows: "
            f"{self.lhs_window} vs {self.rhs_window}."
        )


@dataclass()
class IncompatibleSpectrum(StructuralMismatchError):
    """Raised when a signal is combined with a signal or channel of another spectrum."""
    operation: str
    expected_spectrum: str
    actual_spectrum: str

    @property
    def spectrum_name(self) -> str:
        return self.expected_spectrum

    @property
    def details(self) -> str:
        return (
            f"Cannot apply '{self.operation}': expected a signal on spectrum "
            f"'{self.expected_spectrum}', got one on '{self.actual_spectrum}'."
        )
