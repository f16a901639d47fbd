# src/rfsim_signal/errors.py
"""
Diagnostic error base shared by every subpackage.

Each package exception is a `DiagnosableError` and renders its own report through
`format_diagnostic_report`, so callers can print one uniform block regardless of
whether a spectrum definition, a signal operation, a filter or a config failed.
"""
import logging
from abc import abstractmethod
from typing import Any, Dict, Protocol
from typing import runtime_checkable

logger = logging.getLogger(__name__)

_CONTEXT_LABELS = (
    ('spectrum', "Spectrum"),
    ('channel', "Channel"),
    ('model', "Analogue Model"),
    ('source_file', "Source File"),
)
_RULE = "=" * 72


@runtime_checkable
class Diagnosable(Protocol):
    def get_diagnostic_report(self) -> str:
        ...


class DiagnosableError(Exception, Diagnosable):
    """Base class of all rfsim_signal exceptions."""

    @abstractmethod
    def get_diagnostic_report(self) -> str:
        raise NotImplementedError


def format_diagnostic_report(error_type: str, details: str, suggestion: str, context: Dict[str, Any]) -> str:
    """
    Renders a multi-line report. Empty context entries are omitted; `user_input`
    is quoted so stray whitespace stays visible.
    """
    lines = ["", f"{' RFSim Signal diagnostic ':=^72}", f"{'Error Type:':<16}{error_type}"]
    for key, label in _CONTEXT_LABELS:
        if value := context.get(key):
            lines.append(f"{label + ':':<16}{value}")
    if user_input := context.get('user_input'):
        lines.append(f"{'User Input:':<16}'{user_input}'")

    lines.append("")
    lines.append("Details:")
    lines.extend(f"  {line}" for line in details.splitlines())
    if suggestion:
        lines.append("")
        lines.append("Suggestion:")
        lines.extend(f"  {line}" for line in suggestion.splitlines())
    lines.append(_RULE)
    return "\n".join(lines)
