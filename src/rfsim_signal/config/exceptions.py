# src/rfsim_signal/config/exceptions.py
"""
Defines the diagnosable exceptions for loading attenuation chain configurations.

`ConfigParsingError` covers file-level problems (missing file, unreadable file,
invalid YAML). `ConfigSchemaError` covers documents that are valid YAML but do not
describe a valid attenuation chain, from Cerberus schema violations to unknown
spectrum or model names and dimensionally wrong parameter values.
"""
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from ..errors import DiagnosableError, format_diagnostic_report


def flatten_errors(errors: Any, prefix: str = "") -> List[Tuple[str, str]]:
    """
    Flattens a (possibly nested) Cerberus-style error tree into sorted
    `(dotted.field.path, message)` pairs.
    """
    flat: List[Tuple[str, str]] = []
    if isinstance(errors, dict):
        for key, value in errors.items():
            path = f"{prefix}.{key}" if prefix else str(key)
            flat.extend(flatten_errors(value, path))
    elif isinstance(errors, list):
        for item in errors:
            flat.extend(flatten_errors(item, prefix))
    else:
        flat.append((prefix, str(errors)))
    return sorted(flat)


@dataclass()
class ConfigParsingError(DiagnosableError):
    """Raised for file-system issues or invalid YAML syntax."""
    details: str
    file_path: str

    def __str__(self):
        return f"Configuration error in '{self.file_path}': {self.details}"

    def get_diagnostic_report(self) -> str:
        return format_diagnostic_report(
            error_type="YAML Parsing or File Error",
            details=self.details,
            suggestion="Ensure the file exists, has the correct read permissions, and contains valid YAML syntax.",
            context={'source_file': self.file_path}
        )


@dataclass()
class ConfigSchemaError(DiagnosableError):
    """Raised when a configuration does not describe a valid attenuation chain."""
    errors: Dict[str, Any]
    file_path: str

    def __str__(self):
        """Provides a concise, multi-line summary suitable for logging."""
        error_lines = [f"  - In field '{field}': {message}" for field, message in flatten_errors(self.errors)]
        return f"Attenuation chain validation failed for '{self.file_path}':\n" + "\n".join(error_lines)

    def get_diagnostic_report(self) -> str:
        flat = flatten_errors(self.errors)
        error_list_str = "\n".join(f"  - Field '{field}': {message}" for field, message in flat)
        details = (
            "The configuration does not describe a valid attenuation chain.\n"
            f"See details for {len(flat)} issue(s) below:\n\n{error_list_str}"
        )
        return format_diagnostic_report(
            error_type="Attenuation Chain Validation Error",
            details=details,
            suggestion="Check the spectrum and analogue model names against the registries and make sure every model gets exactly its declared parameters with compatible units.",
            context={'source_file': self.file_path}
        )
