# --- src/rfsim_signal/units.py ---
import pint
import logging

logger = logging.getLogger(__name__)
ureg = pint.UnitRegistry()
Quantity = ureg.Quantity
logger.info("Pint Unit Registry initialized.")

# --- Canonical dimensionality objects for explicit checks ---
FREQUENCY_DIMENSIONALITY = ureg.parse_expression('Hz').dimensionality


def is_dimension_string(dimension: str) -> bool:
    """True if `dimension` names a unit pint can parse (e.g. 'dimensionless', 'm', 'Hz')."""
    try:
        ureg.parse_expression(dimension)
    except (pint.PintError, AttributeError, ValueError, TypeError, SyntaxError):
        return False
    return True
