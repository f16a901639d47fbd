# --- src/rfsim_signal/constants.py ---
import logging
import math

from .units import Quantity

logger = logging.getLogger(__name__)

# --- Physical Constants ---

#: Speed of light in vacuum, exact by SI definition.
SPEED_OF_LIGHT = Quantity(299792458.0, 'm/s')

#: Plain float mirror of SPEED_OF_LIGHT for use in vectorized numpy code.
SPEED_OF_LIGHT_M_PER_S: float = float(SPEED_OF_LIGHT.to('m/s').magnitude)

#: The (4*pi)^2 = 16*pi^2 denominator of the Friis free-space equation.
SIXTEEN_PI_SQUARED: float = 16.0 * math.pi * math.pi

# --- Numerical Constants for Attenuation ---

#: Squared sender/receiver distance (m^2) at or below which free-space path loss
#: is treated as negligible. Avoids the near-field blow-up of the far-field formula.
NEGLIGIBLE_PATHLOSS_SQR_DISTANCE_M2: float = 1.0

logger.debug("Defined core constants: SPEED_OF_LIGHT, SIXTEEN_PI_SQUARED, NEGLIGIBLE_PATHLOSS_SQR_DISTANCE_M2")
