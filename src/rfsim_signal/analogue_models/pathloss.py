# src/rfsim_signal/analogue_models/pathloss.py
"""
Reference free-space path loss model.

Every slot's power is multiplied by

    wavelength(slot)^2 / (16 * pi^2) * distance^(-alpha)

which is the Friis equation for unit antenna gains when alpha = 2. The squared
wavelengths only depend on the spectrum, so they come from the process-wide
`WavelengthCache`.
"""
import logging
import math
from typing import Dict

import numpy as np

from ..cache.service import WavelengthCache
from ..constants import NEGLIGIBLE_PATHLOSS_SQR_DISTANCE_M2, SIXTEEN_PI_SQUARED
from ..geometry import Coord
from .base import AnalogueModel, register_analogue_model
from .exceptions import AnalogueModelError

logger = logging.getLogger(__name__)


@register_analogue_model("SimplePathloss")
class SimplePathloss(AnalogueModel):
    """Free-space path loss with a configurable path loss exponent `alpha`."""

    def __init__(self, alpha: float):
        alpha = float(alpha)
        if not math.isfinite(alpha) or alpha < 0:
            raise ValueError(f"Path loss exponent alpha must be finite and non-negative, got {alpha}.")
        self.alpha: float = alpha
        # The distance factor is computed from the squared distance: d^-a == (d^2)^(-a/2).
        self._alpha_half: float = alpha * 0.5

    @classmethod
    def declare_parameters(cls) -> Dict[str, str]:
        return {"alpha": "dimensionless"}

    def never_increases_power(self) -> bool:
        # alpha >= 0 and sqrdist > 1 keep the distance factor <= 1; wavelength^2 / 16pi^2 < 1
        # holds for every slot above ~24 MHz.
        return self.alpha >= 0

    def filter_signal(self, signal, sender_pos: Coord, receiver_pos: Coord) -> None:
        if not isinstance(sender_pos, Coord) or not isinstance(receiver_pos, Coord):
            raise AnalogueModelError(
                model_name=self.model_type_str,
                details=f"Positions must be Coord instances, got {type(sender_pos).__name__} and {type(receiver_pos).__name__}."
            )
        sqr_distance = receiver_pos.sqrdist(sender_pos)
        if not math.isfinite(sqr_distance):
            raise AnalogueModelError(
                model_name=self.model_type_str,
                details=f"Distance between sender {sender_pos} and receiver {receiver_pos} is not finite."
            )
        if sqr_distance <= NEGLIGIBLE_PATHLOSS_SQR_DISTANCE_M2:
            return  # negligible attenuation

        wavelengths_squared = WavelengthCache.get_wavelengths_squared(signal.spectrum)
        dist_factor = math.pow(sqr_distance, -self._alpha_half) / SIXTEEN_PI_SQUARED
        np.multiply(signal.power_levels, wavelengths_squared * dist_factor, out=signal.power_levels)

    def __repr__(self) -> str:
        return f"SimplePathloss(alpha={self.alpha})"
