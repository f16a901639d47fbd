# src/rfsim_signal/spectrum/__init__.py
import logging
logger = logging.getLogger(__name__)

from .exceptions import SlotIndexError, DefinitionInvariantViolation
from .base import Spectrum, SlotLike, SPECTRUM_REGISTRY, register_spectrum
from .spectrum80211 import Spectrum80211Slot, SPECTRUM_80211
from .channels import ChannelGroup, ChannelView
from .itsg5 import ITSG5_CHANNELS
from .wave import WaveChannel

logger.info(f"Available spectra: {list(SPECTRUM_REGISTRY.keys())}")

__all__ = [
    # Exceptions
    "SlotIndexError",
    "DefinitionInvariantViolation",
    # Spectrum model
    "Spectrum",
    "SlotLike",
    "SPECTRUM_REGISTRY",
    "register_spectrum",
    "Spectrum80211Slot",
    "SPECTRUM_80211",
    # Channel groups
    "ChannelGroup",
    "ChannelView",
    "ITSG5_CHANNELS",
    "WaveChannel",
]
