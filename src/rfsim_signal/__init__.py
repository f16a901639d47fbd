# src/rfsim_signal/__init__.py
import logging
from .log_config import setup_logging

setup_logging()
logger = logging.getLogger(__name__)
logger.info("RFSim Signal package initialized.")

from .units import ureg, pint, Quantity
from .errors import DiagnosableError
from .geometry import Coord
from .spectrum import (
    Spectrum, SPECTRUM_REGISTRY, register_spectrum, Spectrum80211Slot, SPECTRUM_80211,
    ChannelGroup, ChannelView, ITSG5_CHANNELS, WaveChannel,
    SlotIndexError, DefinitionInvariantViolation,
)
from .signal import (
    Signal, offset_by_time, below_at_frequency, below_at_channel, below_everywhere,
    StructuralMismatchError, IncompatibleSignalWindow, IncompatibleSpectrum,
)
from .analogue_models import (
    AnalogueModel, ANALOGUE_MODEL_REGISTRY, register_analogue_model, SimplePathloss, AnalogueModelError,
)
from .cache import WavelengthCache
from .attenuation import LazyAttenuatedSignal
from .config import AttenuationChainParser, AttenuationChainConfig, ConfigParsingError, ConfigSchemaError

__all__ = [
    # Units
    "ureg", "pint", "Quantity",
    # Geometry
    "Coord",
    # Spectrum & Channels
    "Spectrum", "SPECTRUM_REGISTRY", "register_spectrum", "Spectrum80211Slot", "SPECTRUM_80211",
    "ChannelGroup", "ChannelView", "ITSG5_CHANNELS", "WaveChannel",
    # Signal
    "Signal", "offset_by_time", "below_at_frequency", "below_at_channel", "below_everywhere",
    # Analogue Models
    "AnalogueModel", "ANALOGUE_MODEL_REGISTRY", "register_analogue_model", "SimplePathloss",
    # Services
    "WavelengthCache", "LazyAttenuatedSignal",
    # Configuration
    "AttenuationChainParser", "AttenuationChainConfig",
    # Errors (Actionable Diagnostics)
    "DiagnosableError", "SlotIndexError", "DefinitionInvariantViolation",
    "StructuralMismatchError", "IncompatibleSignalWindow", "IncompatibleSpectrum",
    "AnalogueModelError", "ConfigParsingError", "ConfigSchemaError",
]
