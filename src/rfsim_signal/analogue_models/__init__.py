# src/rfsim_signal/analogue_models/__init__.py
import logging
logger = logging.getLogger(__name__)

# Import base first to define registry and decorator
from .base import AnalogueModel, ANALOGUE_MODEL_REGISTRY, register_analogue_model
from .exceptions import AnalogueModelError
# Import concrete models to trigger registration
from .pathloss import SimplePathloss

logger.info(f"Available analogue model types: {list(ANALOGUE_MODEL_REGISTRY.keys())}")

__all__ = [
    "AnalogueModel",
    "ANALOGUE_MODEL_REGISTRY",
    "register_analogue_model",
    "SimplePathloss",
    "AnalogueModelError",
]
