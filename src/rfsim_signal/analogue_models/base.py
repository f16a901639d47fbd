# src/rfsim_signal/analogue_models/base.py

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Dict

from ..geometry import Coord
from ..units import is_dimension_string

if TYPE_CHECKING:
    from ..signal.signal import Signal

logger = logging.getLogger(__name__)


class AnalogueModel(ABC):
    """
    The abstract base class for all analogue models.

    An analogue model is a filter applying one physical effect (path loss,
    shadowing, ...) to a signal. Instances are shared between many signals and
    threads, so `filter_signal` may only mutate the signal it is handed, never the
    model itself.
    """
    model_type_str: ClassVar[str] = "BaseAnalogueModel"

    @classmethod
    @abstractmethod
    def declare_parameters(cls) -> Dict[str, str]:
        """Declare constructor parameter names and their expected physical dimensions as strings."""
        pass

    @abstractmethod
    def filter_signal(self, signal: "Signal", sender_pos: Coord, receiver_pos: Coord) -> None:
        """
        Attenuates `signal` in place for a transmission from `sender_pos` to `receiver_pos`.

        Raises:
            AnalogueModelError: If the model cannot process the given geometry or signal.
        """
        pass

    @abstractmethod
    def never_increases_power(self) -> bool:
        """True if the output power at every slot is never greater than the input power."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# --- Global Analogue Model Registry and Decorator ---

ANALOGUE_MODEL_REGISTRY: Dict[str, type[AnalogueModel]] = {}


def register_analogue_model(type_str: str):
    """
    A class decorator to register an analogue model class in the global registry,
    making it available to the attenuation chain configuration parser.
    """
    def decorator(cls: type[AnalogueModel]):
        if not issubclass(cls, AnalogueModel):
            raise TypeError(f"Class {cls.__name__} must inherit from AnalogueModel.")

        # Enforce 'declare_parameters' contract at registration time.
        try:
            params = cls.declare_parameters()
            if not isinstance(params, dict) or not all(isinstance(k, str) and isinstance(v, str) for k, v in params.items()):
                raise TypeError(
                    f"Analogue model class '{cls.__name__}' violates API contract. "
                    f"declare_parameters() must return a Dict[str, str], but returned a value of type '{type(params).__name__}'."
                )
        except Exception as e:
            raise TypeError(
                f"A failure occurred while attempting to validate the API contract of "
                f"analogue model class '{cls.__name__}'. Error during call to declare_parameters(): {e}"
            ) from e

        unknown = [dim for dim in params.values() if not is_dimension_string(dim)]
        if unknown:
            raise TypeError(f"Analogue model class '{cls.__name__}' declares unknown parameter dimension(s): {unknown}.")

        if type_str in ANALOGUE_MODEL_REGISTRY:
            logger.warning(f"Analogue model type '{type_str}' is being redefined/overwritten.")
        cls.model_type_str = type_str
        ANALOGUE_MODEL_REGISTRY[type_str] = cls
        logger.info(f"Registered analogue model type '{type_str}' -> {cls.__name__}")
        return cls
    return decorator
