# src/rfsim_signal/config/__init__.py
from .parser import AttenuationChainParser, AttenuationChainConfig
from .exceptions import ConfigParsingError, ConfigSchemaError

__all__ = [
    "AttenuationChainParser",
    "AttenuationChainConfig",
    "ConfigParsingError",
    "ConfigSchemaError",
]
