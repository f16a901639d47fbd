# src/rfsim_signal/cache/__init__.py
"""
Exposes the public interface of the cache package.
"""
from .service import WavelengthCache

__all__ = [
    "WavelengthCache",
]
