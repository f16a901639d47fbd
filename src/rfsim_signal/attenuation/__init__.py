# src/rfsim_signal/attenuation/__init__.py
from .lazy import LazyAttenuatedSignal

__all__ = [
    "LazyAttenuatedSignal",
]
