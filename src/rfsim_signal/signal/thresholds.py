# src/rfsim_signal/signal/thresholds.py
"""
Threshold predicates over a single signal.

These are the building blocks of the lazy attenuation pipeline, but they are pure
functions and usable on their own.

Note the deliberate asymmetry: the frequency and channel checks are strict
(`power < threshold`), while `below_everywhere` only fails if some slot is
strictly *above* the threshold, so a slot exactly at the threshold still counts
as "below everywhere".
"""
import numpy as np

from ..spectrum.base import SlotLike
from ..spectrum.channels import ChannelGroup
from .signal import Signal


def below_at_frequency(signal: Signal, slot: SlotLike, threshold: float) -> bool:
    return bool(signal.at(slot) < threshold)


def below_at_channel(signal: Signal, group: ChannelGroup, threshold: float) -> bool:
    return bool(np.all(group.values(signal) < threshold))


def below_everywhere(signal: Signal, threshold: float) -> bool:
    return not bool(np.any(signal.power_levels > threshold))
