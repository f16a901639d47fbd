# tests/conftest.py
from enum import IntEnum
from typing import Dict, List

import pytest

from rfsim_signal.analogue_models.base import AnalogueModel
from rfsim_signal.analogue_models.exceptions import AnalogueModelError
from rfsim_signal.cache.service import WavelengthCache
from rfsim_signal.geometry import Coord
from rfsim_signal.signal.signal import Signal
from rfsim_signal.spectrum.base import Spectrum
from rfsim_signal.spectrum.channels import ChannelGroup


# --- A dummy 6-slot spectrum with two 3-slot channels ---

class DummySlot(IntEnum):
    F1 = 0
    F2 = 1
    F3 = 2
    F4 = 3
    F5 = 4
    F6 = 5


DUMMY_SPECTRUM = Spectrum("DummySpectrum", DummySlot, [1000, 2000, 3000, 4000, 5000, 6000])
DUMMY_CH1 = ChannelGroup("CH1", DUMMY_SPECTRUM, (DummySlot.F1, DummySlot.F2, DummySlot.F3))
DUMMY_CH2 = ChannelGroup("CH2", DUMMY_SPECTRUM, (DummySlot.F4, DummySlot.F5, DummySlot.F6))


def dummy_signal(power_levels, start_time=0.0, duration=5.0) -> Signal:
    return Signal(DUMMY_SPECTRUM, start_time, duration, power_levels)


# --- Analogue model test doubles ---

class ScalingModel(AnalogueModel):
    """
    Multiplies every slot by a constant factor. Records each application in a
    caller-owned log so tests can observe how many filters actually ran.
    """
    def __init__(self, factor: float, log: List[str], name: str = "scale", never_increases: bool = True):
        self.factor = factor
        self.log = log
        self.name = name
        self._never_increases = never_increases

    @classmethod
    def declare_parameters(cls) -> Dict[str, str]:
        return {"factor": "dimensionless"}

    def filter_signal(self, signal, sender_pos, receiver_pos):
        self.log.append(self.name)
        signal *= self.factor

    def never_increases_power(self) -> bool:
        return self._never_increases

    def __repr__(self):
        return f"ScalingModel('{self.name}', factor={self.factor})"


class FailingModel(AnalogueModel):
    """Always fails, like a model handed malformed geometry."""
    def __init__(self, log: List[str]):
        self.log = log

    @classmethod
    def declare_parameters(cls) -> Dict[str, str]:
        return {}

    def filter_signal(self, signal, sender_pos, receiver_pos):
        self.log.append("fail")
        raise AnalogueModelError(model_name="FailingModel", details="Cannot process this geometry.")

    def never_increases_power(self) -> bool:
        return True


# --- Fixtures ---

@pytest.fixture
def application_log() -> List[str]:
    return []


@pytest.fixture
def sender_pos() -> Coord:
    return Coord(0, 0, 2)


@pytest.fixture
def receiver_pos() -> Coord:
    return Coord(100, 0, 2)


@pytest.fixture
def clean_wavelength_cache():
    WavelengthCache.clear_process_cache()
    yield WavelengthCache
    WavelengthCache.clear_process_cache()
