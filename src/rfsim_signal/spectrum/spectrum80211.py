# src/rfsim_signal/spectrum/spectrum80211.py
"""
Selection of channels / frequencies in the 5 GHz band as defined in IEEE Std 802.11-2012.

Only the slots relevant to typical V2X applications (WAVE and ITS-G5) are included:
IEEE channel numbers 171..185, which sit on a 5 MHz raster from 5855 MHz to 5925 MHz.
A 10 MHz V2X channel therefore spans three adjacent slots.
"""
from enum import IntEnum

from .base import Spectrum, register_spectrum


class Spectrum80211Slot(IntEnum):
    CH171 = 0
    CH172 = 1
    CH173 = 2
    CH174 = 3
    CH175 = 4
    CH176 = 5
    CH177 = 6
    CH178 = 7
    CH179 = 8
    CH180 = 9
    CH181 = 10
    CH182 = 11
    CH183 = 12
    CH184 = 13
    CH185 = 14


def channel_number_to_mhz(channel_number: int) -> int:
    """IEEE 802.11 5 GHz channel numbering: f = 5000 MHz + 5 MHz * n."""
    return 5000 + 5 * channel_number


SPECTRUM_80211 = register_spectrum(Spectrum(
    "Spectrum80211",
    Spectrum80211Slot,
    [channel_number_to_mhz(171 + slot) for slot in Spectrum80211Slot],
))

# channel number <-> frequency relation
SPECTRUM_80211.require_frequency(Spectrum80211Slot.CH171, 5855, "Spectrum80211")
SPECTRUM_80211.require_frequency(Spectrum80211Slot.CH185, 5925, "Spectrum80211")
