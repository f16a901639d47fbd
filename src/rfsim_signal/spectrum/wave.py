# src/rfsim_signal/spectrum/wave.py
"""
The IEEE 802.11p (WAVE) 10 MHz channel plan, expressed on top of `SPECTRUM_80211`.

Channels are identified by their IEEE channel number and described by their
centre frequency. `channel_group` maps a channel onto the three 5 MHz slots of
`SPECTRUM_80211` it occupies.
"""
from enum import IntEnum
from typing import Dict, List, Tuple

from .channels import ChannelGroup
from .spectrum80211 import SPECTRUM_80211


class WaveChannel(IntEnum):
    CRIT_SOL = 172
    SCH1 = 174
    SCH2 = 176
    CCH = 178
    SCH3 = 180
    SCH4 = 182
    HPPS = 184


# Must stay ordered by frequency.
_CENTER_FREQUENCIES_HZ: Dict[WaveChannel, float] = {
    WaveChannel.CRIT_SOL: 5.86e9,
    WaveChannel.SCH1: 5.87e9,
    WaveChannel.SCH2: 5.88e9,
    WaveChannel.CCH: 5.89e9,
    WaveChannel.SCH3: 5.90e9,
    WaveChannel.SCH4: 5.91e9,
    WaveChannel.HPPS: 5.92e9,
}

CHANNEL_HALF_SPACING_HZ = 5e6


def center_frequency(channel: WaveChannel) -> float:
    """Centre frequency of a WAVE channel in Hz."""
    return _CENTER_FREQUENCIES_HZ[WaveChannel(channel)]


def channel_frequencies(channel: WaveChannel) -> Tuple[float, float, float]:
    """The three slot frequencies (Hz) a 10 MHz channel spans: cf - 5 MHz, cf, cf + 5 MHz."""
    cf = center_frequency(channel)
    return (cf - CHANNEL_HALF_SPACING_HZ, cf, cf + CHANNEL_HALF_SPACING_HZ)


def channels() -> List[WaveChannel]:
    """All WAVE channels in frequency order."""
    return list(_CENTER_FREQUENCIES_HZ)


def channel_group(channel: WaveChannel) -> ChannelGroup:
    """Resolves a WAVE channel onto the slots of `SPECTRUM_80211`."""
    channel = WaveChannel(channel)
    slots = [SPECTRUM_80211.index_of_frequency(freq_hz / 1e6) for freq_hz in channel_frequencies(channel)]
    return ChannelGroup(
        channel.name, SPECTRUM_80211, slots, center_frequency_mhz=center_frequency(channel) / 1e6
    )
