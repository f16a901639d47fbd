# src/rfsim_signal/spectrum/itsg5.py
"""
European channels for ITS-G5 (EN 302 663 V1.2.1) in the 5 GHz band.

Only valid for use with `SPECTRUM_80211`. Each channel is 10 MHz wide and spans
three adjacent 5 MHz slots; its centre slot is checked against the standard
centre frequency when this module is imported.
"""
import logging
from typing import Dict

from .channels import ChannelGroup
from .spectrum80211 import SPECTRUM_80211, Spectrum80211Slot as S

logger = logging.getLogger(__name__)

CCH = ChannelGroup("CCH", SPECTRUM_80211, (S.CH179, S.CH180, S.CH181), center_frequency_mhz=5900)
SCH1 = ChannelGroup("SCH1", SPECTRUM_80211, (S.CH175, S.CH176, S.CH177), center_frequency_mhz=5880)
SCH2 = ChannelGroup("SCH2", SPECTRUM_80211, (S.CH177, S.CH178, S.CH179), center_frequency_mhz=5890)
SCH3 = ChannelGroup("SCH3", SPECTRUM_80211, (S.CH173, S.CH174, S.CH175), center_frequency_mhz=5870)
SCH4 = ChannelGroup("SCH4", SPECTRUM_80211, (S.CH171, S.CH172, S.CH173), center_frequency_mhz=5860)
SCH5 = ChannelGroup("SCH5", SPECTRUM_80211, (S.CH181, S.CH182, S.CH183), center_frequency_mhz=5910)
SCH6 = ChannelGroup("SCH6", SPECTRUM_80211, (S.CH183, S.CH184, S.CH185), center_frequency_mhz=5920)

ITSG5_CHANNELS: Dict[str, ChannelGroup] = {
    group.name: group for group in (CCH, SCH1, SCH2, SCH3, SCH4, SCH5, SCH6)
}

logger.debug(f"ITS-G5 channel catalog validated: {sorted(ITSG5_CHANNELS)}")
