# src/rfsim_signal/attenuation/lazy.py
"""
Provides `LazyAttenuatedSignal`, the owning wrapper around a signal that manages
lazy attenuation.

A `Signal` on its own is only what a transmission *could* look like. A
`LazyAttenuatedSignal` represents a concrete transmission as seen by one receiver:
the signal plus an ordered queue of analogue models still to be applied, plus the
sender/receiver geometry those models need.

Attenuation is performed lazily. Threshold predicates apply models from the front
of the queue only until they can answer, so a signal that is already known to be
too weak for reception never pays for the remaining (potentially expensive)
models. Models are always applied strictly in queue order; the only optimization
is stopping early, never skipping or reordering.

The early exit is taken regardless of `AnalogueModel.never_increases_power()`. If a
model still in the queue declares that it may increase power, a warning is logged
the first time an early exit leaves it unapplied.
"""
import logging
from collections import deque
from typing import Callable, Deque, Iterable, Tuple

from ..analogue_models.base import AnalogueModel
from ..geometry import Coord
from ..signal.signal import Signal
from ..signal.thresholds import below_at_channel, below_at_frequency, below_everywhere
from ..spectrum.base import SlotLike
from ..spectrum.channels import ChannelGroup

logger = logging.getLogger(__name__)


class LazyAttenuatedSignal:
    """
    A signal together with the analogue models still pending on it.

    Two observable states: *pending* (models left in the queue) and *resolved*
    (queue empty, the held signal is fully attenuated and every query is O(1)).

    Not safe for concurrent use. Distinct instances may share analogue model
    instances and be processed in parallel.

    Args:
        signal: The transmitted signal. It is copied; the caller's signal is never mutated.
        analogue_models: The models to apply, in application order.
        sender_pos: Position of the transmitter.
        receiver_pos: Position of the receiver.
    """

    def __init__(
        self,
        signal: Signal,
        analogue_models: Iterable[AnalogueModel],
        sender_pos: Coord,
        receiver_pos: Coord,
    ):
        self._signal: Signal = signal.copy()
        self._pending: Deque[AnalogueModel] = deque(analogue_models)
        self._sender_pos: Coord = sender_pos
        self._receiver_pos: Coord = receiver_pos
        self._applied_count: int = 0
        self._warned_early_exit: bool = False

    # --- State inspection (never drains) ---

    @property
    def signal(self) -> Signal:
        """The currently held, possibly only partially attenuated, signal. Do not mutate."""
        return self._signal

    @property
    def sender_pos(self) -> Coord:
        return self._sender_pos

    @property
    def receiver_pos(self) -> Coord:
        return self._receiver_pos

    @property
    def pending_models(self) -> Tuple[AnalogueModel, ...]:
        return tuple(self._pending)

    @property
    def pending_count(self) -> int:
        return len(self._pending)

    @property
    def applied_count(self) -> int:
        """Number of analogue models applied to the held signal so far."""
        return self._applied_count

    @property
    def is_resolved(self) -> bool:
        return not self._pending

    # --- Threshold predicates ---

    def is_below_threshold_everywhere(self, threshold: float) -> bool:
        """True if no slot of the attenuated signal is above `threshold`."""
        return self._drain_until(lambda: below_everywhere(self._signal, threshold))

    def is_below_threshold_at_channel(self, group: ChannelGroup, threshold: float) -> bool:
        """True if every slot of `group` in the attenuated signal is below `threshold`."""
        return self._drain_until(lambda: below_at_channel(self._signal, group, threshold))

    def is_below_threshold_at_frequency(self, slot: SlotLike, threshold: float) -> bool:
        """True if the attenuated signal's power at `slot` is below `threshold`."""
        return self._drain_until(lambda: below_at_frequency(self._signal, slot, threshold))

    # --- Full resolution ---

    def resolve(self) -> Signal:
        """
        Applies all remaining analogue models and returns the fully attenuated signal.
        Idempotent: once resolved, no further models are applied and the same signal
        object is returned.
        """
        while self._pending:
            self._apply_next_analogue_model()
        return self._signal

    attenuated_signal = resolve

    # --- Drain machinery ---

    def _drain_until(self, predicate: Callable[[], bool]) -> bool:
        while self._pending:
            if predicate():
                self._note_early_exit()
                return True
            self._apply_next_analogue_model()
        return predicate()

    def _apply_next_analogue_model(self) -> None:
        model = self._pending.popleft()
        logger.debug(
            f"Applying analogue model {model!r} ({self._applied_count + 1} applied, {len(self._pending)} pending)."
        )
        try:
            model.filter_signal(self._signal, self._sender_pos, self._receiver_pos)
        except Exception:
            logger.error(
                f"Analogue model {model!r} failed after {self._applied_count} successful application(s); "
                f"the signal is left partially attenuated."
            )
            raise
        self._applied_count += 1

    def _note_early_exit(self) -> None:
        if self._warned_early_exit:
            return
        unsafe = [model for model in self._pending if not model.never_increases_power()]
        if unsafe:
            self._warned_early_exit = True
            logger.warning(
                f"Threshold answered early while {len(unsafe)} pending model(s) may increase power "
                f"({', '.join(repr(m) for m in unsafe)}); the answer may differ from full resolution."
            )

    def __repr__(self) -> str:
        return (
            f"LazyAttenuatedSignal(applied={self._applied_count}, pending={len(self._pending)}, "
            f"signal={self._signal!r})"
        )
