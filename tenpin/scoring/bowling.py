"""Ten-pin bowling frame tracking and scoring engine."""
import logging
import threading
from typing import Dict, List, Sequence

from ..exceptions import GameOver, InvalidRoll
from ..schemas import FrameOut, GameSummary

logger = logging.getLogger(__name__)

PINS = 10


def _check_pins(pins) -> int:
    # bool is a subclass of int
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise InvalidRoll(f"pins must be an integer (got {pins!r})")
    if pins < 0:
        raise InvalidRoll("negative rolls are not allowed")
    if pins > PINS:
        raise InvalidRoll(f"roll of {pins} exceeds {PINS} pins")
    return pins


class Frame:
    """One or two rolls; a single roll of 10 finishes the frame as a strike."""

    def __init__(self) -> None:
        self.rolls: List[int] = []

    def record_roll(self, pins: int) -> None:
        pins = _check_pins(pins)
        if self.is_finished:
            raise InvalidRoll("frame already has all of its rolls")
        if self.pins_down + pins > PINS:
            raise InvalidRoll(
                f"roll of {pins} exceeds the number of pins left in the frame"
            )
        self.rolls.append(pins)

    @property
    def pins_down(self) -> int:
        return sum(self.rolls)

    @property
    def is_finished(self) -> bool:
        return len(self.rolls) == 2 or self.pins_down == PINS

    @property
    def is_spare(self) -> bool:
        return len(self.rolls) == 2 and self.pins_down == PINS

    @property
    def is_strike(self) -> bool:
        return len(self.rolls) == 1 and self.pins_down == PINS

    def snapshot(self) -> FrameOut:
        return FrameOut(
            rolls=tuple(self.rolls),
            pins_down=self.pins_down,
            is_strike=self.is_strike,
            is_spare=self.is_spare,
            is_finished=self.is_finished,
        )


def following_rolls(
    frames: Sequence[Frame], bonus_rolls: Sequence[int], index: int
) -> List[int]:
    """Pin counts after frame ``index``: later frames' rolls, then bonus rolls."""
    rolls = [pins for frame in frames[index + 1 :] for pins in frame.rolls]
    rolls.extend(bonus_rolls)
    return rolls


def _frame_score(
    frames: Sequence[Frame], bonus_rolls: Sequence[int], index: int, last: int
) -> int:
    frame = frames[index]
    if not frame.is_finished:
        return 0
    # The final frame's bonus rolls are added to the total separately.
    if index == last:
        return frame.pins_down
    if frame.is_spare:
        nxt = following_rolls(frames, bonus_rolls, index)
        return frame.pins_down + nxt[0] if nxt else 0
    if frame.is_strike:
        nxt = following_rolls(frames, bonus_rolls, index)
        return frame.pins_down + sum(nxt[:2]) if len(nxt) >= 2 else 0
    return frame.pins_down


class Game:
    """A single player's game of up to ``MAX_FRAMES`` frames plus bonus rolls."""

    MAX_FRAMES = 10

    def __init__(self) -> None:
        self._frames: List[Frame] = [Frame()]
        self._bonus_rolls: List[int] = []
        self._lock = threading.RLock()

    def _final_frame_finished(self) -> bool:
        return (
            len(self._frames) == self.MAX_FRAMES
            and self._frames[self.MAX_FRAMES - 1].is_finished
        )

    def _bonus_entitlement(self) -> int:
        final = self._frames[self.MAX_FRAMES - 1]
        if final.is_strike:
            return 2
        if final.is_spare:
            return 1
        return 0

    @property
    def bonus_rolls_owed(self) -> int:
        with self._lock:
            if not self._final_frame_finished():
                return 0
            return self._bonus_entitlement() - len(self._bonus_rolls)

    @property
    def is_over(self) -> bool:
        with self._lock:
            return self._final_frame_finished() and self.bonus_rolls_owed == 0

    @property
    def frames(self) -> tuple[FrameOut, ...]:
        with self._lock:
            return tuple(frame.snapshot() for frame in self._frames)

    @property
    def bonus_rolls(self) -> tuple[int, ...]:
        with self._lock:
            return tuple(self._bonus_rolls)

    def current_frame(self) -> FrameOut:
        with self._lock:
            return self._frames[-1].snapshot()

    def record_roll(self, pins: int) -> None:
        with self._lock:
            try:
                pins = _check_pins(pins)
                self._route_roll(pins)
            except InvalidRoll as exc:
                logger.debug("Rejected roll %r: %s", pins, exc)
                raise
            if self.is_over:
                logger.info("Game complete with score %d", self.score())

    def _route_roll(self, pins: int) -> None:
        if self._final_frame_finished():
            if self.bonus_rolls_owed == 0:
                logger.debug("Rejected roll %r: game is over", pins)
                raise GameOver()
            # Each bonus roll is a fresh rack, so no per-frame sum applies.
            self._bonus_rolls.append(pins)
            logger.debug("Bonus roll %d recorded", pins)
            return

        frame = self._frames[-1]
        if frame.is_finished:
            # Appended only once the roll is accepted.
            frame = Frame()
            frame.record_roll(pins)
            self._frames.append(frame)
        else:
            frame.record_roll(pins)
        logger.debug("Roll %d recorded in frame %d", pins, len(self._frames))

    def frame_scores(self) -> List[int]:
        with self._lock:
            last = self.MAX_FRAMES - 1
            return [
                _frame_score(self._frames, self._bonus_rolls, i, last)
                for i in range(len(self._frames))
            ]

    def score(self) -> int:
        with self._lock:
            return sum(self.frame_scores()) + sum(self._bonus_rolls)

    def summary(self) -> GameSummary:
        with self._lock:
            scores = self.frame_scores()
            return GameSummary(
                frames=list(self.frames),
                bonus_rolls=list(self._bonus_rolls),
                scores=scores,
                total=sum(scores) + sum(self._bonus_rolls),
                is_over=self.is_over,
            )


def new_game() -> Game:
    return Game()


def init_state(config: Dict) -> Game:
    """Start a new game; bowling takes no configuration options."""
    if config:
        logger.warning("Ignoring unsupported bowling config keys: %s", sorted(config))
    return new_game()


def apply(event: Dict, state: Game) -> Game:
    if event.get("type") != "ROLL":
        raise InvalidRoll("invalid bowling event")
    if "pins" not in event:
        raise InvalidRoll("bowling event is missing pins")
    state.record_roll(event["pins"])
    return state


def summary(state: Game) -> Dict:
    result = state.summary()
    return {
        "frames": [list(frame.rolls) for frame in result.frames],
        "bonusRolls": result.bonus_rolls,
        "scores": result.scores,
        "total": result.total,
        "isOver": result.is_over,
    }
