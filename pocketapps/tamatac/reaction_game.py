"""Reaction-time mini-game: tap the target as soon as it appears."""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from enum import Enum

from pocketapps.tamatac.achievements import CLOSE_SYMBOL, OK_SYMBOL
from pocketapps.tamatac.pattern_game import Sound

MAX_ROUNDS = 3
MIN_DELAY_MS = 1000
MAX_DELAY_MS = 3500
GOOD_TIME_MS = 400
GREAT_TIME_MS = 250
TARGET_TIMEOUT_MS = 3000
RESULT_DELAY_MS = 1500


class Phase(Enum):
    """Where a round stands."""

    WAIT_FOR_TARGET = "wait_for_target"
    TARGET_SHOWN = "target_shown"
    ROUND_RESULT = "round_result"
    DONE = "done"


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class ReactionGame:
    """Game state driven by one timer that the caller runs.

    When ``delay_ms`` is set, call ``on_timer`` once after that many
    milliseconds. ``clock`` returns the current time in milliseconds.
    ``on_complete(score, perfect)`` is called when the game ends.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        clock: Callable[[], int] | None = None,
        on_complete: Callable[[int, bool], None] | None = None,
        play_sound: Callable[[Sound], None] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.clock = clock if clock is not None else _monotonic_ms
        self.on_complete = on_complete
        self.play_sound = play_sound
        self.phase = Phase.WAIT_FOR_TARGET
        self.round = 0
        self.score = 0
        self.target_show_time = 0
        self.target_visible = False
        self.status = "Get ready..."
        self.delay_ms: int | None = None

    def _sound(self, sound: Sound) -> None:
        if self.play_sound is not None:
            self.play_sound(sound)

    def start(self) -> None:
        """Begin a new game at round one."""
        self.round = 0
        self.score = 0
        self._start_round()

    def stop(self) -> None:
        """Cancel the timer; the game will not complete."""
        self.delay_ms = None
        self.on_complete = None

    def _start_round(self) -> None:
        self.phase = Phase.WAIT_FOR_TARGET
        self.target_visible = False
        self.status = f"Round {self.round + 1}/{MAX_ROUNDS} - Wait..."
        self.delay_ms = MIN_DELAY_MS + self.rng.randrange(MAX_DELAY_MS - MIN_DELAY_MS)

    def _show_target(self) -> None:
        self.phase = Phase.TARGET_SHOWN
        self.target_show_time = self.clock()
        self.target_visible = True
        self.status = "TAP NOW!"
        self._sound(Sound.BLIP)
        self.delay_ms = TARGET_TIMEOUT_MS

    def _end_round(self) -> None:
        self.round += 1
        self.phase = Phase.ROUND_RESULT
        self.delay_ms = RESULT_DELAY_MS

    def _show_final_result(self) -> None:
        if self.score >= MAX_ROUNDS:
            self.status = f"{OK_SYMBOL} Perfect! {self.score}/{MAX_ROUNDS}"
        elif self.score > 0:
            self.status = f"Score: {self.score}/{MAX_ROUNDS}"
        else:
            self.status = f"{CLOSE_SYMBOL} Score: 0/{MAX_ROUNDS}"
        self._sound(Sound.SUCCESS if self.score > 0 else Sound.ERROR)
        self.phase = Phase.DONE
        self.delay_ms = RESULT_DELAY_MS

    def on_timer(self) -> None:
        """Advance the game when the scheduled delay has passed."""
        if self.delay_ms is None:
            raise RuntimeError("no timer is scheduled")
        self.delay_ms = None
        if self.phase is Phase.WAIT_FOR_TARGET:
            self._show_target()
        elif self.phase is Phase.TARGET_SHOWN:
            self.target_visible = False
            self.status = "Too slow!"
            self._end_round()
        elif self.phase is Phase.ROUND_RESULT:
            if self.round >= MAX_ROUNDS:
                self._show_final_result()
            else:
                self._start_round()
        elif self.on_complete is not None:
            self.on_complete(self.score, self.score >= MAX_ROUNDS)

    def tap_target(self) -> bool:
        """Tap the target; counts only while it is shown. Return whether it counted."""
        if self.phase is not Phase.TARGET_SHOWN:
            return False
        reaction = int(self.clock() - self.target_show_time)
        self.target_visible = False
        if reaction <= GREAT_TIME_MS:
            self.score += 1
            rating = "GREAT"
        elif reaction <= GOOD_TIME_MS:
            self.score += 1
            rating = "Good"
        else:
            rating = "Slow"
        self._sound(Sound.CONFIRM if reaction <= GOOD_TIME_MS else Sound.BLIP)
        self.status = f"{rating}! {reaction}ms"
        self._end_round()
        return True

    def tap_area(self) -> bool:
        """Tap outside the target; before it appears this loses the round."""
        if self.phase is not Phase.WAIT_FOR_TARGET:
            return False
        self.delay_ms = None
        self.status = "Too early!"
        self._sound(Sound.ERROR)
        self._end_round()
        return True