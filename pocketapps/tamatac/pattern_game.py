"""Simon-says mini-game: watch a sequence of coloured buttons, then repeat it."""

from __future__ import annotations

import random
from collections.abc import Callable
from enum import Enum

from pocketapps.tamatac.achievements import CLOSE_SYMBOL, OK_SYMBOL

MAX_PATTERN = 8
START_LENGTH = 3
MAX_ROUNDS = 3
BUTTON_COUNT = 4

BRIGHT_COLORS = (0xFF4444, 0x4488FF, 0x44DD44, 0xFFDD44)
DIM_COLORS = (0x661818, 0x182860, 0x186018, 0x605818)

START_DELAY_MS = 800
NEXT_ROUND_DELAY_MS = 1200
END_DELAY_MS = 1500
SEQUENCE_START_MS = 350
SEQUENCE_GAP_MS = 200
SEQUENCE_HIGHLIGHT_MS = 400


class Sound(Enum):
    """Sound effects the mini-games ask to be played."""

    BLIP = "blip"
    CONFIRM = "confirm"
    SUCCESS = "success"
    ERROR = "error"


class _DelayAction(Enum):
    START_SEQUENCE = "start_sequence"
    NEXT_ROUND = "next_round"
    END_GAME = "end_game"


class PatternGame:
    """Game state driven by two timers that the caller runs.

    When ``delay_ms`` is set, call ``on_delay`` once after that many
    milliseconds. While ``sequence_period_ms`` is set, call
    ``on_sequence_tick`` every that many milliseconds (the period changes
    between ticks). ``on_complete(rounds, won)`` is called when the game ends.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        on_complete: Callable[[int, bool], None] | None = None,
        play_sound: Callable[[Sound], None] | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.on_complete = on_complete
        self.play_sound = play_sound
        self.pattern: list[int] = [0] * MAX_PATTERN
        self.pattern_length = START_LENGTH
        self.show_index = 0
        self.show_phase = False
        self.input_index = 0
        self.round = 0
        self.accepting_input = False
        self.won = False
        self.status = "Get ready..."
        self.lit = [False] * BUTTON_COUNT
        self.delay_ms: int | None = None
        self.sequence_period_ms: int | None = None
        self._pending = _DelayAction.START_SEQUENCE

    @property
    def button_colors(self) -> list[int]:
        """Current colour of each button as 0xRRGGBB."""
        return [
            BRIGHT_COLORS[i] if lit else DIM_COLORS[i] for i, lit in enumerate(self.lit)
        ]

    def _sound(self, sound: Sound) -> None:
        if self.play_sound is not None:
            self.play_sound(sound)

    def start(self) -> None:
        """Begin a new game with a fresh random pattern."""
        self.round = 0
        self.pattern_length = START_LENGTH
        self.accepting_input = False
        self.won = False
        self.pattern = [self.rng.randrange(BUTTON_COUNT) for _ in range(MAX_PATTERN)]
        self._start_round()

    def stop(self) -> None:
        """Cancel both timers; the game will not complete."""
        self.delay_ms = None
        self.sequence_period_ms = None
        self.accepting_input = False
        self.on_complete = None

    def _schedule(self, action: _DelayAction, ms: int) -> None:
        self._pending = action
        self.delay_ms = ms

    def _start_round(self) -> None:
        self.accepting_input = False
        self._dim_all()
        self.status = f"Round {self.round + 1} - Watch!"
        self._schedule(_DelayAction.START_SEQUENCE, START_DELAY_MS)

    def on_delay(self) -> None:
        """Run the action the pending delay was scheduled for."""
        if self.delay_ms is None:
            raise RuntimeError("no delay is scheduled")
        self.delay_ms = None
        if self._pending is _DelayAction.START_SEQUENCE:
            self.show_index = 0
            self.show_phase = False
            self.sequence_period_ms = SEQUENCE_START_MS
        elif self._pending is _DelayAction.NEXT_ROUND:
            self._start_round()
        elif self.on_complete is not None:
            self.on_complete(self.round, self.won)

    def on_sequence_tick(self) -> None:
        """Alternate between lighting the next pattern button and a short gap."""
        if self.sequence_period_ms is None:
            raise RuntimeError("the sequence is not being shown")
        if self.show_phase:
            self._dim(self.pattern[self.show_index])
            self.show_index += 1
            self.show_phase = False
            if self.show_index >= self.pattern_length:
                self.sequence_period_ms = None
                self.accepting_input = True
                self.input_index = 0
                self.status = "Your turn!"
                return
            self.sequence_period_ms = SEQUENCE_GAP_MS
        else:
            self._highlight(self.pattern[self.show_index])
            self.show_phase = True
            self._sound(Sound.BLIP)
            self.sequence_period_ms = SEQUENCE_HIGHLIGHT_MS

    def press(self, index: int) -> bool:
        """Press button ``index``; return whether the press was taken as correct."""
        if not 0 <= index < BUTTON_COUNT:
            raise ValueError(f"button index must be 0..{BUTTON_COUNT - 1}")
        if not self.accepting_input:
            return False
        if index == self.pattern[self.input_index]:
            self._sound(Sound.BLIP)
            self.input_index += 1
            if self.input_index >= self.pattern_length:
                self.accepting_input = False
                self._round_win()
            return True
        self.accepting_input = False
        self._game_lose()
        return False

    def _round_win(self) -> None:
        self.round += 1
        self._sound(Sound.CONFIRM)
        if self.round >= MAX_ROUNDS:
            self._game_win()
            return
        self.status = f"Correct! Round {self.round + 1} next..."
        self.pattern_length = min(self.pattern_length + 1, MAX_PATTERN)
        self._schedule(_DelayAction.NEXT_ROUND, NEXT_ROUND_DELAY_MS)

    def _game_win(self) -> None:
        self.status = f"{OK_SYMBOL} You win!"
        self._dim_all()
        self._sound(Sound.SUCCESS)
        self.won = True
        self._schedule(_DelayAction.END_GAME, END_DELAY_MS)

    def _game_lose(self) -> None:
        self.status = f"{CLOSE_SYMBOL} Wrong! Rounds: {self.round}/{MAX_ROUNDS}"
        self._dim_all()
        self._sound(Sound.ERROR)
        self.won = False
        self._schedule(_DelayAction.END_GAME, END_DELAY_MS)

    def _highlight(self, index: int) -> None:
        if 0 <= index < BUTTON_COUNT:
            self.lit[index] = True

    def _dim(self, index: int) -> None:
        if 0 <= index < BUTTON_COUNT:
            self.lit[index] = False

    def _dim_all(self) -> None:
        self.lit = [False] * BUTTON_COUNT