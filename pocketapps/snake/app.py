"""Snake application flow: difficulty selection, help, game start and high scores."""

from __future__ import annotations

from collections.abc import MutableMapping
from enum import Enum, IntEnum

from pocketapps.snake.logic import CELL_LARGE, CELL_MEDIUM, CELL_SMALL

PREF_NAMESPACE = "Snake"

HELP_TITLE = "How to Play"
HELP_TEXT = (
    "Swipe or use arrow keys to change direction.\n"
    "Eat food to grow longer.\n"
    "Don't hit yourself!"
)
SELECTION_TITLE = "Snake"
SELECTION_ITEMS = ("How to Play", "Easy", "Medium", "Hard", "Hell")

NEW_HIGH_SCORE_TITLE = "NEW HIGH SCORE!"
GAME_OVER_TITLE = "GAME OVER!"


class Selection(IntEnum):
    """Entries of the selection dialog, in display order."""

    HOW_TO_PLAY = 0
    EASY = 1
    MEDIUM = 2
    HARD = 3
    HELL = 4

    @property
    def is_difficulty(self) -> bool:
        return self is not Selection.HOW_TO_PLAY

    @property
    def cell_size(self) -> int:
        """Cell size in pixels for this difficulty."""
        try:
            return _CELL_SIZES[self]
        except KeyError:
            raise ValueError(f"{self.name} is not a difficulty") from None

    @property
    def wall_collision(self) -> bool:
        """Hell mode ends the game when the snake hits a wall."""
        return self is Selection.HELL


_CELL_SIZES = {
    Selection.EASY: CELL_LARGE,
    Selection.MEDIUM: CELL_MEDIUM,
    Selection.HARD: CELL_SMALL,
    Selection.HELL: CELL_SMALL,
}

_HIGH_SCORE_KEYS = {
    Selection.EASY: "high_easy",
    Selection.MEDIUM: "high_med",
    Selection.HARD: "high_hard",
    Selection.HELL: "high_hell",
}


class Screen(Enum):
    """What the application shows next."""

    EXIT = "exit"
    SELECTION_DIALOG = "selection_dialog"
    HELP_DIALOG = "help_dialog"
    GAME_OVER_DIALOG = "game_over_dialog"
    GAME = "game"


def _as_difficulty(value: int) -> Selection | None:
    try:
        selection = Selection(value)
    except ValueError:
        return None
    return selection if selection.is_difficulty else None


def game_over_message(score: int, length: int, best: int, new_high_score: bool) -> tuple[str, str]:
    """Title and text of the dialog shown when a game ends."""
    if new_high_score and score > 0:
        return (
            NEW_HIGH_SCORE_TITLE,
            f"{NEW_HIGH_SCORE_TITLE}\n\nSCORE: {score}\nLENGTH: {length}",
        )
    return (
        GAME_OVER_TITLE,
        f"{GAME_OVER_TITLE}\n\nSCORE: {score}\nLENGTH: {length}\nBEST: {best}",
    )


class HighScores:
    """Best score per difficulty, kept in a key-value store."""

    def __init__(self, store: MutableMapping[str, int]) -> None:
        self.store = store
        self._scores = {difficulty: 0 for difficulty in _HIGH_SCORE_KEYS}

    def load(self) -> None:
        """Read stored scores; missing entries keep their current value."""
        for difficulty, key in _HIGH_SCORE_KEYS.items():
            if key in self.store:
                self._scores[difficulty] = int(self.store[key])

    def get(self, difficulty: int) -> int:
        """Best score for ``difficulty``, or 0 when it is not a difficulty."""
        selection = _as_difficulty(difficulty)
        return self._scores[selection] if selection is not None else 0

    def save(self, difficulty: int, score: int) -> None:
        """Record ``score`` as the best for ``difficulty``; other values are ignored."""
        selection = _as_difficulty(difficulty)
        if selection is None:
            return
        self._scores[selection] = score
        self.store[_HIGH_SCORE_KEYS[selection]] = score


class SnakeApp:
    """State that carries the app between dialogs and games across show/hide cycles."""

    def __init__(self, store: MutableMapping[str, int]) -> None:
        self.high_scores = HighScores(store)
        self.pending_selection: int = -1
        self.should_exit = False
        self.show_help_on_show = False
        self.high_scores_loaded = False
        self.current_difficulty: int = -1
        self._dialog_ids = {
            Screen.SELECTION_DIALOG: 0,
            Screen.HELP_DIALOG: 0,
            Screen.GAME_OVER_DIALOG: 0,
        }

    @property
    def difficulty(self) -> Selection | None:
        """Difficulty of the game being played, if any."""
        return _as_difficulty(self.current_difficulty)

    def on_show(self) -> Screen:
        """Decide what to show now that the app is visible."""
        if self.should_exit:
            self.should_exit = False
            return Screen.EXIT

        if not self.high_scores_loaded:
            self.high_scores.load()
            self.high_scores_loaded = True

        if self.show_help_on_show:
            self.show_help_on_show = False
            return Screen.HELP_DIALOG

        if _as_difficulty(self.pending_selection) is not None:
            self.current_difficulty = self.pending_selection
            self.pending_selection = -1
            return Screen.GAME

        return Screen.SELECTION_DIALOG

    def open_dialog(self, screen: Screen, launch_id: int) -> None:
        """Remember the launch id of a dialog that was started for ``screen``."""
        if screen not in self._dialog_ids:
            raise ValueError(f"{screen.name} is not a dialog")
        self._dialog_ids[screen] = launch_id

    def _matches(self, screen: Screen, launch_id: int) -> bool:
        dialog_id = self._dialog_ids[screen]
        return dialog_id != 0 and launch_id == dialog_id

    def on_result(self, launch_id: int, selection: int | None) -> None:
        """Handle a dialog returning; ``selection`` is None when nothing was chosen."""
        if self._matches(Screen.SELECTION_DIALOG, launch_id):
            self._dialog_ids[Screen.SELECTION_DIALOG] = 0
            chosen = -1 if selection is None else selection
            if chosen == Selection.HOW_TO_PLAY:
                self.show_help_on_show = True
            elif _as_difficulty(chosen) is not None:
                self.pending_selection = chosen
            else:
                self.should_exit = True
        elif self._matches(Screen.HELP_DIALOG, launch_id):
            self._dialog_ids[Screen.HELP_DIALOG] = 0
            self.pending_selection = -1
        elif self._matches(Screen.GAME_OVER_DIALOG, launch_id):
            self._dialog_ids[Screen.GAME_OVER_DIALOG] = 0
            self.pending_selection = -1

    def on_game_over(self, score: int, length: int) -> tuple[str, str]:
        """Store a new record if one was set; return the dialog title and text."""
        previous = self.high_scores.get(self.current_difficulty)
        new_high_score = score > previous
        if new_high_score:
            self.high_scores.save(self.current_difficulty, score)
        return game_over_message(
            score, length, self.high_scores.get(self.current_difficulty), new_high_score
        )