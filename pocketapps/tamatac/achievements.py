"""Achievements of the virtual pet, kept as a 16-bit field in a key-value store."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from enum import IntEnum

PREF_NAMESPACE = "TamaTacAch"
PREF_BITS = "bits"
PREF_CLEAN_COUNT = "cleanCnt"

CLEAN_FREAK_THRESHOLD = 10

OK_SYMBOL = "\uf00c"
CLOSE_SYMBOL = "\uf00d"

_UINT16_MASK = 0xFFFF


class AchievementId(IntEnum):
    """Achievements, valued by their bit position in the stored field."""

    FIRST_FEED = 0
    FIRST_PLAY = 1
    FIRST_CURE = 2
    REACH_BABY = 3
    REACH_TEEN = 4
    REACH_ADULT = 5
    REACH_ELDER = 6
    FULL_STATS = 7
    SURVIVOR_24H = 8
    PERFECT_GAME = 9
    CLEAN_FREAK = 10
    NIGHT_OWL = 11


ACHIEVEMENT_COUNT = len(AchievementId)


@dataclass(frozen=True)
class AchievementInfo:
    """Display name and description of an achievement."""

    name: str
    description: str


_INFOS = {
    AchievementId.FIRST_FEED: AchievementInfo("First Feed", "Feed your pet"),
    AchievementId.FIRST_PLAY: AchievementInfo("First Play", "Play a mini-game"),
    AchievementId.FIRST_CURE: AchievementInfo("First Cure", "Cure sickness"),
    AchievementId.REACH_BABY: AchievementInfo("Baby Steps", "Evolve to Baby"),
    AchievementId.REACH_TEEN: AchievementInfo("Growing Up", "Evolve to Teen"),
    AchievementId.REACH_ADULT: AchievementInfo("All Grown Up", "Evolve to Adult"),
    AchievementId.REACH_ELDER: AchievementInfo("Wise Elder", "Evolve to Elder"),
    AchievementId.FULL_STATS: AchievementInfo("Perfect Pet", "All stats >= 90"),
    AchievementId.SURVIVOR_24H: AchievementInfo("Survivor", "Pet lives 24h"),
    AchievementId.PERFECT_GAME: AchievementInfo("Pro Gamer", "Perfect mini-game"),
    AchievementId.CLEAN_FREAK: AchievementInfo("Clean Freak", "Clean 10 times"),
    AchievementId.NIGHT_OWL: AchievementInfo("Night Owl", "Play at night"),
}


def _as_id(achievement: int) -> AchievementId | None:
    try:
        return AchievementId(achievement)
    except ValueError:
        return None


def has_achievement(bits: int, achievement: int) -> bool:
    """Whether the bit for ``achievement`` is set in ``bits``."""
    return bool((bits >> int(achievement)) & 1)


def count_unlocked(bits: int) -> int:
    """Number of known achievements set in ``bits``."""
    return sum(has_achievement(bits, achievement) for achievement in AchievementId)


def achievement_info(achievement: int) -> AchievementInfo:
    """Name and description; unknown ids fall back to the first achievement."""
    known = _as_id(achievement)
    return _INFOS[known if known is not None else AchievementId.FIRST_FEED]


class Achievements:
    """Unlocked achievements and the clean counter, persisted in ``store``."""

    def __init__(self, store: MutableMapping[str, int]) -> None:
        self.store = store

    def load(self) -> int:
        """Stored achievement bits, as a 16-bit value."""
        return int(self.store.get(PREF_BITS, 0)) & _UINT16_MASK

    def save(self, bits: int) -> None:
        self.store[PREF_BITS] = bits & _UINT16_MASK

    def unlock(self, achievement: int) -> bool:
        """Set the bit for ``achievement``; return whether it was newly unlocked."""
        known = _as_id(achievement)
        if known is None:
            return False
        bits = self.load()
        mask = 1 << known
        if bits & mask:
            return False
        self.save(bits | mask)
        return True

    def clean_count(self) -> int:
        """How many times the pet has been cleaned."""
        return int(self.store.get(PREF_CLEAN_COUNT, 0)) & _UINT16_MASK

    def increment_clean_count(self) -> int:
        """Count one more cleaning, unlocking Clean Freak at the threshold."""
        count = int(self.store.get(PREF_CLEAN_COUNT, 0)) + 1
        self.store[PREF_CLEAN_COUNT] = count
        if count >= CLEAN_FREAK_THRESHOLD:
            self.unlock(AchievementId.CLEAN_FREAK)
        return count

    def summary(self) -> tuple[str, list[tuple[AchievementId, bool, str]]]:
        """Title with the unlocked count, and one row per achievement."""
        bits = self.load()
        title = f"Achievements {count_unlocked(bits)}/{ACHIEVEMENT_COUNT}"
        rows = []
        for achievement in AchievementId:
            unlocked = has_achievement(bits, achievement)
            info = _INFOS[achievement]
            symbol = OK_SYMBOL if unlocked else CLOSE_SYMBOL
            rows.append(
                (achievement, unlocked, f"{symbol} {info.name} - {info.description}")
            )
        return title, rows