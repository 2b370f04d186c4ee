import pytest

from pocketapps.tamatac.achievements import (
    ACHIEVEMENT_COUNT,
    CLOSE_SYMBOL,
    OK_SYMBOL,
    AchievementId,
    AchievementInfo,
    Achievements,
    achievement_info,
    count_unlocked,
    has_achievement,
)


@pytest.fixture
def store():
    return {}


def test_empty_store_has_no_achievements(store):
    assert Achievements(store).load() == 0


def test_unlock_sets_bit_and_persists(store):
    achievements = Achievements(store)
    assert achievements.unlock(AchievementId.CLEAN_FREAK) is True
    bits = Achievements(store).load()
    assert has_achievement(bits, AchievementId.CLEAN_FREAK)
    assert not has_achievement(bits, AchievementId.FIRST_FEED)
    assert store["bits"] == 1 << AchievementId.CLEAN_FREAK


def test_unlock_twice_is_not_new(store):
    achievements = Achievements(store)
    achievements.unlock(AchievementId.NIGHT_OWL)
    assert achievements.unlock(AchievementId.NIGHT_OWL) is False
    assert count_unlocked(achievements.load()) == 1


def test_unlock_unknown_id_is_ignored(store):
    achievements = Achievements(store)
    assert achievements.unlock(ACHIEVEMENT_COUNT) is False
    assert achievements.load() == 0


def test_count_unlocked_ignores_unknown_bits():
    all_known = (1 << ACHIEVEMENT_COUNT) - 1
    assert count_unlocked(all_known) == ACHIEVEMENT_COUNT
    assert count_unlocked(all_known | (1 << 15)) == ACHIEVEMENT_COUNT
    assert count_unlocked(0) == 0


def test_load_keeps_only_sixteen_bits(store):
    store["bits"] = (1 << 16) | (1 << AchievementId.FIRST_PLAY)
    assert Achievements(store).load() == 1 << AchievementId.FIRST_PLAY


def test_info_of_known_achievement():
    assert achievement_info(AchievementId.FIRST_FEED) == AchievementInfo(
        "First Feed", "Feed your pet"
    )
    assert achievement_info(AchievementId.PERFECT_GAME).name == "Pro Gamer"


@pytest.mark.parametrize("bad", [-1, ACHIEVEMENT_COUNT, 99])
def test_info_of_unknown_achievement_falls_back(bad):
    assert achievement_info(bad) == achievement_info(AchievementId.FIRST_FEED)


def test_clean_freak_unlocks_at_tenth_clean(store):
    achievements = Achievements(store)
    for _ in range(9):
        achievements.increment_clean_count()
    assert not has_achievement(achievements.load(), AchievementId.CLEAN_FREAK)
    assert achievements.increment_clean_count() == 10
    assert achievements.clean_count() == 10
    assert has_achievement(achievements.load(), AchievementId.CLEAN_FREAK)


def test_summary_lists_every_achievement(store):
    achievements = Achievements(store)
    achievements.unlock(AchievementId.FIRST_FEED)
    title, rows = achievements.summary()
    assert title == f"Achievements 1/{ACHIEVEMENT_COUNT}"
    assert [row[0] for row in rows] == list(AchievementId)
    first = rows[0]
    assert first[1] is True
    assert first[2] == f"{OK_SYMBOL} First Feed - Feed your pet"
    assert all(text.startswith(CLOSE_SYMBOL) for _, unlocked, text in rows[1:])
    assert not any(unlocked for _, unlocked, _ in rows[1:])