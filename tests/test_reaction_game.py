import random

import pytest

from pocketapps.tamatac.pattern_game import Sound
from pocketapps.tamatac.reaction_game import (
    MAX_DELAY_MS,
    MAX_ROUNDS,
    MIN_DELAY_MS,
    Phase,
    ReactionGame,
)


class FakeClock:
    def __init__(self):
        self.now = 10_000

    def __call__(self):
        return self.now


def make_game(seed=1):
    clock = FakeClock()
    results = []
    sounds = []
    game = ReactionGame(
        random.Random(seed),
        clock,
        on_complete=lambda score, perfect: results.append((score, perfect)),
        play_sound=sounds.append,
    )
    return game, clock, results, sounds


def show_target(game):
    game.on_timer()
    assert game.phase is Phase.TARGET_SHOWN


def test_start_schedules_random_delay():
    for seed in range(20):
        game, _, _, _ = make_game(seed)
        game.start()
        assert MIN_DELAY_MS <= game.delay_ms < MAX_DELAY_MS
        assert game.status == f"Round 1/{MAX_ROUNDS} - Wait..."
        assert not game.target_visible


def test_target_appears():
    game, _, _, sounds = make_game()
    game.start()
    show_target(game)
    assert game.target_visible
    assert game.status == "TAP NOW!"
    assert game.delay_ms == 3000
    assert sounds == [Sound.BLIP]


@pytest.mark.parametrize(
    "elapsed, rating, scored",
    [(250, "GREAT", True), (400, "Good", True), (401, "Slow", False)],
)
def test_tap_ratings(elapsed, rating, scored):
    game, clock, _, _ = make_game()
    game.start()
    show_target(game)
    clock.now += elapsed
    assert game.tap_target() is True
    assert game.status == f"{rating}! {elapsed}ms"
    assert game.score == (1 if scored else 0)
    assert game.round == 1
    assert game.phase is Phase.ROUND_RESULT
    assert game.delay_ms == 1500


def test_tap_target_ignored_before_shown():
    game, _, _, _ = make_game()
    game.start()
    assert game.tap_target() is False
    assert game.round == 0


def test_early_tap():
    game, _, _, sounds = make_game()
    game.start()
    assert game.tap_area() is True
    assert game.status == "Too early!"
    assert game.round == 1
    assert game.delay_ms == 1500
    assert sounds == [Sound.ERROR]
    assert game.tap_area() is False


def test_timeout():
    game, _, _, _ = make_game()
    game.start()
    show_target(game)
    game.on_timer()
    assert game.status == "Too slow!"
    assert not game.target_visible
    assert game.round == 1


def test_perfect_game_completes():
    game, clock, results, sounds = make_game(9)
    game.start()
    for _ in range(MAX_ROUNDS):
        show_target(game)
        clock.now += 100
        game.tap_target()
        game.on_timer()
    assert game.phase is Phase.DONE
    assert game.status == f"\uf00c Perfect! {MAX_ROUNDS}/{MAX_ROUNDS}"
    assert sounds[-1] == Sound.SUCCESS
    game.on_timer()
    assert results == [(MAX_ROUNDS, True)]


def test_zero_score_game():
    game, _, results, sounds = make_game(4)
    game.start()
    for _ in range(MAX_ROUNDS):
        game.tap_area()
        game.on_timer()
    assert game.status == f"\uf00d Score: 0/{MAX_ROUNDS}"
    assert sounds[-1] == Sound.ERROR
    game.on_timer()
    assert results == [(0, False)]


def test_partial_score():
    game, clock, results, _ = make_game(2)
    game.start()
    show_target(game)
    clock.now += 50
    game.tap_target()
    game.on_timer()
    for _ in range(MAX_ROUNDS - 1):
        game.tap_area()
        game.on_timer()
    assert game.status == f"Score: 1/{MAX_ROUNDS}"
    game.on_timer()
    assert results == [(1, False)]


def test_stop_cancels_timer():
    game, _, results, _ = make_game()
    game.start()
    game.stop()
    with pytest.raises(RuntimeError):
        game.on_timer()
    assert results == []