import random

import pytest

from doggie_daycare.food_catcher import (
    BAD_FOOD,
    BOMB,
    GOOD_FOOD,
    HEIGHT,
    LOSE_BAD_FOOD_COUNT,
    WIDTH,
    WIN_GOOD_FOOD_COUNT,
    Difficulty,
    FoodCatcher,
    FoodItem,
    game_speed,
)


class ScriptedRng:
    def __init__(self, values):
        self.values = list(values)

    def randrange(self, n):
        value = self.values.pop(0)
        assert 0 <= value < n
        return value


def occupied(game):
    return [(i, j) for i, row in enumerate(game.food) for j, item in enumerate(row) if not item.is_empty]


def test_game_speed_gets_faster():
    assert game_speed(Difficulty.EASY) == pytest.approx(0.15)
    assert game_speed(Difficulty.EASY) > game_speed(Difficulty.MEDIUM) > game_speed(Difficulty.HARD)


def test_new_game_is_empty_and_centred():
    game = FoodCatcher(Difficulty.EASY, random.Random(1))
    assert game.dog_pos == WIDTH // 2
    assert occupied(game) == []
    assert not game.is_won() and not game.is_lost()


def test_move_dog_left_right_and_bounce():
    game = FoodCatcher(Difficulty.EASY, random.Random(1))
    start = game.dog_pos
    game.move_dog("a")
    assert game.dog_pos == start - 1
    assert game.dog_bounce is True
    game.move_dog("d")
    assert game.dog_pos == start
    assert game.dog_bounce is False


def test_move_dog_stays_inside_border():
    game = FoodCatcher(Difficulty.EASY, random.Random(1))
    game.dog_pos = 1
    game.move_dog("a")
    assert game.dog_pos == 1
    game.dog_pos = WIDTH - 2
    game.move_dog("d")
    assert game.dog_pos == WIDTH - 2


@pytest.mark.parametrize(
    "difficulty, roll, expected",
    [
        (Difficulty.HARD, 9, BOMB),
        (Difficulty.EASY, 9, GOOD_FOOD),
        (Difficulty.MEDIUM, 0, BAD_FOOD),
        (Difficulty.HARD, 1, BAD_FOOD),
        (Difficulty.HARD, 5, GOOD_FOOD),
    ],
)
def test_spawn_kind_depends_on_roll_and_difficulty(difficulty, roll, expected):
    game = FoodCatcher(difficulty, ScriptedRng([7, roll]))
    game.update_food()
    assert game.food[0][7] == FoodItem(expected, 2)
    assert occupied(game) == [(0, 7)]


def test_no_spawn_between_spawn_frames():
    game = FoodCatcher(Difficulty.EASY, ScriptedRng([]))
    game.frame = 1
    game.update_food()
    assert occupied(game) == []


def test_food_falls_when_delay_runs_out():
    game = FoodCatcher(Difficulty.EASY, ScriptedRng([]))
    game.frame = 1
    game.food[0][3] = FoodItem(GOOD_FOOD, 0)
    game.update_food()
    assert occupied(game) == [(1, 3)]


def test_food_waits_while_delayed():
    game = FoodCatcher(Difficulty.EASY, ScriptedRng([]))
    game.frame = 1
    game.food[0][3] = FoodItem(GOOD_FOOD, 2)
    game.update_food()
    assert occupied(game) == [(0, 3)]
    assert game.food[0][3].delay == 1


def test_missed_food_disappears_at_bottom():
    game = FoodCatcher(Difficulty.EASY, ScriptedRng([]))
    game.frame = 1
    game.food[HEIGHT - 2][3] = FoodItem(GOOD_FOOD, 0)
    game.food[HEIGHT - 2][game.dog_pos] = FoodItem(BAD_FOOD, 0)
    game.update_food()
    assert occupied(game) == [(HEIGHT - 1, game.dog_pos)]


def test_check_catch_counts_and_clears():
    game = FoodCatcher(Difficulty.HARD, ScriptedRng([]))
    bottom = game.food[HEIGHT - 1]
    bottom[game.dog_pos - 1] = FoodItem(GOOD_FOOD)
    bottom[game.dog_pos + 1] = FoodItem(BAD_FOOD)
    bottom[game.dog_pos + 3] = FoodItem(GOOD_FOOD)
    game.check_catch()
    assert (game.good_eaten, game.bad_eaten) == (1, 1)
    assert occupied(game) == [(HEIGHT - 1, game.dog_pos + 3)]


def test_catching_bomb_loses():
    game = FoodCatcher(Difficulty.HARD, ScriptedRng([]))
    game.food[HEIGHT - 1][game.dog_pos] = FoodItem(BOMB)
    game.check_catch()
    assert game.caught_bomb
    assert game.is_lost() and not game.is_won()


def test_step_catches_falling_food_and_advances_frame():
    game = FoodCatcher(Difficulty.EASY, ScriptedRng([]))
    game.frame = 1
    game.food[HEIGHT - 2][game.dog_pos] = FoodItem(GOOD_FOOD, 0)
    game.step(None)
    assert game.good_eaten == 1
    assert game.frame == 2


def test_step_accepts_upper_case_keys():
    game = FoodCatcher(Difficulty.EASY, ScriptedRng([]))
    game.frame = 1
    start = game.dog_pos
    game.step("D")
    assert game.dog_pos == start + 1
    game.step("x")
    assert game.dog_pos == start + 1


def test_win_and_lose_thresholds():
    game = FoodCatcher(Difficulty.EASY, random.Random(2))
    game.good_eaten = WIN_GOOD_FOOD_COUNT
    assert game.is_won()
    game.bad_eaten = LOSE_BAD_FOOD_COUNT
    assert game.is_lost() and not game.is_won()


def test_render_shows_food_dog_and_counters():
    game = FoodCatcher(Difficulty.EASY, ScriptedRng([]))
    game.food[2][4] = FoodItem(GOOD_FOOD)
    game.good_eaten = 4
    frame = game.render()
    assert f"\033[3;5H" in frame
    assert "🐕" in frame
    assert f"Good Food ({GOOD_FOOD}): 4" in frame
    assert frame.count("║") == 2 * HEIGHT