import random
from datetime import datetime

import pytest

from engine import GameEngine, bonus_points, max_difficulty, streak_threshold
from localization import Localizer
from player import BASE_AVATARS, Player, SessionStat
from questions import Category


def make_game(grade: int) -> GameEngine:
    g = GameEngine(Localizer("en"), rng=random.Random(7))
    g.set_player("Kim", grade)
    return g


@pytest.mark.parametrize("grade,threshold", [(0, 3), (1, 3), (2, 2), (3, 2), (4, 1), (5, 1)])
def test_threshold_correct_answers_raise_difficulty_by_one(grade, threshold):
    g = make_game(grade)
    assert streak_threshold(grade) == threshold
    for _ in range(threshold - 1):
        g.adjust_difficulty(True)
        assert g.difficulty == 1
    g.adjust_difficulty(True)
    assert g.difficulty == 2
    assert g.streak == threshold


@pytest.mark.parametrize("grade,ceiling", [(0, 6), (1, 6), (2, 8), (3, 8), (4, 10), (5, 10)])
def test_difficulty_never_exceeds_grade_ceiling(grade, ceiling):
    g = make_game(grade)
    assert max_difficulty(grade) == ceiling
    for _ in range(100):
        g.adjust_difficulty(True)
        assert g.difficulty <= ceiling
    assert g.difficulty == ceiling
    # streak keeps counting at the ceiling
    assert g.streak == 100


def test_wrong_answer_resets_streak_and_drops_difficulty_lower_grades():
    g = make_game(2)
    for _ in range(8):
        g.adjust_difficulty(True)
    assert g.difficulty == 5
    g.adjust_difficulty(False)
    assert g.streak == 0
    assert g.difficulty == 3


def test_wrong_answer_drops_one_level_from_grade_three():
    g = make_game(3)
    for _ in range(6):
        g.adjust_difficulty(True)
    assert g.difficulty == 4
    g.adjust_difficulty(False)
    assert g.difficulty == 3


@pytest.mark.parametrize("grade", range(6))
def test_difficulty_never_below_one(grade):
    g = make_game(grade)
    for _ in range(5):
        g.adjust_difficulty(False)
        assert g.difficulty == 1
        assert g.streak == 0


def test_set_player_resets_engine_state_each_time():
    g = make_game(4)
    for _ in range(5):
        g.adjust_difficulty(True)
    assert (g.difficulty, g.streak) == (6, 5)

    g.set_player("Kim", 1)
    assert (g.difficulty, g.streak) == (1, 0)

    g.adjust_difficulty(True)
    g.adjust_difficulty(True)
    g.adjust_difficulty(True)
    assert (g.difficulty, g.streak) == (2, 3)

    g.set_player("Kim", 5)
    assert (g.difficulty, g.streak) == (1, 0)


def test_set_player_trims_name_and_clamps_grade():
    g = GameEngine()
    p = g.set_player("  Noor  ", 9)
    assert p.name == "Noor"
    assert p.grade == 5
    g.set_player("Noor", -3)
    assert g.player.grade == 0


def test_set_player_seeds_base_avatars_once_and_checks_avatar():
    g = GameEngine()
    p = g.set_player("Noor", 2, "avatar_fox.png")
    assert p.unlocked_avatars == list(BASE_AVATARS)
    assert p.avatar == "avatar_fox.png"

    # locked avatar falls back to the first unlocked one
    g.set_player("Noor", 2, "avatar_dragon.png")
    assert p.avatar == "avatar_cat.png"
    assert len(p.unlocked_avatars) == 10

    g.set_player("Noor", 2)
    assert p.avatar in p.unlocked_avatars


def test_set_player_mutates_the_same_player():
    g = GameEngine()
    p = g.player
    g.set_player("Noor", 2)
    assert g.player is p


def test_award_points_crossing_threshold_unlocks_exactly_one():
    g = make_game(2)
    g.award_points(48)
    assert "avatar_dragon.png" not in g.player.unlocked_avatars

    assert g.award_points(5) == ["avatar_dragon.png"]
    assert g.player.points == 53
    assert g.player.unlocked_avatars.count("avatar_dragon.png") == 1

    # staying above 50 does not unlock it again
    assert g.award_points(5) == []
    assert g.player.unlocked_avatars.count("avatar_dragon.png") == 1


def test_award_points_many_thresholds_in_order():
    g = make_game(2)
    assert g.award_points(160) == ["avatar_dragon.png", "avatar_crown.png", "avatar_rocket.png"]
    assert g.award_points(40) == ["avatar_star.png"]
    assert len(g.player.unlocked_avatars) == 14


@pytest.mark.parametrize("points", [0, -5])
def test_award_points_non_positive_is_noop(points):
    g = make_game(2)
    g.award_points(49)
    assert g.award_points(points) == []
    assert g.player.points == 49


def test_categories_per_grade():
    g = make_game(0)
    assert g.get_categories() == [Category.SUBTRACTION, Category.ADDITION]
    g.set_player("Kim", 2)
    assert len(g.get_categories()) == 4
    g.set_player("Kim", 3)
    assert g.get_categories() == [
        Category.SUBTRACTION,
        Category.DIVISION,
        Category.MULTIPLICATION,
        Category.ALGEBRA,
        Category.PROBLEM_SOLVING,
    ]
    g.set_player("Kim", 5)
    assert Category.GRAPHS in g.get_categories()
    assert Category.SUBTRACTION not in g.get_categories()


def test_category_keys_are_localization_keys():
    g = make_game(3)
    assert [c.value for c in g.get_categories()][:2] == [
        "Category_Subtraction",
        "Category_Division",
    ]


@pytest.mark.parametrize(
    "streak,bonus", [(0, 0), (2, 0), (3, 1), (4, 1), (5, 2), (6, 2), (7, 3), (20, 3)]
)
def test_bonus_points(streak, bonus):
    assert bonus_points(streak) == bonus


def test_get_all_avatars_before_setup():
    g = GameEngine()
    assert g.get_all_avatars() == list(BASE_AVATARS)


def test_restore_recomputes_unlocks_and_keeps_avatar():
    stored = Player(
        name="Alva",
        grade=4,
        points=120,
        avatar="avatar_crown.png",
        language="sv",
        session_stats=[SessionStat(datetime(2026, 1, 1), "Category_Algebra", 10, 7, 9)],
    )
    g = GameEngine()
    unlocked = g.restore(stored)
    assert unlocked == ["avatar_dragon.png", "avatar_crown.png"]
    assert g.player.points == 120
    assert g.player.avatar == "avatar_crown.png"
    assert g.player.language == "sv"
    assert len(g.player.session_stats) == 1
    assert (g.difficulty, g.streak) == (1, 0)


def test_restore_twice_does_not_duplicate_history():
    stored = Player(
        name="Alva",
        grade=2,
        points=10,
        session_stats=[SessionStat(datetime(2026, 1, 1), "Category_Addition", 5, 5, 6)],
    )
    g = GameEngine()
    g.restore(stored)
    g.restore(stored)
    assert len(g.player.session_stats) == 1
    assert g.player.session_stats is not stored.session_stats
