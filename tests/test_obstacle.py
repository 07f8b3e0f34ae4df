import random

import pytest

from flappy_dragon.config import SCREEN_WIDTH, SCREEN_HEIGHT
from flappy_dragon.obstacle import Obstacle, gap_size_for_score


def test_create_uses_injected_random_source(fixed_random):
    obstacle = Obstacle.create(SCREEN_WIDTH, 0, fixed_random)
    assert obstacle.x == SCREEN_WIDTH
    assert obstacle.gap_center == 20
    assert obstacle.gap_size == 20
    assert fixed_random.calls == [(10, 30)]


def test_create_is_deterministic_with_seed():
    first = Obstacle.create(SCREEN_WIDTH, 3, random.Random(7))
    second = Obstacle.create(SCREEN_WIDTH, 3, random.Random(7))
    assert first.gap_center == second.gap_center


def test_gap_center_stays_in_range():
    rng = random.Random(1234)
    for score in range(40):
        obstacle = Obstacle.create(SCREEN_WIDTH, score, rng)
        assert 10 <= obstacle.gap_center < 30


@pytest.mark.parametrize("score, expected", [(0, 20), (1, 19), (5, 15), (17, 3), (18, 2), (19, 2), (500, 2)])
def test_gap_shrinks_with_score(score, expected, fixed_random):
    assert gap_size_for_score(score) == expected
    assert Obstacle.create(SCREEN_WIDTH, score, fixed_random).gap_size == expected


def test_gap_size_has_a_floor():
    assert Obstacle(10, 20, 0).gap_size == 2


def test_advance_moves_one_column_left():
    obstacle = Obstacle(10, 20, 10)
    obstacle.advance()
    assert obstacle.x == 9


def test_advance_wraps_without_rerolling_gap():
    obstacle = Obstacle(0, 13, 7)
    obstacle.advance()
    assert obstacle.x == SCREEN_WIDTH
    assert obstacle.gap_center == 13
    assert obstacle.gap_size == 7


def test_player_inside_gap_is_not_hit(make_player):
    obstacle = Obstacle(5, 20, 10)
    assert not obstacle.is_hit(make_player(y=20.0))


def test_player_above_gap_is_hit(make_player):
    obstacle = Obstacle(5, 20, 10)
    assert obstacle.is_hit(make_player(y=10.0))


def test_player_below_gap_is_hit(make_player):
    obstacle = Obstacle(5, 20, 10)
    assert obstacle.is_hit(make_player(y=25.5))


@pytest.mark.parametrize("y", [15.0, 25.0])
def test_gap_edges_are_passable(make_player, y):
    obstacle = Obstacle(5, 20, 10)
    assert not obstacle.is_hit(make_player(y=y))


def test_odd_gap_size_truncates_half(make_player):
    obstacle = Obstacle(5, 20, 5)
    assert obstacle.half_size == 2
    assert obstacle.is_hit(make_player(y=17.9))
    assert not obstacle.is_hit(make_player(y=18.0))
    assert not obstacle.is_hit(make_player(y=22.0))
    assert obstacle.is_hit(make_player(y=22.1))


@pytest.mark.parametrize("obstacle_x, hit", [(3, False), (4, True), (5, True), (6, False), (40, False)])
def test_collision_window_is_two_columns(make_player, obstacle_x, hit):
    obstacle = Obstacle(obstacle_x, 20, 2)
    assert obstacle.is_hit(make_player(y=0.0)) is hit


@pytest.mark.parametrize("y", [0.0, 5.0, 20.0, 29.0, 30.0])
def test_no_hit_outside_x_window_for_any_y(make_player, y):
    assert not Obstacle(6, 20, 2).is_hit(make_player(y=y))
    assert not Obstacle(3, 20, 2).is_hit(make_player(y=y))


def test_render_bounds():
    screen_x, top_band, bottom_band = Obstacle(30, 20, 10).render_bounds(5)
    assert screen_x == 25
    assert top_band == range(0, 15)
    assert bottom_band == range(25, SCREEN_HEIGHT)


def test_render_bounds_leave_gap_rows_free():
    obstacle = Obstacle(30, 12, 6)
    _, top_band, bottom_band = obstacle.render_bounds(5)
    solid = set(top_band) | set(bottom_band)
    assert solid.isdisjoint(range(9, 15))
    assert len(solid) == SCREEN_HEIGHT - 6


def test_create_without_random_source():
    for score in (0, 7, 30):
        obstacle = Obstacle.create(SCREEN_WIDTH, score)
        assert obstacle.x == SCREEN_WIDTH
        assert 10 <= obstacle.gap_center < 30
        assert obstacle.gap_size == gap_size_for_score(score)
