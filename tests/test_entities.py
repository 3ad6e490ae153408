import random

import pytest

from tilt_space.config import GameConfig
from tilt_space.core import RoundFactory, RoundState, Vector2


def test_new_round_is_playing(factory, config):
    snapshot = factory.new_round()
    assert snapshot.state is RoundState.PLAYING
    assert snapshot.is_playing
    assert len(snapshot.obstacles) == config.obstacle_count == 2
    assert isinstance(snapshot.obstacles, tuple)


def test_craft_starts_bottom_center(factory):
    craft = factory.new_round().craft
    assert craft.position == Vector2(200, 700)
    assert craft.extent == 50


def test_start_position_clamped_on_short_playfield():
    config = GameConfig(width=200, height=120)
    assert RoundFactory(config, seed=1).start_position() == Vector2(100, 25)


def test_random_placement_ranges(config):
    factory = RoundFactory(config, seed=5)
    for _ in range(200):
        snapshot = factory.new_round()
        for obstacle in snapshot.obstacles:
            assert 0 <= obstacle.position.x <= 350
            assert 0 <= obstacle.position.y <= 750
            assert -1 <= obstacle.velocity.x <= 1
            assert -1 <= obstacle.velocity.y <= 1
            assert obstacle.extent == 50
        assert 0 <= snapshot.goal.position.x <= 350
        assert 0 <= snapshot.goal.position.y <= 750
        assert snapshot.goal.extent == 70


def test_same_seed_same_round(config):
    assert RoundFactory(config, seed=11).new_round() == RoundFactory(config, seed=11).new_round()


def test_rounds_differ_between_calls(factory):
    assert factory.new_round().obstacles != factory.new_round().obstacles


def test_injected_rng_is_used(config):
    rng = random.Random(0)
    factory = RoundFactory(config, rng=rng)
    assert factory.rng is rng


def test_obstacle_count_is_configurable():
    config = GameConfig(obstacle_count=5)
    assert len(RoundFactory(config, seed=2).new_round().obstacles) == 5


@pytest.mark.parametrize("state, terminal", [
    (RoundState.PLAYING, False),
    (RoundState.LOST, True),
    (RoundState.WON, True),
])
def test_terminal_states(state, terminal):
    assert state.is_terminal is terminal
