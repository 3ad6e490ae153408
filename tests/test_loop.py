import dataclasses
import random

import pytest

from tilt_space.config import GameConfig
from tilt_space.core import Outcome, RoundFactory, RoundState, SimulationLoop, TiltSample, Vector2
from tilt_space.host import BaseSensor, ManualFrameClock

from conftest import RecordingSink, ScriptedFactory, make_round

QUIET = make_round(obstacles=[(300, 600, 0, 0)])
CRASH = make_round(obstacles=[(120, 110, 0, 0)])
ARRIVE = make_round(obstacles=[(300, 600, 0, 0)], goal=(150, 160))
BOTH = make_round(obstacles=[(120, 110, 0, 0)], goal=(110, 100))


def build(config, clock, sensor, sink, *rounds):
    loop = SimulationLoop(config, clock, sensor=sensor, sink=sink,
                          factory=ScriptedFactory(*rounds))
    loop.start()
    return loop


class TestScheduling:

    def test_start_subscribes_and_requests_tick(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, QUIET)
        assert loop.running
        assert clock.pending == 1
        assert sensor.subscriber_count == 1

    def test_start_twice_requests_once(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, QUIET)
        loop.start()
        assert clock.pending == 1
        assert sensor.subscriber_count == 1

    def test_each_frame_runs_one_tick(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, QUIET)
        clock.advance(10)
        assert loop.tick_count == 10
        assert clock.pending == 1

    def test_stop_cancels_pending_tick(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, QUIET)
        loop.stop()
        assert clock.pending == 0
        assert sensor.subscriber_count == 0
        assert clock.advance(3) == 0
        assert loop.tick_count == 0

    def test_no_sensor_is_not_an_error(self, config, clock, sink):
        loop = SimulationLoop(config, clock, sensor=None, sink=sink,
                              factory=ScriptedFactory(QUIET))
        loop.start()
        clock.advance(5)
        assert loop.snapshot().craft.position == Vector2(100, 100)
        assert loop.state is RoundState.PLAYING


class TestInput:

    def test_latest_sample_applied(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, QUIET)
        sensor.emit(TiltSample(-1, 0))
        sensor.emit(TiltSample(1, 1))
        clock.advance(1)
        assert loop.snapshot().craft.position == Vector2(105, 95)

    def test_no_new_sample_keeps_craft(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, QUIET)
        sensor.emit(TiltSample(1, 0))
        clock.advance(1)
        clock.advance(3)
        assert loop.snapshot().craft.position == Vector2(105, 100)

    def test_obstacles_advance_every_tick(self, config, clock, sensor, sink):
        moving = make_round(obstacles=[(200, 400, 1, 0)])
        loop = build(config, clock, sensor, sink, moving)
        clock.advance(4)
        assert loop.snapshot().obstacles[0].position == Vector2(220, 400)

    def test_craft_stays_inside_playfield(self, clock, sensor, sink):
        config = GameConfig(width=400, height=800, obstacle_count=0)
        loop = SimulationLoop(config, clock, sensor=sensor, sink=sink,
                              factory=RoundFactory(config, seed=3))
        loop.start()
        rng = random.Random(5)
        for _ in range(500):
            sensor.emit(TiltSample(rng.uniform(-50, 50), rng.uniform(-50, 50)))
            clock.advance(1)
            if loop.state is not RoundState.PLAYING:
                loop.reset()
            craft = loop.snapshot().craft
            assert 25 <= craft.position.x <= 375
            assert 25 <= craft.position.y <= 775


class TestOutcomes:

    def test_crash_is_lost(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, CRASH)
        clock.advance(1)
        assert loop.state is RoundState.LOST
        assert loop.snapshot().state is RoundState.LOST
        assert loop.last_hit is loop.snapshot().obstacles[0]
        assert (sink.lost, sink.won) == (1, 0)

    def test_arrival_is_won(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, ARRIVE)
        clock.advance(1)
        assert loop.state is RoundState.WON
        assert (sink.lost, sink.won) == (0, 1)

    def test_lost_beats_won_in_same_tick(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, BOTH)
        clock.advance(1)
        assert loop.state is RoundState.LOST
        assert (sink.lost, sink.won) == (1, 0)

    def test_terminal_stops_scheduling_and_input(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, CRASH)
        clock.advance(1)
        assert clock.pending == 0
        assert sensor.subscriber_count == 0
        assert not loop.has_pending_tick

    def test_terminal_state_is_stable(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, make_round(obstacles=[(120, 110, 1, 1)]))
        clock.advance(1)
        frozen = loop.snapshot()

        sensor.emit(TiltSample(1, 1))
        assert clock.advance(5) == 0
        assert loop.tick() is Outcome.CONTINUE
        assert loop.tick() is Outcome.CONTINUE

        assert loop.snapshot() is frozen
        assert (sink.lost, sink.won) == (1, 0)


class TestReset:

    def test_reset_starts_new_playing_round(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, CRASH, QUIET)
        clock.advance(1)
        fresh = loop.reset()
        assert fresh is QUIET
        assert loop.state is RoundState.PLAYING
        assert loop.tick_count == 0
        assert loop.last_hit is None
        assert clock.pending == 1
        assert sensor.subscriber_count == 1

    def test_reset_cancels_in_flight_tick(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, QUIET)
        loop.reset()
        loop.reset()
        assert clock.pending == 1
        assert clock.advance(1) == 1
        assert loop.tick_count == 1

    def test_reset_drops_buffered_sample(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, QUIET)
        sensor.emit(TiltSample(1, 0))
        loop.reset()
        clock.advance(1)
        assert loop.snapshot().craft.position == Vector2(100, 100)

    def test_reset_when_stopped_does_not_schedule(self, config, clock, sensor, sink):
        loop = SimulationLoop(config, clock, sensor=sensor, sink=sink,
                              factory=ScriptedFactory(QUIET))
        loop.reset()
        assert clock.pending == 0
        assert sensor.subscriber_count == 0

    def test_notifications_fire_again_next_round(self, config, clock, sensor, sink):
        loop = build(config, clock, sensor, sink, CRASH, ARRIVE)
        clock.advance(1)
        loop.reset()
        clock.advance(1)
        assert (sink.lost, sink.won) == (1, 1)

    def test_reset_completeness_with_random_rounds(self, config, clock, sensor, sink):
        factory = RoundFactory(config, seed=99)
        loop = SimulationLoop(config, clock, sensor=sensor, sink=sink, factory=factory)
        loop.start()
        clock.advance(20)
        before = loop.snapshot()

        after = loop.reset()
        assert after.state is RoundState.PLAYING
        assert after.craft.position == factory.start_position()
        assert len(after.obstacles) == len(before.obstacles) == config.obstacle_count
        assert after.obstacles is not before.obstacles
        for old, new in zip(before.obstacles, after.obstacles):
            assert new is not old
            assert new.velocity is not old.velocity


def test_snapshot_cannot_be_mutated(config, clock, sensor, sink):
    loop = build(config, clock, sensor, sink, QUIET)
    snapshot = loop.snapshot()
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.state = RoundState.WON
    with pytest.raises(dataclasses.FrozenInstanceError):
        snapshot.craft.position = Vector2(0, 0)
    assert loop.state is RoundState.PLAYING


def test_stray_tick_after_stop_is_impossible(config, sensor, sink):
    clock = ManualFrameClock()
    loop = build(config, clock, sensor, sink, QUIET)
    loop.stop()
    loop.reset()
    assert clock.pending == 0
    loop.start()
    assert clock.pending == 1


def test_sensor_detached_from_other_listeners(config, clock, sink):
    sensor = BaseSensor()
    seen = []
    sensor.subscribe(seen.append)
    build(config, clock, sensor, sink, CRASH)
    clock.advance(1)
    sensor.emit(TiltSample(0, 1))
    assert seen == [TiltSample(0, 1)]
    assert sensor.subscriber_count == 1
