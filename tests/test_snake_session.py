import unittest

import numpy as np

from snake_session import (SPEED_TIERS, PauseGame, ResetGame, SnakeSession,
                           StartGame, UpdateDirection, tick_interval)
from snake_state import Coordinate, Direction, GameState, RunMode


def make_session(snake=((5, 5),), direction=Direction.RIGHT, food=(10, 10), **kwargs):
    state = GameState(snake=snake, direction=direction, food=food, **kwargs)
    return SnakeSession(rng=np.random.default_rng(0), initial_state=state)


class TestTickInterval(unittest.TestCase):
    def test_three_speed_tiers(self):
        self.assertEqual(tick_interval(1), 0.120)
        self.assertEqual(tick_interval(5), 0.120)
        self.assertEqual(tick_interval(6), 0.110)
        self.assertEqual(tick_interval(10), 0.110)
        self.assertEqual(tick_interval(11), 0.100)
        self.assertEqual(tick_interval(300), 0.100)

    def test_custom_table(self):
        tiers = ((2, 1.0),)
        self.assertEqual(tick_interval(2, tiers, fastest=0.5), 1.0)
        self.assertEqual(tick_interval(3, tiers, fastest=0.5), 0.5)
        self.assertEqual(SPEED_TIERS[0], (5, 0.120))


class TestRunModes(unittest.TestCase):
    def test_starts_idle(self):
        session = SnakeSession(seed=1)
        state = session.observe_state()
        self.assertEqual(state.run_mode, RunMode.IDLE)
        self.assertEqual(state.snake, (Coordinate(5, 5),))
        self.assertIs(session.state, state)

    def test_idle_does_not_tick(self):
        session = make_session()
        self.assertFalse(session.update(10.0))
        self.assertEqual(session.state.snake, (Coordinate(5, 5),))

    def test_start_pause_resume(self):
        session = make_session()
        session.on_intent(StartGame())
        self.assertEqual(session.state.run_mode, RunMode.RUNNING)
        session.on_intent(PauseGame())
        self.assertEqual(session.state.run_mode, RunMode.PAUSED)
        self.assertFalse(session.update(1.0))
        session.on_intent(StartGame())
        self.assertEqual(session.state.run_mode, RunMode.RUNNING)

    def test_pause_does_not_touch_the_rest_of_the_state(self):
        session = make_session()
        session.start()
        before = session.state
        session.pause()
        self.assertEqual(session.state.snake, before.snake)
        self.assertEqual(session.state.food, before.food)
        self.assertEqual(session.state.direction, before.direction)

    def test_unknown_intent_is_rejected(self):
        with self.assertRaises(TypeError):
            make_session().on_intent("start")


class TestTicks(unittest.TestCase):
    def test_tick_after_interval(self):
        session = make_session()
        session.start()
        self.assertFalse(session.update(0.05))
        self.assertFalse(session.update(0.05))
        self.assertTrue(session.update(0.05))
        self.assertEqual(session.state.snake, (Coordinate(6, 5),))

    def test_one_tick_per_update(self):
        session = make_session()
        session.start()
        self.assertTrue(session.update(5.0))
        self.assertEqual(session.state.snake, (Coordinate(6, 5),))

    def test_starting_twice_does_not_speed_up(self):
        session = make_session()
        session.start()
        session.update(0.1)
        session.start()  # No reinicia ni duplica el temporizador
        self.assertTrue(session.update(0.03))
        self.assertEqual(session.state.snake, (Coordinate(6, 5),))
        self.assertFalse(session.update(0.1))

    def test_pause_mid_delay_cancels_pending_tick(self):
        session = make_session()
        session.start()
        session.update(0.1)
        session.pause()
        session.update(0.1)
        session.start()
        self.assertFalse(session.update(0.1))
        self.assertEqual(session.state.snake, (Coordinate(5, 5),))
        self.assertTrue(session.update(0.03))

    def test_interval_follows_snake_length(self):
        snake = tuple((x, 5) for x in range(12, 0, -1))  # 12 segmentos
        session = make_session(snake=snake, direction=Direction.DOWN)
        self.assertEqual(session.current_interval(), 0.100)
        session.start()
        self.assertFalse(session.update(0.09))
        self.assertTrue(session.update(0.02))

    def test_speed_tiers_hold_at_sixty_frames_per_second(self):
        # 6 segundos de frames a 1/60 s, como llaman arcade y curses
        expected = {1: 50, 6: 54, 12: 60}
        for length, expected_ticks in expected.items():
            snake = tuple((x, 5) for x in range(length, 0, -1))
            session = make_session(snake=snake, direction=Direction.RIGHT, food=(1, 8),
                                   grid_width=200, grid_height=10)
            session.start()
            ticks = sum(session.update(1 / 60) for _ in range(360))
            self.assertFalse(session.state.is_game_over, length)
            self.assertEqual(len(session.state.snake), length)
            self.assertAlmostEqual(ticks, expected_ticks, delta=1, msg=length)

    def test_leftover_time_counts_for_next_tick(self):
        session = make_session()
        session.start()
        self.assertTrue(session.update(0.2))   # Sobran 0.08 s
        self.assertTrue(session.update(0.05))
        self.assertEqual(session.state.snake, (Coordinate(7, 5),))

    def test_ticks_keep_firing_after_game_over(self):
        session = make_session(snake=((18, 5),), direction=Direction.RIGHT)
        session.start()
        self.assertTrue(session.tick())
        over = session.state
        self.assertTrue(over.is_game_over)
        self.assertTrue(session.tick())
        self.assertEqual(session.state, over)
        self.assertEqual(session.state.run_mode, RunMode.RUNNING)

    def test_eating_through_session(self):
        session = make_session(food=(6, 5))
        session.start()
        session.tick()
        self.assertEqual(len(session.state.snake), 2)
        self.assertEqual(session.state.score, 1)


class TestDirection(unittest.TestCase):
    def test_tap_changes_direction(self):
        # Lienzo de 400px y 20 celdas: 20px por celda; cabeza en (5, 5)
        session = make_session()
        session.on_intent(UpdateDirection(100.0, 20.0, 400))
        self.assertEqual(session.state.direction, Direction.UP)
        session.on_intent(UpdateDirection(20.0, 300.0, 400))
        self.assertEqual(session.state.direction, Direction.LEFT)

    def test_direction_applies_on_next_tick(self):
        session = make_session()
        session.start()
        session.submit_direction(100.0, 300.0, 400)
        session.tick()
        self.assertEqual(session.state.snake, (Coordinate(5, 6),))

    def test_ignored_after_game_over(self):
        session = make_session(is_game_over=True)
        session.submit_direction(100.0, 20.0, 400)
        self.assertEqual(session.state.direction, Direction.RIGHT)


class TestReset(unittest.TestCase):
    def test_reset_after_game_over(self):
        session = make_session(snake=((18, 5), (17, 5), (16, 5)))
        session.start()
        session.tick()
        self.assertTrue(session.state.is_game_over)
        session.on_intent(ResetGame())
        state = session.state
        self.assertFalse(state.is_game_over)
        self.assertEqual(state.run_mode, RunMode.IDLE)
        self.assertEqual(state.snake, (Coordinate(5, 5),))
        self.assertEqual(state.direction, Direction.RIGHT)
        self.assertTrue(1 <= state.food.x <= 18 and 1 <= state.food.y <= 28)

    def test_reset_mid_run_stops_ticks(self):
        session = make_session()
        session.start()
        session.update(0.1)
        session.reset()
        self.assertEqual(session.state.run_mode, RunMode.IDLE)
        self.assertFalse(session.update(1.0))
        self.assertEqual(session.state.snake, (Coordinate(5, 5),))

    def test_reset_keeps_grid_size(self):
        session = SnakeSession(grid_width=12, grid_height=10, seed=3)
        session.reset()
        self.assertEqual((session.state.grid_width, session.state.grid_height), (12, 10))


class TestSubscribers(unittest.TestCase):
    def test_notified_on_every_publish(self):
        session = make_session()
        published = []
        unsubscribe = session.subscribe(published.append)
        session.start()
        session.tick()
        session.submit_direction(100.0, 20.0, 400)
        session.pause()
        session.reset()
        self.assertEqual(len(published), 5)
        self.assertIs(published[-1], session.state)
        unsubscribe()
        session.start()
        self.assertEqual(len(published), 5)


if __name__ == '__main__':
    unittest.main()
