import random
import unittest

from left_right_center.core.config import GameConfig
from left_right_center.core.dice import CENTER, KEEP, LEFT, RIGHT
from left_right_center.core.engine import POOL, GameEngine, ImpossibleState, across_seats, resolve_target
from left_right_center.strategies.base import AcrossStrategy
from left_right_center.strategies.across import PreferLeft


class ExplodingStrategy(AcrossStrategy):
    def choose(self, left_seat, right_seat, chips, rng):
        raise AssertionError("strategy must not be consulted")


class BogusStrategy(AcrossStrategy):
    def choose(self, left_seat, right_seat, chips, rng):
        return 0


class TestTargetResolution(unittest.TestCase):
    """
    Tests for `resolve_target` and `across_seats`: neighbours wrap around the table, center dice go to the
    pool by default; across the table, even tables send them straight across without consulting the strategy
    and odd tables ask the strategy.
    """

    def test_neighbours_wrap(self):
        self.assertEqual(resolve_target(LEFT, 0, 5, PreferLeft(), (), None), 4)
        self.assertEqual(resolve_target(RIGHT, 4, 5, PreferLeft(), (), None), 0)
        self.assertIsNone(resolve_target(KEEP, 2, 5, PreferLeft(), (), None))

    def test_across_seats(self):
        self.assertEqual(across_seats(0, 5), (2, 3))
        self.assertEqual(across_seats(4, 5), (1, 2))
        self.assertEqual(across_seats(1, 3), (2, 0))
        self.assertEqual(across_seats(1, 4), (3, 3))

    def test_center_goes_to_pool_by_default(self):
        for n in (2, 3, 4, 5):
            self.assertEqual(resolve_target(CENTER, 1, n, ExplodingStrategy(), [1] * n, None), POOL)

    def test_even_table_never_consults_strategy(self):
        for n in (2, 4, 6, 8):
            for seat in range(n):
                target = resolve_target(CENTER, seat, n, ExplodingStrategy(), [1] * n, None, "across")
                self.assertEqual(target, (seat + n // 2) % n)

    def test_odd_table_consults_strategy(self):
        self.assertEqual(resolve_target(CENTER, 4, 5, PreferLeft(), [3] * 5, None, "across"), 1)

    def test_unknown_outcome_is_impossible(self):
        with self.assertRaises(ImpossibleState):
            resolve_target("X", 0, 4, PreferLeft(), [3] * 4, None)

    def test_strategy_picking_non_candidate_is_impossible(self):
        with self.assertRaises(ImpossibleState):
            resolve_target(CENTER, 1, 5, BogusStrategy(), [3] * 5, None, "across")


class TestEngineProperties(unittest.TestCase):
    """
    Statistical and structural properties over many random games: chip conservation after every turn,
    termination, winner validity, reproducibility with a fixed RNG, and even-table strategy invariance.
    Tables passing center dice across are kept small; nothing leaves those tables, so bigger ones run for
    tens of thousands of turns.
    """

    def test_chip_conservation_and_winner_validity(self):
        tables = (
            (2, None, "pool"),
            (3, ("richer",) * 3, "pool"),
            (4, None, "pool"),
            (5, ("left", "right", "richer", "poorer", "random"), "pool"),
            (6, None, "pool"),
            (2, None, "across"),
            (3, ("left", "richer", "poorer"), "across"),
        )
        for n, strategies, center_mode in tables:
            cfg = GameConfig(num_players=n, starting_chips=3, strategies=strategies, center_mode=center_mode)
            engine = GameEngine(cfg, rng=random.Random(n), record=True)
            for _ in range(200):
                result = engine.play_game()
                for snap in engine.turn_log:
                    self.assertEqual(sum(snap["chips"]) + snap["center_pool"], n * 3)
                    self.assertTrue(all(c >= 0 for c in snap["chips"]))
                chips = engine.state.chips()
                self.assertGreater(chips[result.winner_index], 0)
                self.assertEqual(chips[result.winner_index] + engine.state.center_pool, n * 3)
                self.assertEqual(sum(1 for c in chips if c == 0), n - 1)
                self.assertEqual(result.turn_count, len(engine.turn_log))
                if center_mode == "across":
                    self.assertEqual(engine.state.center_pool, 0)

    def test_games_terminate(self):
        engine = GameEngine(GameConfig(num_players=5, starting_chips=3), rng=random.Random(7))
        longest = 0
        for _ in range(10000):
            engine.reset_game(5, 3)
            while engine.take_turn() is None:
                self.assertLess(engine.state.turn_count, 100000)
            self.assertTrue(engine.is_terminal())
            longest = max(longest, engine.state.turn_count)
        self.assertLess(longest, 100000)

    def test_fixed_rng_reproduces_games(self):
        for center_mode, n, chips in (("pool", 5, 3), ("across", 3, 2)):
            strategies = ("random", "richer", "poorer", "left", "right")[:n]
            cfg = GameConfig(num_players=n, starting_chips=chips, strategies=strategies, center_mode=center_mode)
            first = GameEngine(cfg, rng=random.Random(42))
            second = GameEngine(cfg, rng=random.Random(42))
            self.assertEqual([first.play_game() for _ in range(300)], [second.play_game() for _ in range(300)])

    def test_config_seed_reproduces_games(self):
        cfg = GameConfig(num_players=3, starting_chips=2, rng_seed=5)
        self.assertEqual([GameEngine(cfg).play_game() for _ in range(3)], [GameEngine(cfg).play_game()] * 3)

    def test_even_table_ignores_strategies(self):
        for center_mode in ("pool", "across"):
            outcomes = []
            for name in ("random", "left", "right", "richer", "poorer"):
                cfg = GameConfig(num_players=4, starting_chips=1, strategies=(name,) * 4, center_mode=center_mode)
                engine = GameEngine(cfg, rng=random.Random(99))
                outcomes.append([engine.play_game() for _ in range(100)])
            for other in outcomes[1:]:
                self.assertEqual(outcomes[0], other)

    def test_play_game_resets_between_games(self):
        engine = GameEngine(GameConfig(num_players=4, starting_chips=3), rng=random.Random(3))
        for _ in range(20):
            engine.play_game()
            self.assertEqual(engine.total_chips(), 12)
        self.assertEqual(engine.state.status, "ENDED")

    def test_reset_game_reuses_players(self):
        engine = GameEngine(GameConfig(num_players=5), rng=random.Random(1))
        players = list(engine.state.players)
        engine.play_game()
        engine.reset_game(5, 4, ["left"] * 5)
        self.assertTrue(all(a is b for a, b in zip(players, engine.state.players)))
        self.assertEqual(engine.state.chips(), [4] * 5)
        self.assertEqual(engine.state.center_pool, 0)
        self.assertEqual([p.strategy for p in engine.state.players], ["left"] * 5)
        self.assertEqual(engine.state.turn_count, 0)
        self.assertEqual(engine.state.status, "NOT_STARTED")
        self.assertEqual(engine.config.center_mode, "pool")

        engine.reset_game(3, 2, center_mode="across")
        self.assertEqual(engine.state.chips(), [2, 2, 2])
        self.assertEqual([p.seat for p in engine.state.players], [0, 1, 2])
        self.assertEqual(engine.config.num_players, 3)
        self.assertEqual(engine.config.center_mode, "across")
        self.assertIsNone(engine.config.strategies)

    def test_fresh_reset_is_not_terminal(self):
        engine = GameEngine(GameConfig(num_players=2, starting_chips=1), rng=random.Random(0))
        self.assertIsNone(engine.get_winner())
        self.assertFalse(engine.is_terminal())
        result = engine.play_game()
        self.assertGreaterEqual(result.turn_count, 1)


if __name__ == '__main__':
    unittest.main()
