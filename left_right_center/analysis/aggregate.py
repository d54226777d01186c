"""
aggregate.py
Caller-side accumulation of Left-Right-Center game outcomes: win tallies, running average and min/max turns.
The engine owns none of this state; run_batch creates one engine per batch and records each GameResult here.
Related modules:
- core/engine.py: GameEngine.play_game produces the GameResult values recorded here.
- serializer.py: Renders SimulationSummary.as_dict() as JSON.
- plotting.py: Charts compare_strategies output.
"""

import random
from dataclasses import replace
from typing import Dict, List, Optional, Sequence

from left_right_center.core.config import GameConfig, InvalidConfiguration
from left_right_center.core.engine import GameEngine, GameResult
from left_right_center.strategies import STRATEGY_MAP


class SimulationSummary:
    """
    Running statistics over many games at one table size.
    Fields:
        games (int): Games recorded.
        total_turns (int): Sum of turns over all games.
        running_average (float): Mean turns per game, updated incrementally.
        min_turns (int|None), max_turns (int|None): Extremes seen so far.
        wins (list[int]): Win count per seat.
    """
    def __init__(self, num_players: int):
        self.num_players = num_players
        self.games = 0
        self.total_turns = 0
        self.running_average = 0.0
        self.min_turns: Optional[int] = None
        self.max_turns: Optional[int] = None
        self.wins: List[int] = [0] * num_players

    def record(self, result: GameResult) -> None:
        """Fold one game's outcome into the totals."""
        turns = result.turn_count
        self.games += 1
        self.total_turns += turns
        self.wins[result.winner_index] += 1
        self.running_average += (turns - self.running_average) / self.games
        if self.min_turns is None or turns < self.min_turns:
            self.min_turns = turns
        if self.max_turns is None or turns > self.max_turns:
            self.max_turns = turns

    def win_share(self, seat: int) -> float:
        """Fraction of recorded games won by `seat` (0.0 before any game)."""
        if self.games == 0:
            return 0.0
        return self.wins[seat] / self.games

    def as_dict(self) -> Dict:
        return {
            "num_players": self.num_players,
            "games": self.games,
            "total_turns": self.total_turns,
            "avg_turns": self.running_average,
            "min_turns": self.min_turns,
            "max_turns": self.max_turns,
            "wins": list(self.wins),
        }


def run_batch(config: GameConfig, num_games: int, rng=None, verbose: bool = False,
              progress_every: int = 100000) -> SimulationSummary:
    """
    Play `num_games` games with one engine and aggregate the outcomes.
    Args:
        config (GameConfig): Table configuration.
        num_games (int): Number of games to play (>= 1).
        rng: Optional random source shared by every game of the batch.
        verbose (bool): Print progress lines every `progress_every` games.
        progress_every (int): Progress interval.
    Returns:
        SimulationSummary: Aggregated results.
    Raises:
        InvalidConfiguration: If the configuration or game count is invalid. No game is played in that case.
    """
    if not isinstance(num_games, int) or num_games < 1:
        raise InvalidConfiguration(f"num_games must be an integer >= 1, got {num_games!r}")
    engine = GameEngine(config, rng=rng)
    summary = SimulationSummary(config.num_players)
    for i in range(num_games):
        summary.record(engine.play_game())
        if verbose and (i + 1) % progress_every == 0:
            print(f"[LRC] {i + 1}/{num_games} games, avg turns so far {summary.running_average:.3f}")
    if verbose:
        print(f"[LRC] Batch complete. {summary.games} games played.")
    return summary


def compare_strategies(config: GameConfig, num_games: int, seat: int = 0,
                       strategy_names: Optional[Sequence[str]] = None, rng=None,
                       verbose: bool = False) -> Dict[str, SimulationSummary]:
    """
    Run one batch per strategy with `seat` playing that strategy and every other seat keeping its configured one.
    Strategies only change outcomes when config.center_mode is "across" and the table has an odd number of seats.
    Args:
        config (GameConfig): Base table configuration.
        num_games (int): Games per strategy.
        seat (int): Seat whose strategy is varied.
        strategy_names (sequence[str]|None): Strategies to try; defaults to every registered strategy.
        rng: Optional random source; by default each batch gets its own RNG seeded from config.rng_seed.
        verbose (bool): Print one line per finished batch.
    Returns:
        dict[str, SimulationSummary]: Summary per strategy name, in the order tried.
    Raises:
        InvalidConfiguration: If the seat is off the table or a strategy name is unknown.
    """
    config.validate()
    if not isinstance(seat, int) or not 0 <= seat < config.num_players:
        raise InvalidConfiguration(f"seat must be between 0 and {config.num_players - 1}, got {seat!r}")
    names = list(strategy_names) if strategy_names else sorted(STRATEGY_MAP.keys())
    results = {}
    for name in names:
        strategies = [config.strategy_for(i) for i in range(config.num_players)]
        strategies[seat] = name
        cfg = replace(config, strategies=tuple(strategies))
        batch_rng = rng if rng is not None else random.Random(config.rng_seed)
        results[name] = run_batch(cfg, num_games, rng=batch_rng)
        if verbose:
            print(f"[LRC] seat {seat} playing {name!r}: won {results[name].win_share(seat) * 100.0:.2f}%")
    return results
