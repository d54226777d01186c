"""
engine.py
Implements the GameEngine class, which owns the table, resolves turns and die outcomes, detects the end of a game
and optionally records a per-turn trace.
Related modules:
- config.py: GameConfig is used to configure the engine; InvalidConfiguration is raised for bad tables.
- state.py: GameState and PlayerState hold all game data.
- dice.py: Die outcomes and the per-turn dice count.
- strategies: Across strategies resolve "center" dice in across mode when the table has an odd number of seats.
"""

import random
from dataclasses import dataclass, replace
from typing import Dict, List, Optional, Sequence

from left_right_center.strategies import STRATEGY_MAP
from left_right_center.strategies.base import AcrossStrategy

from .config import CENTER_ACROSS, CENTER_POOL, GameConfig, validate_table
from .dice import CENTER, KEEP, LEFT, RIGHT, dice_for, roll_die
from .state import GameState, PlayerState

# target returned by resolve_target for a chip that goes to the center pool
POOL = -1


class ImpossibleState(RuntimeError):
    """
    Raised when a die outcome cannot be mapped to a seat. This means the engine itself is broken;
    it is never raised for bad input and callers should not try to recover from it.
    """
    pass


class IllegalMoveError(Exception):
    """
    Raised when a turn is requested for a game that has already ended.
    """
    pass


@dataclass(frozen=True)
class GameResult:
    """
    Outcome of one game.
    Fields:
        winner_index (int): Seat holding every remaining seated chip.
        turn_count (int): Number of turns taken, eliminated seats' empty turns included.
    """
    winner_index: int
    turn_count: int


def across_seats(seat: int, num_players: int):
    """
    Seats on either side of the mathematical opposite of `seat`.
    For an even table both values are the single opposite seat.
    Returns:
        tuple[int, int]: (left_of_center, right_of_center).
    """
    return (seat + num_players // 2) % num_players, (seat + (num_players + 1) // 2) % num_players


def resolve_target(outcome: str, seat: int, num_players: int, strategy: AcrossStrategy,
                   chips: Sequence[int], rng, center_mode: str = CENTER_POOL) -> Optional[int]:
    """
    Map a die outcome rolled by `seat` to the seat that receives the chip.
    Args:
        outcome (str): LEFT, RIGHT, CENTER or KEEP.
        seat (int): Roller's seat.
        num_players (int): Table size.
        strategy (AcrossStrategy): Roller's across strategy; only consulted for CENTER on an odd table in across mode.
        chips (sequence[int]): Current chip counts in seat order.
        rng: RNG handed to the strategy.
        center_mode (str): CENTER_POOL sends CENTER to the pool; CENTER_ACROSS sends it across the table.
    Returns:
        int|None: Receiving seat, POOL for the center pool, or None when the roller keeps the chip.
    Raises:
        ImpossibleState: If the outcome is unknown or the strategy picks a seat that is not a candidate.
    """
    if outcome == KEEP:
        return None
    if outcome == LEFT:
        return (seat - 1) % num_players
    if outcome == RIGHT:
        return (seat + 1) % num_players
    if outcome == CENTER:
        if center_mode == CENTER_POOL:
            return POOL
        if center_mode != CENTER_ACROSS:
            raise ImpossibleState(f"Unknown center mode {center_mode!r}")
        left_seat, right_seat = across_seats(seat, num_players)
        if left_seat == right_seat:
            return left_seat
        target = strategy.choose(left_seat, right_seat, chips, rng)
        if target not in (left_seat, right_seat):
            raise ImpossibleState(
                f"{strategy!r} picked seat {target} for seat {seat}; expected {left_seat} or {right_seat}"
            )
        return target
    raise ImpossibleState(f"Unknown die outcome {outcome!r}")


class GameEngine:
    """
    State machine for Left-Right-Center: NOT_STARTED (fresh reset) -> IN_PROGRESS -> ENDED.
    Each take_turn() call performs exactly one transition. play_game() resets the chips and runs a whole game.
    The RNG is owned by the engine; pass a deterministic one to reproduce a game exactly.
    """
    def __init__(self, config: GameConfig, rng=None, record: bool = False):
        """
        Initialize a new engine with the given configuration.
        Args:
            config (GameConfig): Game configuration.
            rng: Optional random source (random.Random or anything with randint/random).
            record (bool): If True, keep a per-turn turn_log and an event stream.
        Raises:
            InvalidConfiguration: If the configuration is invalid.
        """
        config.validate()
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.rng_seed)
        self.record = record
        self.state: Optional[GameState] = None
        self._strategies: List[AcrossStrategy] = []
        self._events: List[Dict] = []
        # turn_log holds one snapshot per turn when recording
        self.turn_log: List[Dict] = []
        self.reset_game(config.num_players, config.starting_chips, config.strategies)

    def _emit(self, event: Dict):
        """
        Internal: Record an event (dict) for later retrieval.
        """
        if self.record:
            self._events.append(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        Returns:
            list[dict]: List of event dicts.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """
        Return all events emitted so far (does not clear).
        Returns:
            list[dict]: List of event dicts.
        """
        return list(self._events)

    def _snapshot(self, seat: int, rolls: List[str], transfers: List[tuple]):
        """
        Internal: Append a snapshot of the table after a turn.
        """
        snap = {
            "turn": self.state.turn_count,
            "seat": seat,
            "rolls": list(rolls),
            "transfers": list(transfers),
            "chips": self.state.chips(),
            "center_pool": self.state.center_pool,
        }
        self.turn_log.append(snap)
        return snap

    def reset_game(self, num_players: int, starting_chips: int, strategies: Optional[Sequence[str]] = None,
                   center_mode: Optional[str] = None) -> None:
        """
        (Re)initialize the table. Existing PlayerState objects are reused when the seat count is unchanged.
        Args:
            num_players (int): Number of seats.
            starting_chips (int): Chips per seat.
            strategies (sequence[str]|None): Across-strategy name per seat; None for the default.
            center_mode (str|None): "pool" or "across"; None keeps the current mode.
        Raises:
            InvalidConfiguration: If the parameters are invalid. Nothing is mutated in that case.
        """
        if center_mode is None:
            center_mode = self.config.center_mode
        validate_table(num_players, starting_chips, strategies, center_mode)
        self.config = replace(
            self.config,
            num_players=num_players,
            starting_chips=starting_chips,
            strategies=tuple(strategies) if strategies is not None else None,
            center_mode=center_mode,
        )
        if self.state is not None and self.state.num_players == num_players:
            self.state.config = self.config
            players = self.state.players
        else:
            players = [PlayerState(seat=i, chips=starting_chips) for i in range(num_players)]
            self.state = GameState(config=self.config, players=players)
        for p in players:
            p.strategy = self.config.strategy_for(p.seat)
        self._strategies = [STRATEGY_MAP[p.strategy]() for p in players]
        self._reset_players()

    def _reset_players(self) -> None:
        """
        Internal: Put every seat back to the starting chip count, empty the center pool and clear turn bookkeeping.
        """
        for p in self.state.players:
            p.chips = self.config.starting_chips
        self.state.center_pool = 0
        self.state.turn_count = 0
        self.state.status = "NOT_STARTED"
        self.state.winner = None
        self._events.clear()
        self.turn_log = []

    def play_game(self) -> GameResult:
        """
        Play one full game from a fresh reset of the most recent table configuration.
        Returns:
            GameResult: Winner seat and number of turns taken.
        """
        self._reset_players()
        while self.state.winner is None:
            self.take_turn()
        return GameResult(winner_index=self.state.winner, turn_count=self.state.turn_count)

    def take_turn(self) -> Optional[int]:
        """
        Let the active seat roll its dice and pass chips, then check whether the game is over.
        Seats take turns in order starting at seat 0; a seat with no chips rolls no dice but still uses its turn.
        Returns:
            int|None: Winner seat if this turn ended the game, otherwise None.
        Raises:
            IllegalMoveError: If the game has already ended.
        """
        if self.state.status == "ENDED":
            raise IllegalMoveError("Game has already ended; call play_game() or reset_game() first")
        if self.state.status == "NOT_STARTED":
            self.state.status = "IN_PROGRESS"
            self._emit({"type": "GameStarted", "chips": self.state.chips()})

        players = self.state.players
        n = len(players)
        seat = self.state.turn_count % n
        roller = players[seat]
        rolls = [] if self.record else None
        transfers = [] if self.record else None
        # dice count is fixed before the first die; passing chips mid-turn does not change it
        for _ in range(dice_for(roller.chips)):
            outcome = roll_die(self.rng)
            if self.record:
                rolls.append(outcome)
            target = self.resolve_target(outcome, seat)
            if target is None:
                continue
            if target == POOL:
                self.state.center_pool += 1
            else:
                players[target].chips += 1
            roller.chips -= 1
            if self.record:
                transfers.append((seat, target))
                self._emit({"type": "ChipPassed", "from": seat, "to": target, "outcome": outcome})
        self.state.turn_count += 1

        winner = self.get_winner()
        if winner is not None:
            self.state.status = "ENDED"
            self.state.winner = winner
            self._emit({"type": "GameEnded", "winner": winner, "turns": self.state.turn_count})
        if self.record:
            self._snapshot(seat, rolls, transfers)
        return winner

    def resolve_target(self, outcome: str, seat: int) -> Optional[int]:
        """
        Map a die outcome rolled by `seat` to the receiving seat (or POOL) using the table's center mode
        and that seat's strategy.
        """
        chips = self.state.chips() if outcome == CENTER else ()
        return resolve_target(outcome, seat, self.state.num_players, self._strategies[seat], chips, self.rng,
                              self.config.center_mode)

    def get_winner(self) -> Optional[int]:
        """
        Finds the winner: the only seat still holding chips. The center pool is not a seat and never wins.
        Returns:
            int|None: Seat of the winner, or None while two or more seats hold chips.
        """
        num_zeros = 0
        holder = None
        for p in self.state.players:
            if p.chips == 0:
                num_zeros += 1
            else:
                holder = p.seat
        if num_zeros == self.state.num_players - 1:
            return holder
        return None

    def is_terminal(self) -> bool:
        """
        Returns True if the game has ended.
        """
        return self.state.status == "ENDED"

    def total_chips(self) -> int:
        """Seated chips plus the center pool."""
        return self.state.total_chips()
