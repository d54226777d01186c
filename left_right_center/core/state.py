"""
state.py
Defines the game state dataclasses for Left-Right-Center: PlayerState and GameState.
Related modules:
- engine.py: Mutates and reads GameState during play.
- config.py: GameConfig is part of GameState.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .config import DEFAULT_STRATEGY, GameConfig


@dataclass
class PlayerState:
    """
    Stores the state of a single seat.
    Fields:
        seat (int): Seat index around the table, fixed for the game.
        chips (int): Chips currently held (never negative).
        strategy (str): Across-strategy name used when the table has an odd number of seats.
    """
    seat: int
    chips: int
    strategy: str = DEFAULT_STRATEGY


@dataclass
class GameState:
    """
    Composite state for one game: config, the seats in table order, and turn bookkeeping.
    Fields:
        config (GameConfig): Game configuration.
        players (list[PlayerState]): One PlayerState per seat; index == seat.
        turn_count (int): Number of turns taken since the last reset.
        center_pool (int): Chips sent to the center; they never come back and do not count towards winning.
        status (str): NOT_STARTED | IN_PROGRESS | ENDED.
        winner (int|None): Seat of the winner once the game has ended.
    """
    config: GameConfig
    players: List[PlayerState] = field(default_factory=list)
    turn_count: int = 0
    center_pool: int = 0
    status: str = "NOT_STARTED"
    winner: Optional[int] = None

    @property
    def num_players(self) -> int:
        return len(self.players)

    def chips(self) -> List[int]:
        """Chip counts in seat order."""
        return [p.chips for p in self.players]

    def total_chips(self) -> int:
        """Seated chips plus the center pool; constant for the whole game."""
        return sum(p.chips for p in self.players) + self.center_pool
