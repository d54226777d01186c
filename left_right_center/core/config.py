"""
config.py
Defines the GameConfig dataclass, which centralizes the table size, chip count, center routing and per-seat
strategies for the Left-Right-Center engine, and the InvalidConfiguration error raised when
any of them is out of bounds.
Related modules:
- engine.py: Uses GameConfig to initialize the table and validates it before any state exists.
- strategies: Strategy names in GameConfig.strategies must be registered in STRATEGY_MAP.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from left_right_center.strategies import STRATEGY_MAP

DEFAULT_STRATEGY = "random"

# "pool": center dice leave the table. "across": center dice go to the seat(s) opposite the roller.
CENTER_POOL = "pool"
CENTER_ACROSS = "across"
CENTER_MODES = (CENTER_POOL, CENTER_ACROSS)


class InvalidConfiguration(ValueError):
    """
    Raised when a table cannot be set up: fewer than two players, fewer than one starting chip,
    a strategy list whose length differs from the player count, an unknown strategy name or an unknown center mode.
    """
    pass


@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes all rule options for a Left-Right-Center game.
    Fields:
        num_players (int): Number of seats around the table (default 5).
        starting_chips (int): Chips each player holds after a reset (default 3).
        strategies (tuple|None): Across-strategy name per seat; None means every seat uses "random".
        center_mode (str): "pool" (default) sends center dice to the center pool;
            "across" sends them to the opposite seat, using the roller's strategy on odd tables.
        rng_seed (int|None): Seed for the engine's default RNG. None draws from system entropy.
    """
    num_players: int = 5
    starting_chips: int = 3
    strategies: Optional[Tuple[str, ...]] = None
    center_mode: str = CENTER_POOL
    rng_seed: Optional[int] = None

    def validate(self) -> None:
        """
        Validates the configuration.
        Raises:
            InvalidConfiguration: If any field is out of bounds.
        """
        validate_table(self.num_players, self.starting_chips, self.strategies, self.center_mode)

    def strategy_for(self, seat: int) -> str:
        """
        Returns the strategy name for a seat.
        Args:
            seat (int): Seat index.
        Returns:
            str: Registered strategy name.
        """
        if not self.strategies:
            return DEFAULT_STRATEGY
        return self.strategies[seat]


def validate_table(num_players, starting_chips, strategies=None, center_mode=CENTER_POOL) -> None:
    """
    Checks table parameters without building anything.
    Args:
        num_players (int): Number of seats.
        starting_chips (int): Chips per seat after a reset.
        strategies (sequence|None): Strategy names, one per seat.
        center_mode (str): One of CENTER_MODES.
    Raises:
        InvalidConfiguration: On the first violated constraint.
    """
    if not isinstance(num_players, int) or num_players < 2:
        raise InvalidConfiguration(f"num_players must be an integer >= 2, got {num_players!r}")
    if not isinstance(starting_chips, int) or starting_chips < 1:
        raise InvalidConfiguration(f"starting_chips must be an integer >= 1, got {starting_chips!r}")
    if center_mode not in CENTER_MODES:
        raise InvalidConfiguration(f"center_mode must be one of {list(CENTER_MODES)}, got {center_mode!r}")
    if strategies is None:
        return
    if len(strategies) != num_players:
        raise InvalidConfiguration(
            f"expected {num_players} strategies (one per seat), got {len(strategies)}"
        )
    unknown = [name for name in strategies if name not in STRATEGY_MAP]
    if unknown:
        raise InvalidConfiguration(
            f"Unknown strategies: {unknown}. Supported: {sorted(STRATEGY_MAP.keys())}"
        )


def parse_strategy_list(s: Optional[str], num_players: int) -> Optional[List[str]]:
    """
    Turn a comma-separated strategy flag into one name per seat.
    A single name applies to every seat; a longer list must name one strategy per seat (checked by validate_table).
    Args:
        s (str|None): Flag value, e.g. "richer" or "left,right,random".
        num_players (int): Number of seats.
    Returns:
        list[str]|None: Names in seat order, or None when the flag is empty.
    """
    if s is None or not s.strip():
        return None
    names = [x.strip().lower() for x in s.split(',') if x.strip()]
    if len(names) == 1:
        return names * num_players
    return names
