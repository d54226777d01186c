from abc import ABC, abstractmethod
from typing import Sequence


class AcrossStrategy(ABC):
    """
    Abstract base class for across strategies.
    With an odd number of seats nobody sits directly opposite the roller, so a "center" die has two
    candidate receivers: the seat left of center and the seat right of center. A strategy picks one.
    """
    name = None

    @abstractmethod
    def choose(self, left_seat: int, right_seat: int, chips: Sequence[int], rng) -> int:
        """
        Pick the seat that receives the chip.
        Args:
            left_seat (int): Seat at floor(N/2) positions from the roller.
            right_seat (int): Seat at ceil(N/2) positions from the roller.
            chips (sequence[int]): Current chip counts in seat order.
            rng: Random number generator owned by the engine.
        Returns:
            int: Either left_seat or right_seat.
        """
        raise NotImplementedError

    def __repr__(self):
        return f"{self.__class__.__name__}()"
