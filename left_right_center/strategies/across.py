from .base import AcrossStrategy
from . import register_strategy


@register_strategy("random")
class RandomPick(AcrossStrategy):
    """Picks either candidate with equal probability. Used when no strategy is configured."""

    def choose(self, left_seat, right_seat, chips, rng):
        return left_seat if rng.random() < 0.5 else right_seat


@register_strategy("left")
class PreferLeft(AcrossStrategy):
    """Always passes to the seat left of center."""

    def choose(self, left_seat, right_seat, chips, rng):
        return left_seat


@register_strategy("right")
class PreferRight(AcrossStrategy):
    """Always passes to the seat right of center."""

    def choose(self, left_seat, right_seat, chips, rng):
        return right_seat


@register_strategy("richer")
class PreferRicher(AcrossStrategy):
    """
    Passes to whichever candidate holds strictly more chips.
    Equal stacks go to the seat right of center.
    """

    def choose(self, left_seat, right_seat, chips, rng):
        return left_seat if chips[left_seat] > chips[right_seat] else right_seat


@register_strategy("poorer")
class PreferPoorer(AcrossStrategy):
    """
    Passes to whichever candidate holds strictly fewer chips.
    Equal stacks go to the seat right of center.
    """

    def choose(self, left_seat, right_seat, chips, rng):
        return left_seat if chips[left_seat] < chips[right_seat] else right_seat
