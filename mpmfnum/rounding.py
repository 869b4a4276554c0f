"""Rounding modes, rounding directions and the rounding-context interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Tuple

from mpmfnum.number import Real


class RoundingDirection(Enum):
    """Directed rounding, independent of the sign of the value."""

    TO_ZERO = "to_zero"
    AWAY_ZERO = "away_zero"
    TO_EVEN = "to_even"
    TO_ODD = "to_odd"


class RoundingMode(Enum):
    """How lost digits affect the retained significand.

    The first five are the IEEE 754 modes; ``AWAY_ZERO``, ``TO_EVEN``
    and ``TO_ODD`` are additional directed modes.
    """

    NEAREST_TIES_TO_EVEN = "nearest_ties_to_even"
    NEAREST_TIES_AWAY_ZERO = "nearest_ties_away_zero"
    TO_POSITIVE = "to_positive"
    TO_NEGATIVE = "to_negative"
    TO_ZERO = "to_zero"
    AWAY_ZERO = "away_zero"
    TO_EVEN = "to_even"
    TO_ODD = "to_odd"

    def to_direction(self, sign: bool) -> Tuple[bool, RoundingDirection]:
        """Return ``(is_nearest, direction)`` for a value of the given sign.

        When ``is_nearest`` is true the direction only breaks ties.
        """
        if self is RoundingMode.NEAREST_TIES_TO_EVEN:
            return True, RoundingDirection.TO_EVEN
        if self is RoundingMode.NEAREST_TIES_AWAY_ZERO:
            return True, RoundingDirection.AWAY_ZERO
        if self is RoundingMode.TO_POSITIVE:
            return False, RoundingDirection.TO_ZERO if sign else RoundingDirection.AWAY_ZERO
        if self is RoundingMode.TO_NEGATIVE:
            return False, RoundingDirection.AWAY_ZERO if sign else RoundingDirection.TO_ZERO
        if self is RoundingMode.TO_ZERO:
            return False, RoundingDirection.TO_ZERO
        if self is RoundingMode.AWAY_ZERO:
            return False, RoundingDirection.AWAY_ZERO
        if self is RoundingMode.TO_EVEN:
            return False, RoundingDirection.TO_EVEN
        return False, RoundingDirection.TO_ODD


class RoundingContext(ABC):
    """A context that rounds any :class:`Real` into its own number format."""

    @abstractmethod
    def round(self, val: Real) -> Real:
        """Round ``val`` according to this context."""