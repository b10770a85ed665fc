"""Probability sources attached to basic events.

Only the interface consumed by ``BasicEvent`` and two simple sources live
here. Richer expression languages are expected to subclass ``Expression``.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Optional

from faulttree.errors import InvalidArgument


class Expression(ABC):
    """Opaque probability source."""

    @abstractmethod
    def mean(self) -> float:
        """Return the mean value."""

    @abstractmethod
    def sample(self) -> float:
        """Return a sampled value; stable until ``reset()``."""

    @abstractmethod
    def reset(self) -> None:
        """Discard the current sample."""

    @abstractmethod
    def is_constant(self) -> bool:
        """Return True if the expression has no uncertainty."""

    @abstractmethod
    def min(self) -> float:
        """Return the lowest value the expression can take."""

    @abstractmethod
    def max(self) -> float:
        """Return the highest value the expression can take."""


class ConstantExpression(Expression):
    """Expression with a single fixed value."""

    def __init__(self, value: float) -> None:
        self.value = float(value)

    def mean(self) -> float:
        return self.value

    def sample(self) -> float:
        return self.value

    def reset(self) -> None:
        pass

    def is_constant(self) -> bool:
        return True

    def min(self) -> float:
        return self.value

    def max(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"ConstantExpression({self.value!r})"


class UniformDeviate(Expression):
    """Uniform distribution on ``[low, high]``.

    Args:
        low: Lower bound.
        high: Upper bound.
        seed: Seed of the private random generator; None for nondeterministic.

    Raises:
        InvalidArgument: If ``low`` is greater than ``high``.
    """

    def __init__(self, low: float, high: float, seed: Optional[int] = None) -> None:
        if low > high:
            raise InvalidArgument(
                f"Lower bound {low} of a uniform deviate exceeds upper bound {high}."
            )
        self.low = float(low)
        self.high = float(high)
        self._rng = random.Random(seed)
        self._sampled: Optional[float] = None

    def mean(self) -> float:
        return (self.low + self.high) / 2

    def sample(self) -> float:
        if self._sampled is None:
            self._sampled = self._rng.uniform(self.low, self.high)
        return self._sampled

    def reset(self) -> None:
        self._sampled = None

    def is_constant(self) -> bool:
        return False

    def min(self) -> float:
        return self.low

    def max(self) -> float:
        return self.high

    def __repr__(self) -> str:
        return f"UniformDeviate({self.low!r}, {self.high!r})"
