import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from .exceptions import NullArgumentError
from .types import PreferenceType, TernaryLogicValue, numeric


def is_missing(value: Any) -> bool:
    """Check if the raw value stands for a missing evaluation (``None`` or NaN)."""
    if value is None:
        return True
    try:
        return math.isnan(value)
    except TypeError:
        return False


@dataclass(frozen=True)
class Evaluation:
    """Value of an object on one attribute, together with the preference direction of that attribute.

    A missing value (``None`` or NaN) is comparable with any other evaluation of the same
    preference type and each relation holds for it.
    """

    value: numeric | None
    preference: PreferenceType = PreferenceType.GAIN

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, np.generic):
            value = value.item()
        if is_missing(value):
            value = None
        object.__setattr__(self, "value", value)

    @classmethod
    def missing(cls, preference: PreferenceType = PreferenceType.GAIN) -> "Evaluation":
        return cls(None, preference)

    @property
    def is_missing(self) -> bool:
        return self.value is None

    def _compare(self, other: "Evaluation", at_least: bool | None) -> TernaryLogicValue:
        """Compare with the other evaluation.

        :param at_least: ``True`` for "at least as good as", ``False`` for "at most as good as",
        ``None`` for equality
        """
        if other is None:
            raise NullArgumentError("Cannot compare an evaluation with None.")
        if self.preference != other.preference:
            return TernaryLogicValue.UNCOMPARABLE
        if self.is_missing or other.is_missing:
            return TernaryLogicValue.TRUE
        if at_least is None or self.preference == PreferenceType.NONE:
            return TernaryLogicValue.of(self.value == other.value)

        if self.preference == PreferenceType.COST:
            at_least = not at_least
        return TernaryLogicValue.of(self.value >= other.value if at_least else self.value <= other.value)

    def is_at_least_as_good_as(self, other: "Evaluation") -> TernaryLogicValue:
        return self._compare(other, at_least=True)

    def is_at_most_as_good_as(self, other: "Evaluation") -> TernaryLogicValue:
        return self._compare(other, at_least=False)

    def is_equal_to(self, other: "Evaluation") -> TernaryLogicValue:
        return self._compare(other, at_least=None)

    def __str__(self) -> str:
        return "?" if self.is_missing else str(self.value)
