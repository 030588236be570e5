from enum import Enum
from typing import Any

numeric = int | float


class TernaryLogicValue(Enum):
    TRUE = "true"
    FALSE = "false"
    UNCOMPARABLE = "uncomparable"

    @classmethod
    def of(cls, value: bool) -> "TernaryLogicValue":
        return cls.TRUE if value else cls.FALSE


class UnionType(Enum):
    AT_MOST = "at_most"
    AT_LEAST = "at_least"

    @property
    def opposite(self) -> "UnionType":
        return UnionType.AT_MOST if self == UnionType.AT_LEAST else UnionType.AT_LEAST


class PreferenceType(Enum):
    GAIN = "gain"
    COST = "cost"
    NONE = "none"


class AttributeType(Enum):
    CONDITION = "condition"
    DECISION = "decision"
    DESCRIPTION = "description"


class MeasureType(Enum):
    GAIN = "gain"
    COST = "cost"


class UnionApproximation:
    def __init__(
        self,
        union_type: UnionType,
        limiting_decision: Any,
        objects: set | frozenset,
        lower_approximation: set | frozenset,
        upper_approximation: set | frozenset,
        positive_region: set | frozenset,
    ) -> None:
        """Read-only snapshot of the approximation of a single union."""
        self.union_type = union_type
        self.limiting_decision = limiting_decision

        self.objects = objects
        self.lower_approximation = lower_approximation
        self.upper_approximation = upper_approximation
        self.positive_region = positive_region

        self.boundary = self._calculate_boundary(lower_approximation, upper_approximation)
        self.quality = self._calculate_quality(objects)
        self.accuracy = self._calculate_accuracy()

    def __repr__(self) -> str:
        return {
            "union_type": self.union_type,
            "limiting_decision": self.limiting_decision,
            "lower_approximation": self.lower_approximation,
            "upper_approximation": self.upper_approximation,
            "positive_region": self.positive_region,
            "boundary": self.boundary,
            "quality": self.quality,
            "accuracy": self.accuracy,
        }.__repr__()

    def _calculate_boundary(self, lower_approximation, upper_approximation) -> frozenset:
        return frozenset(upper_approximation) - frozenset(lower_approximation)

    def _calculate_accuracy(self) -> float:
        return 0.0 if not self.upper_approximation else len(self.lower_approximation) / len(self.upper_approximation)

    def _calculate_quality(self, objects) -> float:
        return 0.0 if not objects else len(self.lower_approximation) / len(objects)
