"""Object consistency measures used by the variable-consistency rough set calculator."""
from abc import ABC, abstractmethod
from collections import Counter
from typing import TYPE_CHECKING

from .types import MeasureType, UnionType
from .utils import ratio

if TYPE_CHECKING:
    from .union import Union


def _cone_decision_distribution(object_index: int, union: "Union") -> Counter:
    cones = union.table.dominance_cones
    if union.union_type == UnionType.AT_LEAST:
        return cones.positive_inverse_cone_decision_distribution(object_index)
    return cones.negative_cone_decision_distribution(object_index)


class ConsistencyMeasure(ABC):
    measure_type: MeasureType

    @abstractmethod
    def calculate_consistency(self, object_index: int, union: "Union") -> float:
        """Calculates consistency of the object with respect to the union."""

    def is_consistency_threshold_reached(self, object_index: int, union: "Union", threshold: float) -> bool:
        """Checks the consistency of an object against the threshold.

        Gain-type measures reach the threshold from above, cost-type ones from below.
        """
        consistency = self.calculate_consistency(object_index, union)
        if self.measure_type == MeasureType.GAIN:
            return consistency >= threshold
        return consistency <= threshold

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.measure_type.value})"


class EpsilonConsistencyMeasure(ConsistencyMeasure):
    """Share of the union's negative objects that fall into the object's dominance cone.

    ``0.0`` is the best value, ``1.0`` the worst one.
    """

    measure_type = MeasureType.COST

    def calculate_consistency(self, object_index: int, union: "Union") -> float:
        negative_count = sum(
            count
            for decision, count in _cone_decision_distribution(object_index, union).items()
            if union.is_decision_negative(decision)
        )
        return ratio(negative_count, union.complementary_set_size)


class RoughMembershipMeasure(ConsistencyMeasure):
    """Share of the objects from the object's dominance cone that belong to the union.

    ``1.0`` is the best value, ``0.0`` the worst one.
    """

    measure_type = MeasureType.GAIN

    def calculate_consistency(self, object_index: int, union: "Union") -> float:
        distribution = _cone_decision_distribution(object_index, union)
        positive_count = sum(count for decision, count in distribution.items() if union.is_decision_positive(decision))
        return ratio(positive_count, sum(distribution.values()))
