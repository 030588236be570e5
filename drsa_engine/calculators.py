import logging
import numbers
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Sequence

from .exceptions import InvalidValueError, UnsupportedOperationError
from .measures import ConsistencyMeasure
from .types import UnionType
from .utils import intersects, is_subset, not_none

if TYPE_CHECKING:
    from .union import Union

logger = logging.getLogger(__name__)


class RoughSetCalculator(ABC):
    """Calculates approximations of unions of ordered decision classes."""

    @abstractmethod
    def calculate_lower_approximation(self, union: "Union") -> frozenset[int]: ...

    @abstractmethod
    def calculate_upper_approximation(self, union: "Union") -> frozenset[int]: ...

    def __repr__(self) -> str:
        return self.__class__.__name__


class ClassicalDominanceBasedRoughSetCalculator(RoughSetCalculator):
    """Crisp DRSA approximations.

    For an "at least" union an object `x` belongs to the lower approximation if every object
    dominating `x` belongs to the union, and to the upper approximation if some object dominated
    by `x` belongs to the union. "At most" unions use the cones the other way round.
    """

    def calculate_lower_approximation(self, union: "Union") -> frozenset[int]:
        not_none(union, "Union to approximate is None.")
        cones = union.table.dominance_cones
        cone = (
            cones.positive_inverse_dominance_cone
            if union.union_type == UnionType.AT_LEAST
            else cones.negative_dominance_cone
        )
        objects = union.objects
        return frozenset(x for x in objects if is_subset(cone(x), objects))

    def calculate_upper_approximation(self, union: "Union") -> frozenset[int]:
        not_none(union, "Union to approximate is None.")
        cones = union.table.dominance_cones
        cone = (
            cones.negative_dominance_cone
            if union.union_type == UnionType.AT_LEAST
            else cones.positive_inverse_dominance_cone
        )
        objects = union.objects
        return frozenset(x for x in range(union.table.number_of_objects) if intersects(cone(x), objects))


class VCDominanceBasedRoughSetCalculator(RoughSetCalculator):
    def __init__(
        self,
        consistency_measures: ConsistencyMeasure | Sequence[ConsistencyMeasure],
        thresholds: float | Sequence[float],
    ) -> None:
        """Variable-consistency DRSA approximations.

        An object of a union belongs to its lower approximation when every consistency measure
        reaches its threshold for that object. The upper approximation is the complement
        of the lower approximation of the complementary union.

        :param consistency_measures: one measure or a sequence of measures
        :param thresholds: threshold (or thresholds, one per measure)
        """
        not_none(consistency_measures, "Consistency measure is None.")
        not_none(thresholds, "Consistency threshold is None.")

        if isinstance(consistency_measures, ConsistencyMeasure):
            consistency_measures = [consistency_measures]
        if isinstance(thresholds, numbers.Real):
            thresholds = [thresholds]

        self.consistency_measures: tuple[ConsistencyMeasure, ...] = tuple(consistency_measures)
        self.thresholds: tuple[float, ...] = tuple(float(threshold) for threshold in thresholds)

        if len(self.consistency_measures) != len(self.thresholds):
            raise InvalidValueError("Numbers of object consistency measures and respective thresholds are different.")
        if not self.consistency_measures:
            raise InvalidValueError("At least one object consistency measure is required.")
        for measure in self.consistency_measures:
            not_none(measure, "Consistency measure is None.")

    @property
    def consistency_measure(self) -> ConsistencyMeasure:
        return self.consistency_measures[0]

    @property
    def threshold(self) -> float:
        return self.thresholds[0]

    def _is_consistent(self, object_index: int, union: "Union") -> bool:
        return all(
            measure.is_consistency_threshold_reached(object_index, union, threshold)
            for measure, threshold in zip(self.consistency_measures, self.thresholds)
        )

    def calculate_lower_approximation(self, union: "Union") -> frozenset[int]:
        not_none(union, "Union to approximate is None.")
        return frozenset(x for x in union.objects if self._is_consistent(x, union))

    def calculate_upper_approximation(self, union: "Union") -> frozenset[int]:
        not_none(union, "Union to approximate is None.")

        if union.limiting_decision.number_of_evaluations != 1:
            raise UnsupportedOperationError(
                "Upper approximation of a union with a composite limiting decision is not supported."
            )
        if union.complementary_union is None:
            raise UnsupportedOperationError("Complementary union is not set.")

        complementary_lower_approximation = union.complementary_union.lower_approximation
        logger.debug("Calculating upper approximation of %s from its complementary union", union)
        return frozenset(x for x in range(union.table.number_of_objects) if x not in complementary_lower_approximation)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(zip(self.consistency_measures, self.thresholds))})"
