import logging
from collections import Counter
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from .types import PreferenceType

if TYPE_CHECKING:
    from .table import InformationTable

logger = logging.getLogger(__name__)


def _attribute_relations(values: np.ndarray, preference: PreferenceType) -> tuple[np.ndarray, np.ndarray]:
    """Compares every pair of objects on one condition attribute.

    :param values: evaluations of subsequent objects; float for ordinal attributes,
    any hashable labels for nominal ones
    :param preference: preference type of the attribute

    :return: two boolean arrays of shape ``(objects, objects)``; the first one tells if `x`
    is at least as good as `y`, the second one - if `x` is at most as good as `y`
    """
    missing = pd.isna(values)
    missing = missing[:, np.newaxis] | missing[np.newaxis, :]
    a = values[:, np.newaxis]
    b = values[np.newaxis, :]

    if preference == PreferenceType.NONE:
        equal = (a == b) | missing
        return equal, equal

    with np.errstate(invalid="ignore"):
        if preference == PreferenceType.GAIN:
            return (a >= b) | missing, (a <= b) | missing
        return (a <= b) | missing, (a >= b) | missing


def _relation_matrices(table: "InformationTable") -> tuple[np.ndarray, np.ndarray]:
    """Conjunction of attribute relations over all active condition attributes of the table."""
    n = table.number_of_objects
    at_least = np.ones((n, n), dtype=bool)
    at_most = np.ones((n, n), dtype=bool)

    for values, preference in table.condition_columns():
        attribute_at_least, attribute_at_most = _attribute_relations(values, preference)
        at_least &= attribute_at_least
        at_most &= attribute_at_most

    return at_least, at_most


class DominanceChecker:
    """Pairwise dominance checks on active condition attributes of an information table."""

    @staticmethod
    def dominates(x: int, y: int, table: "InformationTable") -> bool:
        """Checks if object `x` is at least as good as object `y` on every active condition attribute."""
        return bool(table.dominance_cones.dominates[x, y])

    @staticmethod
    def is_dominated_by(x: int, y: int, table: "InformationTable") -> bool:
        """Checks if object `x` is at most as good as object `y` on every active condition attribute."""
        return bool(table.dominance_cones.dominated_by[x, y])


class DominanceCones:
    def __init__(self, table: "InformationTable") -> None:
        """Dominance cones of all objects of the given information table.

        * positive dominance cone of `x`: objects dominating `x`
        * negative dominance cone of `x`: objects dominated by `x`
        * positive inverse dominance cone of `x`: objects `y` such that `x` is dominated by `y`
        * negative inverse dominance cone of `x`: objects `y` dominated by `x` in the inverse sense

        Positive (negative) and positive inverse (negative inverse) cones are equal unless the
        dominance relation is not symmetric for some missing values.
        """
        self.table = table
        # dominates[x, y] <=> x D y, dominated_by[x, y] <=> x InvD y
        self.dominates, self.dominated_by = _relation_matrices(table)

        self._positive_cones = self._to_cones(self.dominates.T)
        self._negative_cones = self._to_cones(self.dominates)
        self._positive_inverse_cones = self._to_cones(self.dominated_by)
        self._negative_inverse_cones = self._to_cones(self.dominated_by.T)

        logger.debug("Calculated dominance cones for %d objects", table.number_of_objects)

    @staticmethod
    def _to_cones(relation: np.ndarray) -> list[frozenset[int]]:
        return [frozenset(int(y) for y in np.flatnonzero(row)) for row in relation]

    @property
    def number_of_objects(self) -> int:
        return len(self._positive_cones)

    def positive_dominance_cone(self, object_index: int) -> frozenset[int]:
        return self._positive_cones[object_index]

    def negative_dominance_cone(self, object_index: int) -> frozenset[int]:
        return self._negative_cones[object_index]

    def positive_inverse_dominance_cone(self, object_index: int) -> frozenset[int]:
        return self._positive_inverse_cones[object_index]

    def negative_inverse_dominance_cone(self, object_index: int) -> frozenset[int]:
        return self._negative_inverse_cones[object_index]

    def _decision_distribution(self, cone: frozenset[int]) -> Counter:
        return Counter(self.table.get_decision(y) for y in cone)

    def positive_inverse_cone_decision_distribution(self, object_index: int) -> Counter:
        """Used by consistency measures of "at least" unions."""
        return self._decision_distribution(self.positive_inverse_dominance_cone(object_index))

    def negative_cone_decision_distribution(self, object_index: int) -> Counter:
        """Used by consistency measures of "at most" unions."""
        return self._decision_distribution(self.negative_dominance_cone(object_index))
