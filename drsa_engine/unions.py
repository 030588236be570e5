import logging
from typing import Iterable

import pandas as pd

from .calculators import RoughSetCalculator
from .decision import Decision
from .exceptions import InvalidSizeError
from .table import InformationTable
from .types import UnionType
from .union import Union
from .utils import not_none

logger = logging.getLogger(__name__)


class Unions:
    def __init__(self, table: InformationTable, rough_set_calculator: RoughSetCalculator) -> None:
        """All meaningful upward and downward unions of decision classes of an information table.

        A union is meaningful if it does not contain all objects of the table. Upward unions are
        ordered from the best limiting decision to the worst one and downward unions from the
        worst one to the best one, so in both arrays a union is never a superset of a union placed
        later.

        :param table: information table
        :param rough_set_calculator: calculator shared by all the unions
        """
        self.table = not_none(table, "Information table determining unions is None.")
        self.rough_set_calculator = not_none(rough_set_calculator, "Rough set calculator determining unions is None.")

        self.limiting_decisions: tuple[Decision, ...] = tuple(table.ordered_unique_fully_determined_decisions())
        if len(self.limiting_decisions) < 1:
            raise InvalidSizeError("Cannot create unions for less than one fully-determined decision.")

        all_decisions = list(table.decision_distribution())
        # all decisions fully determined => it is enough to check limiting decisions
        self._checked_decisions: list[Decision] = (
            list(self.limiting_decisions) if len(self.limiting_decisions) == len(all_decisions) else all_decisions
        )

        self.upward_unions: tuple[Union, ...] = self._calculate_unions(
            UnionType.AT_LEAST, reversed(self.limiting_decisions)
        )
        self.downward_unions: tuple[Union, ...] = self._calculate_unions(UnionType.AT_MOST, self.limiting_decisions)
        self._unions_by_key: dict[tuple[UnionType, Decision], Union] = {
            (union.union_type, union.limiting_decision): union for union in self.upward_unions + self.downward_unions
        }

        logger.info(
            "Created %d upward and %d downward unions for %d objects",
            len(self.upward_unions),
            len(self.downward_unions),
            table.number_of_objects,
        )

    def _is_meaningful(self, union_type: UnionType, limiting_decision: Decision) -> bool:
        return any(
            not Union.is_decision_positive_for(decision, union_type, limiting_decision)
            for decision in self._checked_decisions
        )

    def _calculate_unions(self, union_type: UnionType, limiting_decisions: Iterable[Decision]) -> tuple[Union, ...]:
        unions = []
        for limiting_decision in limiting_decisions:
            if not self._is_meaningful(union_type, limiting_decision):
                logger.debug("Skipping %s union for %s - it contains all objects", union_type.value, limiting_decision)
                continue

            union = Union(union_type, limiting_decision, self.table, self.rough_set_calculator)
            union.set_complementary_union(union.calculate_complementary_union())
            unions.append(union)

        return tuple(unions)

    def __iter__(self):
        return iter(self.upward_unions + self.downward_unions)

    def __len__(self) -> int:
        return len(self.upward_unions) + len(self.downward_unions)

    def __repr__(self) -> str:
        return {"upward_unions": self.upward_unions, "downward_unions": self.downward_unions}.__repr__()

    def get_union(self, union_type: UnionType, limiting_decision: Decision) -> Union | None:
        """Returns the union of the given type and limiting decision, ``None`` if there is no such union."""
        not_none(union_type, "Cannot find union with None union type.")
        not_none(limiting_decision, "Cannot find union with None limiting decision.")
        return self._unions_by_key.get((union_type, limiting_decision))

    def _inconsistent_objects(self) -> set[int]:
        inconsistent: set[int] = set()
        for union in self:
            inconsistent |= union.boundary
        return inconsistent

    @property
    def consistent_objects(self) -> list[int]:
        """Indices of objects which are not in the boundary of any union."""
        inconsistent = self._inconsistent_objects()
        return [x for x in range(self.table.number_of_objects) if x not in inconsistent]

    @property
    def number_of_consistent_objects(self) -> int:
        return self.table.number_of_objects - len(self._inconsistent_objects())

    @property
    def quality_of_approximation(self) -> float:
        """Quality of classification: share of consistent objects in the table."""
        return self.number_of_consistent_objects / self.table.number_of_objects

    def materialize(self) -> "Unions":
        for union in self:
            union.materialize()
        return self

    def to_frame(self) -> pd.DataFrame:
        """Summarizes approximations of all unions.

        :return: a `pandas.DataFrame` object with one row per union
        """
        records = []
        for union in self:
            approximation = union.to_approximation()
            records.append(
                {
                    "union": repr(union),
                    "union_type": union.union_type.value,
                    "limiting_decision": union.limiting_decision.serialize(),
                    "objects": len(union.objects),
                    "lower_approximation": len(approximation.lower_approximation),
                    "upper_approximation": len(approximation.upper_approximation),
                    "boundary": len(approximation.boundary),
                    "accuracy": approximation.accuracy,
                    "quality": approximation.quality,
                }
            )
        return pd.DataFrame.from_records(records)
