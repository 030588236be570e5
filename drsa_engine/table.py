import logging
from collections import Counter
from functools import cached_property

import numpy as np
import pandas as pd

from .criterion import BaseCriterion, Criterion
from .decision import Decision, make_decision
from .dominance import DominanceCones
from .evaluation import Evaluation
from .exceptions import InvalidValueError
from .types import AttributeType, PreferenceType, TernaryLogicValue
from .utils import not_none

logger = logging.getLogger(__name__)


class InformationTable:
    def __init__(self, df: pd.DataFrame) -> None:
        """Table of objects (rows) evaluated on criteria (columns).

        Columns of `df` have to be criteria objects (`Criterion`, `DecisionCriterion`
        or `DescriptionCriterion`). The index of `df` names the objects; inside the engine
        objects are identified by their position.
        """
        self.data = not_none(df, "Data frame of an information table is None.")

        self.attributes: list[BaseCriterion] = list(self.data.columns)
        for attribute in self.attributes:
            if not isinstance(attribute, BaseCriterion):
                raise InvalidValueError(f"Column {attribute!r} is not a criterion.")

        self.condition_attribute_indices: list[int] = []
        self.decision_attribute_indices: list[int] = []
        for index, attribute in enumerate(self.attributes):
            if not attribute.active or not attribute.is_evaluation:
                continue
            if attribute.attribute_type == AttributeType.DECISION:
                self.decision_attribute_indices.append(index)
            elif attribute.attribute_type == AttributeType.CONDITION:
                self.condition_attribute_indices.append(index)

        if not self.decision_attribute_indices:
            raise InvalidValueError("No active decision attributes found")

        if not self.condition_attribute_indices:
            raise InvalidValueError("No active condition attributes found")

        self.decisions: list[Decision] = [
            self._make_decision(row) for row in self.data.itertuples(index=False, name=None)
        ]
        logger.debug(
            "Created information table with %d objects, %d condition and %d decision attributes",
            self.number_of_objects,
            len(self.condition_attribute_indices),
            len(self.decision_attribute_indices),
        )

    def _make_decision(self, row: tuple) -> Decision:
        return make_decision(
            [
                Evaluation(row[index], self.attributes[index].preference_type)
                for index in self.decision_attribute_indices
            ],
            self.decision_attribute_indices,
        )

    def __len__(self) -> int:
        return self.number_of_objects

    def __repr__(self) -> str:
        return self.data.__repr__()

    @property
    def number_of_objects(self) -> int:
        return len(self.data)

    @property
    def object_names(self) -> list:
        return list(self.data.index.values)

    def get_attribute(self, index: int) -> BaseCriterion:
        return self.attributes[index]

    def get_decision(self, object_index: int) -> Decision:
        return self.decisions[object_index]

    def condition_columns(self) -> list[tuple[np.ndarray, PreferenceType]]:
        """Returns evaluations of objects on subsequent active condition attributes, with their preference types.

        Ordinal attributes are converted to float arrays (missing values are NaN); values of nominal
        attributes are kept as they are and only compared for equality.
        """
        columns = []
        for index, preference in zip(self.condition_attribute_indices, self.condition_preferences()):
            column = self.data.iloc[:, index]
            if preference == PreferenceType.NONE:
                columns.append((column.to_numpy(dtype=object), preference))
            else:
                numeric = pd.to_numeric(column, errors="coerce")
                if (numeric.isna() & column.notna()).any():
                    raise InvalidValueError(
                        f"Ordinal attribute {self.attributes[index].name} has non-numeric evaluations."
                    )
                columns.append((numeric.to_numpy(dtype=float), preference))
        return columns

    def condition_preferences(self) -> list[PreferenceType]:
        attributes: list[Criterion] = [self.attributes[index] for index in self.condition_attribute_indices]
        return [attribute.preference_type for attribute in attributes]

    def decision_distribution(self) -> Counter:
        """Counts objects having each distinct decision (including decisions with missing evaluations)."""
        return Counter(self.decisions)

    def ordered_unique_fully_determined_decisions(self) -> list[Decision]:
        """Returns unique decisions without missing evaluations, ordered from the worst to the best.

        Each decision is inserted before the first already collected decision it is at most as good as.
        Decisions uncomparable with all collected ones are appended at the end.
        """
        ordered: list[Decision] = []

        for candidate in self.decisions:
            if not candidate.has_no_missing_evaluation() or candidate in ordered:
                continue

            for position, present in enumerate(ordered):
                if candidate.is_at_most_as_good_as(present) == TernaryLogicValue.TRUE:
                    ordered.insert(position, candidate)
                    break
            else:
                ordered.append(candidate)

        return ordered

    @cached_property
    def dominance_cones(self) -> DominanceCones:
        return DominanceCones(self)
