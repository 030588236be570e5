"""Decisions assigned to objects of an information table.

A decision is a value of one (simple decision) or more (composite decision) decision attributes.
Decisions are compared using three-valued logic: two decisions concerning different attributes
are uncomparable.
"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Iterable, Sequence

from .evaluation import Evaluation
from .exceptions import InvalidValueError
from .types import TernaryLogicValue
from .utils import not_none

EvaluationRelation = Callable[[Evaluation, Evaluation], TernaryLogicValue]


def _as_evaluation(value: Any, message: str) -> Evaluation:
    not_none(value, message)
    return value if isinstance(value, Evaluation) else Evaluation(value)


def _check_attribute_index(attribute_index: int) -> int:
    if attribute_index < 0:
        raise InvalidValueError(f"Attribute index of a decision cannot be negative (got {attribute_index}).")
    return attribute_index


class Decision(ABC):
    __slots__ = ()

    @abstractmethod
    def _is_in_relation_with(self, other: "Decision", relation: EvaluationRelation) -> TernaryLogicValue: ...

    def is_at_least_as_good_as(self, other: "Decision") -> TernaryLogicValue:
        not_none(other, "Cannot verify if a decision is at least as good as None.")
        return self._is_in_relation_with(other, Evaluation.is_at_least_as_good_as)

    def is_at_most_as_good_as(self, other: "Decision") -> TernaryLogicValue:
        not_none(other, "Cannot verify if a decision is at most as good as None.")
        return self._is_in_relation_with(other, Evaluation.is_at_most_as_good_as)

    def is_equal_to(self, other: "Decision") -> TernaryLogicValue:
        not_none(other, "Cannot verify if a decision is equal to None.")
        return self._is_in_relation_with(other, Evaluation.is_equal_to)

    @abstractmethod
    def get_evaluation(self, attribute_index: int) -> Evaluation | None:
        """Returns evaluation on the given attribute, ``None`` if the attribute does not contribute to this decision."""

    @property
    @abstractmethod
    def attribute_indices(self) -> frozenset[int]: ...

    @property
    def number_of_evaluations(self) -> int:
        return len(self.attribute_indices)

    def evaluations(self) -> list[Evaluation]:
        return [self.get_evaluation(index) for index in sorted(self.attribute_indices)]

    def has_no_missing_evaluation(self) -> bool:
        return not any(evaluation.is_missing for evaluation in self.evaluations())

    def has_all_missing_evaluations(self) -> bool:
        return all(evaluation.is_missing for evaluation in self.evaluations())

    @abstractmethod
    def serialize(self) -> str: ...

    def __str__(self) -> str:
        return self.serialize()


class SimpleDecision(Decision):
    __slots__ = ("_evaluation", "_attribute_index")

    def __init__(self, evaluation: Evaluation | Any, attribute_index: int) -> None:
        """Decision concerning a single decision attribute.

        :param evaluation: evaluation of an object on the decision attribute (raw numbers are treated as gain-type)
        :param attribute_index: index of the decision attribute in the information table
        """
        self._evaluation = _as_evaluation(evaluation, "Evaluation of constructed simple decision is None.")
        self._attribute_index = _check_attribute_index(attribute_index)

    @property
    def evaluation(self) -> Evaluation:
        return self._evaluation

    @property
    def attribute_index(self) -> int:
        return self._attribute_index

    def _is_in_relation_with(self, other: Decision, relation: EvaluationRelation) -> TernaryLogicValue:
        if not isinstance(other, SimpleDecision) or other.attribute_index != self.attribute_index:
            return TernaryLogicValue.UNCOMPARABLE
        return TernaryLogicValue.of(relation(self.evaluation, other.evaluation) == TernaryLogicValue.TRUE)

    def get_evaluation(self, attribute_index: int) -> Evaluation | None:
        return self.evaluation if attribute_index == self.attribute_index else None

    @property
    def attribute_indices(self) -> frozenset[int]:
        return frozenset((self.attribute_index,))

    def serialize(self) -> str:
        return str(self.evaluation)

    def __eq__(self, __value: object) -> bool:
        if not isinstance(__value, SimpleDecision):
            return NotImplemented
        return self.attribute_index == __value.attribute_index and self.evaluation == __value.evaluation

    def __hash__(self) -> int:
        return hash((SimpleDecision, self.attribute_index, self.evaluation))

    def __repr__(self) -> str:
        return f"SimpleDecision({self.attribute_index}: {self.evaluation})"


class CompositeDecision(Decision):
    __slots__ = ("_evaluations",)

    def __init__(self, evaluations: Sequence[Evaluation | Any], attribute_indices: Sequence[int]) -> None:
        """Decision concerning at least two decision attributes.

        :param evaluations: evaluations on subsequent attributes
        :param attribute_indices: indices of these attributes in the information table

        :raises InvalidValueError: if the lengths differ, fewer than two evaluations are given,
        an index is negative or repeated
        """
        not_none(evaluations, "Evaluations of a composite decision are None.")
        not_none(attribute_indices, "Attribute indices of a composite decision are None.")

        if len(evaluations) != len(attribute_indices):
            raise InvalidValueError("Different number of evaluations and attribute indices for a composite decision.")
        if len(evaluations) < 2:
            raise InvalidValueError("Not enough contributing evaluations to construct a composite decision.")
        if len(set(attribute_indices)) != len(attribute_indices):
            raise InvalidValueError("Attribute indices of a composite decision are not unique.")

        self._evaluations: dict[int, Evaluation] = {
            _check_attribute_index(index): _as_evaluation(
                evaluation, "Evaluation contributing to a composite decision is None."
            )
            for evaluation, index in zip(evaluations, attribute_indices)
        }

    def _is_in_relation_with(self, other: Decision, relation: EvaluationRelation) -> TernaryLogicValue:
        if not isinstance(other, CompositeDecision) or other.attribute_indices != self.attribute_indices:
            return TernaryLogicValue.UNCOMPARABLE

        for index, evaluation in self._evaluations.items():
            if relation(evaluation, other._evaluations[index]) != TernaryLogicValue.TRUE:
                return TernaryLogicValue.FALSE
        return TernaryLogicValue.TRUE

    def get_evaluation(self, attribute_index: int) -> Evaluation | None:
        return self._evaluations.get(attribute_index)

    @property
    def attribute_indices(self) -> frozenset[int]:
        return frozenset(self._evaluations)

    def serialize(self) -> str:
        return ",".join(f"{index}:{self._evaluations[index]}" for index in sorted(self._evaluations))

    def __eq__(self, __value: object) -> bool:
        if not isinstance(__value, CompositeDecision):
            return NotImplemented
        return self._evaluations == __value._evaluations

    def __hash__(self) -> int:
        return hash((CompositeDecision, frozenset(self._evaluations.items())))

    def __repr__(self) -> str:
        return f"CompositeDecision({self.serialize()})"


def make_decision(evaluations: Iterable[Evaluation | Any], attribute_indices: Iterable[int]) -> Decision:
    """Creates a simple decision for one attribute or a composite one for more attributes."""
    evaluations = list(evaluations)
    attribute_indices = list(attribute_indices)

    if len(evaluations) == 1 and len(attribute_indices) == 1:
        return SimpleDecision(evaluations[0], attribute_indices[0])
    return CompositeDecision(evaluations, attribute_indices)
