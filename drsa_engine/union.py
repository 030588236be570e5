"""Unions of ordered decision classes and their rough approximations.

Upward union ``Cl_t>=`` contains objects whose decision is at least as good as the limiting
decision `t`; downward union ``Cl_t<=`` contains objects whose decision is at most as good as `t`.
Objects whose decision is uncomparable with `t` are neutral - they neither belong to the union,
nor to its complement.
"""
import logging
from functools import cached_property

from .calculators import RoughSetCalculator
from .decision import Decision
from .exceptions import InvalidTypeError, InvalidValueError
from .table import InformationTable
from .types import AttributeType, PreferenceType, TernaryLogicValue, UnionApproximation, UnionType
from .utils import not_none, ratio

logger = logging.getLogger(__name__)

_DERIVED_FIELDS = (
    "lower_approximation",
    "upper_approximation",
    "boundary",
    "positive_region",
    "negative_region",
    "boundary_region",
)


def concordance(
    union_type: UnionType,
    limiting_decision: Decision,
    decision: Decision,
    include_limiting_decision: bool = True,
) -> TernaryLogicValue:
    """Checks if the decision is concordant with a union.

    :param union_type: type of the union
    :param limiting_decision: limiting decision of the union
    :param decision: tested decision
    :param include_limiting_decision: if ``False``, decisions equal to the limiting one are not concordant
    (such unions are used as complements of other unions)

    :return:
        * ``TRUE`` - objects with this decision belong to the union
        * ``FALSE`` - objects with this decision belong to the complement of the union
        * ``UNCOMPARABLE`` - objects with this decision are neutral
    """
    not_none(decision, "Decision tested for concordance with union is None.")

    towards_union = (
        limiting_decision.is_at_most_as_good_as
        if union_type == UnionType.AT_LEAST
        else limiting_decision.is_at_least_as_good_as
    )
    towards_complement = (
        limiting_decision.is_at_least_as_good_as
        if union_type == UnionType.AT_LEAST
        else limiting_decision.is_at_most_as_good_as
    )

    if include_limiting_decision:
        if towards_union(decision) == TernaryLogicValue.TRUE:
            return TernaryLogicValue.TRUE
        if towards_complement(decision) == TernaryLogicValue.TRUE:
            return TernaryLogicValue.FALSE
        return TernaryLogicValue.UNCOMPARABLE

    # equal decisions are checked first so that they fall into the complement
    if towards_complement(decision) == TernaryLogicValue.TRUE:
        return TernaryLogicValue.FALSE
    if towards_union(decision) == TernaryLogicValue.TRUE:
        return TernaryLogicValue.TRUE
    return TernaryLogicValue.UNCOMPARABLE


def validate_limiting_decision(limiting_decision: Decision, table: InformationTable) -> None:
    """Checks that all attributes contributing to the limiting decision are active decision criteria
    and that at least one of them is ordinal.
    """
    ordinal_found = False

    for index in sorted(limiting_decision.attribute_indices):
        if index >= len(table.attributes):
            raise InvalidValueError(f"Attribute no. {index} contributing to union's limiting decision does not exist.")

        attribute = table.get_attribute(index)
        if not attribute.is_evaluation:
            raise InvalidTypeError(
                f"Attribute no. {index} contributing to union's limiting decision is not an evaluation attribute."
            )
        if not attribute.active or attribute.attribute_type != AttributeType.DECISION:
            raise InvalidValueError(
                f"Attribute no. {index} contributing to union's limiting decision is not an active decision attribute."
            )
        evaluation = limiting_decision.get_evaluation(index)
        if evaluation.preference != attribute.preference_type:
            raise InvalidValueError(
                f"Evaluation of union's limiting decision on attribute no. {index} has preference type "
                f"{evaluation.preference.value}, different than the attribute "
                f"({attribute.preference_type.value})."
            )
        if attribute.preference_type != PreferenceType.NONE:
            ordinal_found = True

    if not ordinal_found:
        raise InvalidValueError(
            "Cannot create union of ordered decision classes - none of the attributes "
            "contributing to union's limiting decision is ordinal."
        )


class Union:
    def __init__(
        self,
        union_type: UnionType,
        limiting_decision: Decision,
        table: InformationTable,
        rough_set_calculator: RoughSetCalculator,
        include_limiting_decision: bool = True,
    ) -> None:
        """Union of ordered decision classes.

        Objects of the table are split into positive (belonging to the union), neutral and negative
        ones right away. Approximations and regions are calculated on first access and cached.

        :param union_type: ``AT_LEAST`` for an upward union, ``AT_MOST`` for a downward one
        :param limiting_decision: decision limiting the union
        :param table: information table with the approximated objects
        :param rough_set_calculator: calculator of lower and upper approximations
        :param include_limiting_decision: if ``False``, creates a strict union, without objects
        whose decision is equal to the limiting one
        """
        self.union_type = not_none(union_type, "Union type is None.")
        self.limiting_decision = not_none(limiting_decision, "Limiting decision for constructed union is None.")
        self.table = not_none(table, "Information table for constructed union is None.")
        self.rough_set_calculator = not_none(
            rough_set_calculator, "Rough set calculator for constructed union is None."
        )
        self.include_limiting_decision = include_limiting_decision

        validate_limiting_decision(limiting_decision, table)

        self._complementary_union: "Union | None" = None
        self.objects, self.neutral_objects, self.negative_objects = self._find_objects()

    def _find_objects(self) -> tuple[frozenset[int], frozenset[int], frozenset[int]]:
        positive, neutral, negative = set(), set(), set()

        for object_index, decision in enumerate(self.table.decisions):
            result = self.is_concordant_with_decision(decision)
            if result == TernaryLogicValue.TRUE:
                positive.add(object_index)
            elif result == TernaryLogicValue.UNCOMPARABLE:
                neutral.add(object_index)
            else:
                negative.add(object_index)

        return frozenset(positive), frozenset(neutral), frozenset(negative)

    def __repr__(self) -> str:
        operator = ">=" if self.union_type == UnionType.AT_LEAST else "<="
        if not self.include_limiting_decision:
            operator = operator[0]
        return f"Cl{operator}{self.limiting_decision}"

    @property
    def key(self) -> tuple[UnionType, Decision, bool]:
        return self.union_type, self.limiting_decision, self.include_limiting_decision

    # membership

    def is_concordant_with_decision(self, decision: Decision) -> TernaryLogicValue:
        return concordance(self.union_type, self.limiting_decision, decision, self.include_limiting_decision)

    @staticmethod
    def is_decision_positive_for(decision: Decision, union_type: UnionType, limiting_decision: Decision) -> bool:
        """Checks if objects with the given decision would belong to the (non-strict) union, without creating it."""
        return concordance(union_type, limiting_decision, decision) == TernaryLogicValue.TRUE

    def is_decision_positive(self, decision: Decision) -> bool:
        return self.is_concordant_with_decision(decision) == TernaryLogicValue.TRUE

    def is_decision_negative(self, decision: Decision) -> bool:
        return self.is_concordant_with_decision(decision) == TernaryLogicValue.FALSE

    def is_decision_neutral(self, decision: Decision) -> bool:
        return self.is_concordant_with_decision(decision) == TernaryLogicValue.UNCOMPARABLE

    def is_object_positive(self, object_index: int) -> bool:
        return object_index in self.objects

    def is_object_neutral(self, object_index: int) -> bool:
        return object_index in self.neutral_objects

    def is_object_negative(self, object_index: int) -> bool:
        return object_index in self.negative_objects

    @property
    def complementary_set_size(self) -> int:
        """Number of objects belonging to the complement of this union (neutral objects excluded)."""
        return len(self.negative_objects)

    def includes(self, other: "Union") -> bool:
        """Checks if every object of the other union of the same type always belongs to this union."""
        if self.union_type != other.union_type:
            return False

        concordant = self.is_concordant_with_decision(other.limiting_decision)
        if concordant == TernaryLogicValue.TRUE:
            return True
        # strict unions with the same limiting decision
        return (
            not other.include_limiting_decision
            and not self.include_limiting_decision
            and concordant == TernaryLogicValue.FALSE
            and self.limiting_decision == other.limiting_decision
        )

    # complementary union

    @property
    def complementary_union(self) -> "Union | None":
        return self._complementary_union

    def set_complementary_union(self, union: "Union | None") -> bool:
        """Registers the complementary union.

        :return: ``False`` if the given union is ``None``, the complementary union has already been set
        or the upper approximation of this union has already been calculated, ``True`` otherwise
        """
        if union is None or self._complementary_union is not None or "upper_approximation" in self.__dict__:
            return False
        self._complementary_union = union
        return True

    def calculate_complementary_union(self) -> "Union":
        """Creates a strict union of the opposite type with the same limiting decision.

        E.g. for decision classes 1-5 the complement of ``Cl>=3`` is ``Cl<3`` (classes 1-2).
        """
        return Union(
            self.union_type.opposite,
            self.limiting_decision,
            self.table,
            self.rough_set_calculator,
            include_limiting_decision=False,
        )

    # approximations

    @cached_property
    def lower_approximation(self) -> frozenset[int]:
        return frozenset(self.rough_set_calculator.calculate_lower_approximation(self))

    @cached_property
    def upper_approximation(self) -> frozenset[int]:
        return frozenset(self.rough_set_calculator.calculate_upper_approximation(self))

    @cached_property
    def boundary(self) -> frozenset[int]:
        return self.upper_approximation - self.lower_approximation

    @property
    def accuracy(self) -> float:
        """Ratio of lower to upper approximation size, ``0.0`` when the upper approximation is empty."""
        return ratio(len(self.lower_approximation), len(self.upper_approximation))

    @property
    def quality(self) -> float:
        """Share of union's objects in its lower approximation, ``0.0`` for a union without objects."""
        return ratio(len(self.lower_approximation), len(self.objects))

    # regions

    @cached_property
    def positive_region(self) -> frozenset[int]:
        """Lower approximation extended with objects from dominance cones of its objects."""
        cones = self.table.dominance_cones
        cone = (
            cones.positive_inverse_dominance_cone
            if self.union_type == UnionType.AT_LEAST
            else cones.negative_dominance_cone
        )
        region = set(self.lower_approximation)
        for object_index in self.lower_approximation:
            region.update(cone(object_index))
        return frozenset(region)

    @property
    def inconsistent_objects_in_positive_region(self) -> frozenset[int]:
        return self.positive_region - self.lower_approximation

    @cached_property
    def negative_region(self) -> frozenset[int]:
        complementary_union = self.complementary_union
        if complementary_union is None:
            complementary_union = self.calculate_complementary_union()
        return complementary_union.positive_region - self.positive_region

    @cached_property
    def boundary_region(self) -> frozenset[int]:
        positive_region = self.positive_region
        negative_region = self.negative_region
        return frozenset(
            x for x in range(self.table.number_of_objects) if x not in positive_region and x not in negative_region
        )

    def materialize(self) -> "Union":
        """Calculates all derived sets at once, so the union can be safely shared afterwards."""
        for field in _DERIVED_FIELDS:
            getattr(self, field)
        logger.debug(
            "Materialized %s: lower=%d, upper=%d", self, len(self.lower_approximation), len(self.upper_approximation)
        )
        return self

    def to_approximation(self) -> UnionApproximation:
        return UnionApproximation(
            union_type=self.union_type,
            limiting_decision=self.limiting_decision,
            objects=self.objects,
            lower_approximation=self.lower_approximation,
            upper_approximation=self.upper_approximation,
            positive_region=self.positive_region,
        )
