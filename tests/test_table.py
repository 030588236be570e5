import pandas as pd
import pytest

from drsa_engine.criterion import Criterion, DecisionCriterion, DescriptionCriterion
from drsa_engine.decision import CompositeDecision, SimpleDecision
from drsa_engine.dominance import DominanceChecker
from drsa_engine.exceptions import InvalidValueError
from drsa_engine.table import InformationTable
from drsa_engine.types import AttributeType, PreferenceType, UnionType
from drsa_engine.unions import Unions


def test_criteria():
    assert Criterion("g1").preference_type == PreferenceType.GAIN
    assert Criterion("g2", is_cost=True).preference_type == PreferenceType.COST
    assert Criterion("g3", ordinal=False).preference_type == PreferenceType.NONE
    assert DecisionCriterion("d").attribute_type == AttributeType.DECISION
    assert not DescriptionCriterion("id").is_evaluation


def test_table_attributes(inconsistent_table):
    assert inconsistent_table.number_of_objects == len(inconsistent_table) == 5
    assert inconsistent_table.condition_attribute_indices == [1]
    assert inconsistent_table.decision_attribute_indices == [2]
    assert inconsistent_table.get_attribute(0).name == "id"
    assert inconsistent_table.get_decision(2) == SimpleDecision(1, 2)


def test_table_composite_decisions(composite_table):
    assert composite_table.get_decision(2) == CompositeDecision([1, 2], [1, 2])


def test_table_without_decision_attribute():
    with pytest.raises(InvalidValueError):
        InformationTable(pd.DataFrame([[1, 2]], columns=[Criterion("g1"), Criterion("g2")]))


def test_table_without_active_condition_attribute():
    with pytest.raises(InvalidValueError):
        InformationTable(pd.DataFrame([[1, 2]], columns=[Criterion("g1", active=False), DecisionCriterion("d")]))


def test_table_with_non_criterion_column():
    with pytest.raises(InvalidValueError):
        InformationTable(pd.DataFrame([[1, 2]], columns=["g1", DecisionCriterion("d")]))


def test_ordered_unique_fully_determined_decisions():
    table = InformationTable(
        pd.DataFrame(
            [[1, 3], [2, 1], [3, 2], [4, 1], [5, 3]],
            columns=[Criterion("g1"), DecisionCriterion("class")],
        )
    )
    assert table.ordered_unique_fully_determined_decisions() == [
        SimpleDecision(1, 1),
        SimpleDecision(2, 1),
        SimpleDecision(3, 1),
    ]


def test_ordered_decisions_skip_missing(missing_decision_table):
    assert [d.serialize() for d in missing_decision_table.ordered_unique_fully_determined_decisions()] == [
        "1.0",
        "2.0",
        "3.0",
    ]
    assert len(missing_decision_table.decision_distribution()) == 4


def test_ordered_composite_decisions(composite_table):
    assert composite_table.ordered_unique_fully_determined_decisions() == [
        CompositeDecision([1, 1], [1, 2]),
        CompositeDecision([2, 1], [1, 2]),
        CompositeDecision([1, 2], [1, 2]),
        CompositeDecision([2, 2], [1, 2]),
    ]


def test_decision_distribution(consistent_table):
    distribution = consistent_table.decision_distribution()

    assert distribution[SimpleDecision(2, 1)] == 2
    assert sum(distribution.values()) == 5


def test_cones_single_criterion(inconsistent_table):
    cones = inconsistent_table.dominance_cones

    assert cones.positive_inverse_dominance_cone(1) == {1, 2, 3, 4}
    assert cones.positive_inverse_dominance_cone(4) == {4}
    assert cones.negative_dominance_cone(2) == {0, 1, 2}
    assert cones.negative_dominance_cone(0) == {0}
    assert cones.positive_dominance_cone(3) == {3, 4}
    assert cones.negative_inverse_dominance_cone(3) == {0, 1, 2, 3}


def test_cones_gain_and_cost_criteria(gain_cost_table):
    cones = gain_cost_table.dominance_cones

    assert cones.negative_dominance_cone(1) == {0, 1, 2, 3}
    assert cones.positive_dominance_cone(0) == {0, 1, 3}
    assert cones.positive_dominance_cone(2) == {1, 2, 3}
    # missing value on g1 is comparable with everything
    assert cones.positive_dominance_cone(3) == {1, 3}


def test_dominance_checker(gain_cost_table):
    assert DominanceChecker.dominates(1, 0, gain_cost_table)
    assert not DominanceChecker.dominates(0, 2, gain_cost_table)
    assert not DominanceChecker.dominates(2, 0, gain_cost_table)
    assert DominanceChecker.is_dominated_by(0, 1, gain_cost_table)


def test_cone_decision_distributions(inconsistent_table):
    cones = inconsistent_table.dominance_cones

    distribution = cones.positive_inverse_cone_decision_distribution(1)
    assert distribution[SimpleDecision(2, 2)] == 2
    assert distribution[SimpleDecision(1, 2)] == 1
    assert distribution[SimpleDecision(3, 2)] == 1
    assert sum(cones.negative_cone_decision_distribution(2).values()) == 3


def test_cones_nominal_criterion(classical_calculator):
    table = InformationTable(
        pd.DataFrame(
            [["red", 1], ["blue", 2], [None, 2]],
            columns=[Criterion("color", ordinal=False), DecisionCriterion("class")],
        )
    )
    cones = table.dominance_cones

    assert cones.positive_dominance_cone(0) == {0, 2}
    assert cones.positive_dominance_cone(1) == {1, 2}
    # missing label is indiscernible from any other one
    assert cones.positive_dominance_cone(2) == {0, 1, 2}
    assert not DominanceChecker.dominates(0, 1, table)

    consistent = InformationTable(table.data.iloc[:2])
    unions = Unions(consistent, classical_calculator)
    union = unions.get_union(UnionType.AT_LEAST, SimpleDecision(2, 1))
    assert union.lower_approximation == union.upper_approximation == {1}
    assert unions.quality_of_approximation == 1.0


def test_non_numeric_ordinal_criterion():
    table = InformationTable(
        pd.DataFrame([["low", 1], ["high", 2]], columns=[Criterion("g1"), DecisionCriterion("class")])
    )
    with pytest.raises(InvalidValueError):
        table.dominance_cones
