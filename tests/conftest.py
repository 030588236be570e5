import numpy as np
import pandas as pd
import pytest

from drsa_engine.calculators import ClassicalDominanceBasedRoughSetCalculator
from drsa_engine.criterion import Criterion, DecisionCriterion, DescriptionCriterion
from drsa_engine.table import InformationTable


@pytest.fixture
def classical_calculator():
    return ClassicalDominanceBasedRoughSetCalculator()


@pytest.fixture
def consistent_table():
    """5 objects, one gain criterion, decisions 1, 2, 2, 3, 3 - no inconsistencies."""
    return InformationTable(
        pd.DataFrame(
            [
                [1, 1],
                [2, 2],
                [3, 2],
                [4, 3],
                [5, 3],
            ],
            index=["a", "b", "c", "d", "e"],
            columns=[Criterion("g1"), DecisionCriterion("class")],
        )
    )


@pytest.fixture
def inconsistent_table():
    """Objects 1 and 2 have the same evaluation on g1, but different decisions."""
    return InformationTable(
        pd.DataFrame(
            [
                ["x0", 1, 1],
                ["x1", 2, 2],
                ["x2", 2, 1],
                ["x3", 3, 2],
                ["x4", 4, 3],
            ],
            columns=[DescriptionCriterion("id"), Criterion("g1"), DecisionCriterion("class")],
        )
    )


@pytest.fixture
def gain_cost_table():
    return InformationTable(
        pd.DataFrame(
            [
                [1, 4, 1],
                [2, 3, 2],
                [2, 5, 1],
                [np.nan, 3, 2],
            ],
            columns=[Criterion("g1"), Criterion("g2", is_cost=True), DecisionCriterion("class")],
        )
    )


@pytest.fixture
def composite_table():
    """Decisions on two gain-type decision criteria: (1, 1), (2, 1), (1, 2), (2, 2)."""
    return InformationTable(
        pd.DataFrame(
            [
                [1, 1, 1],
                [2, 2, 1],
                [3, 1, 2],
                [4, 2, 2],
            ],
            columns=[Criterion("g1"), DecisionCriterion("d1"), DecisionCriterion("d2")],
        )
    )


@pytest.fixture
def missing_decision_table():
    return InformationTable(
        pd.DataFrame(
            [
                [1, 1],
                [2, 2],
                [3, np.nan],
                [4, 3],
            ],
            columns=[Criterion("g1"), DecisionCriterion("class")],
        )
    )
