import numpy as np
import pytest

from drsa_engine.calculators import ClassicalDominanceBasedRoughSetCalculator, VCDominanceBasedRoughSetCalculator
from drsa_engine.decision import CompositeDecision, SimpleDecision
from drsa_engine.exceptions import InvalidValueError, NullArgumentError, UnsupportedOperationError
from drsa_engine.measures import EpsilonConsistencyMeasure, RoughMembershipMeasure
from drsa_engine.types import MeasureType, UnionType
from drsa_engine.union import Union


def _vc_union(table, threshold, measure=None, union_type=UnionType.AT_LEAST, value=2, register_complement=True):
    calculator = VCDominanceBasedRoughSetCalculator(measure or RoughMembershipMeasure(), threshold)
    union = Union(union_type, SimpleDecision(value, 2), table, calculator)
    if register_complement:
        union.set_complementary_union(union.calculate_complementary_union())
    return union


def test_classical_lower_and_upper_approximation(inconsistent_table):
    calculator = ClassicalDominanceBasedRoughSetCalculator()
    at_most_1 = Union(UnionType.AT_MOST, SimpleDecision(1, 2), inconsistent_table, calculator)
    at_least_3 = Union(UnionType.AT_LEAST, SimpleDecision(3, 2), inconsistent_table, calculator)

    assert calculator.calculate_lower_approximation(at_most_1) == {0}
    assert calculator.calculate_upper_approximation(at_most_1) == {0, 1, 2}
    assert calculator.calculate_lower_approximation(at_least_3) == {4}
    assert calculator.calculate_upper_approximation(at_least_3) == {4}


def test_classical_calculator_requires_union():
    with pytest.raises(NullArgumentError):
        ClassicalDominanceBasedRoughSetCalculator().calculate_lower_approximation(None)


def test_consistent_table_is_approximated_exactly(consistent_table, classical_calculator):
    for union_type in UnionType:
        for value in (1, 2, 3):
            union = Union(union_type, SimpleDecision(value, 1), consistent_table, classical_calculator)
            assert union.lower_approximation == union.objects == union.upper_approximation
            assert union.accuracy == union.quality == 1.0


def test_rough_membership_measure(inconsistent_table):
    union = _vc_union(inconsistent_table, 0.5)
    measure = RoughMembershipMeasure()

    assert measure.measure_type == MeasureType.GAIN
    assert measure.calculate_consistency(1, union) == pytest.approx(0.75)
    assert measure.calculate_consistency(3, union) == pytest.approx(1.0)
    assert measure.is_consistency_threshold_reached(1, union, 0.75)
    assert not measure.is_consistency_threshold_reached(1, union, 0.8)


def test_epsilon_consistency_measure(inconsistent_table):
    union = _vc_union(inconsistent_table, 0.5)
    measure = EpsilonConsistencyMeasure()

    assert measure.measure_type == MeasureType.COST
    assert measure.calculate_consistency(1, union) == pytest.approx(0.5)
    assert measure.calculate_consistency(4, union) == pytest.approx(0.0)
    assert measure.is_consistency_threshold_reached(1, union, 0.5)
    assert not measure.is_consistency_threshold_reached(1, union, 0.4)


def test_epsilon_measure_for_union_without_negative_objects(consistent_table):
    union = Union(
        UnionType.AT_LEAST,
        SimpleDecision(1, 1),
        consistent_table,
        VCDominanceBasedRoughSetCalculator(EpsilonConsistencyMeasure(), 0.0),
    )
    assert union.complementary_set_size == 0
    assert EpsilonConsistencyMeasure().calculate_consistency(2, union) == 0.0


@pytest.mark.parametrize(
    "threshold, lower, upper",
    [
        (0.6, {1, 3, 4}, {1, 3, 4}),
        (0.75, {1, 3, 4}, {1, 2, 3, 4}),
        (0.8, {3, 4}, {1, 2, 3, 4}),
    ],
)
def test_vc_approximations(inconsistent_table, threshold, lower, upper):
    union = _vc_union(inconsistent_table, threshold)

    assert union.lower_approximation == lower
    assert union.upper_approximation == upper
    assert union.boundary == upper - lower
    assert union.lower_approximation <= union.objects <= union.upper_approximation


def test_vc_lower_approximation_is_monotonic(inconsistent_table):
    thresholds = [0.0, 0.25, 0.5, 0.6, 0.75, 0.8, 1.0]
    lowers = [_vc_union(inconsistent_table, threshold).lower_approximation for threshold in thresholds]

    for relaxed, strict in zip(lowers, lowers[1:]):
        assert strict <= relaxed


def test_vc_lower_approximation_with_epsilon(inconsistent_table):
    assert _vc_union(inconsistent_table, 0.5, EpsilonConsistencyMeasure()).lower_approximation == {1, 3, 4}
    assert _vc_union(inconsistent_table, 0.4, EpsilonConsistencyMeasure()).lower_approximation == {3, 4}


def test_vc_with_many_measures(inconsistent_table):
    calculator = VCDominanceBasedRoughSetCalculator([RoughMembershipMeasure(), EpsilonConsistencyMeasure()], [0.7, 0.4])
    union = Union(UnionType.AT_LEAST, SimpleDecision(2, 2), inconsistent_table, calculator)

    assert union.lower_approximation == {3, 4}
    assert calculator.consistency_measure is calculator.consistency_measures[0]
    assert calculator.threshold == 0.7


def test_vc_regions(inconsistent_table):
    union = _vc_union(inconsistent_table, 0.75)

    assert union.positive_region == {1, 2, 3, 4}
    assert union.inconsistent_objects_in_positive_region == {2}
    assert union.negative_region == {0}
    assert union.boundary_region == frozenset()


def test_vc_upper_approximation_requires_complementary_union(inconsistent_table):
    union = _vc_union(inconsistent_table, 0.75, register_complement=False)

    with pytest.raises(UnsupportedOperationError):
        union.upper_approximation


def test_vc_upper_approximation_of_composite_union(composite_table):
    calculator = VCDominanceBasedRoughSetCalculator(RoughMembershipMeasure(), 0.5)
    union = Union(UnionType.AT_LEAST, CompositeDecision([1, 2], [1, 2]), composite_table, calculator)
    union.set_complementary_union(union.calculate_complementary_union())

    assert union.lower_approximation <= union.objects
    with pytest.raises(UnsupportedOperationError):
        union.upper_approximation


def test_vc_calculator_configuration():
    with pytest.raises(InvalidValueError):
        VCDominanceBasedRoughSetCalculator([RoughMembershipMeasure(), EpsilonConsistencyMeasure()], [0.5])

    with pytest.raises(InvalidValueError):
        VCDominanceBasedRoughSetCalculator([], [])

    with pytest.raises(NullArgumentError):
        VCDominanceBasedRoughSetCalculator(None, 0.5)


def test_vc_calculator_numpy_threshold(inconsistent_table):
    calculator = VCDominanceBasedRoughSetCalculator(RoughMembershipMeasure(), np.float32(0.75))

    assert calculator.thresholds == (0.75,)
    assert isinstance(calculator.threshold, float)
    assert _vc_union(inconsistent_table, np.float32(0.75)).lower_approximation == {1, 3, 4}
