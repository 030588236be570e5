from enum import IntEnum

import pandas as pd

from drsa_engine.config import ApproximationConfig, RoughSetModel, build_unions
from drsa_engine.criterion import Criterion, DecisionCriterion
from drsa_engine.logger import setup_logger
from drsa_engine.table import InformationTable


class G1(IntEnum):
    BAD = 1
    MEDIUM = 2
    GOOD = 3
    VERY_GOOD = 4


class Result(IntEnum):
    C1 = 1
    C2 = 2
    C3 = 3
    C4 = 4


criteria = [
    Criterion("g1"),
    Criterion("g2", is_cost=True),
    DecisionCriterion("class"),
]


data = InformationTable(
    df=pd.DataFrame(
        [
            [G1.BAD, 4, Result.C1],
            [G1.MEDIUM, 4, Result.C1],
            [G1.MEDIUM, 3, Result.C1],
            [G1.MEDIUM, 3, Result.C2],
            [G1.VERY_GOOD, 3, Result.C4],
            [G1.MEDIUM, 2, Result.C3],
            [G1.VERY_GOOD, 2, Result.C3],
            [G1.BAD, 1, Result.C2],
            [G1.GOOD, 1, Result.C4],
        ],
        index=["A", "B", "C", "D", "E", "F", "G", "H", "I"],
        columns=criteria,
    )
)

setup_logger()

classical = build_unions(data, ApproximationConfig(eager=True))
print(classical.to_frame())
print("quality of classification:", classical.quality_of_approximation)

vc = build_unions(
    data,
    ApproximationConfig(model=RoughSetModel.VARIABLE_CONSISTENCY, measure="rough_membership", threshold=0.6),
)
for union in vc:
    print(union, sorted(union.lower_approximation), sorted(union.upper_approximation))
