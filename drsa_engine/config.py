"""Configuration of approximations."""
import logging
from dataclasses import dataclass
from enum import Enum

from .calculators import (
    ClassicalDominanceBasedRoughSetCalculator,
    RoughSetCalculator,
    VCDominanceBasedRoughSetCalculator,
)
from .exceptions import InvalidValueError
from .measures import ConsistencyMeasure, EpsilonConsistencyMeasure, RoughMembershipMeasure
from .table import InformationTable
from .unions import Unions

logger = logging.getLogger(__name__)


class RoughSetModel(Enum):
    CLASSICAL = "drsa"
    VARIABLE_CONSISTENCY = "vc-drsa"


MEASURES: dict[str, type[ConsistencyMeasure]] = {
    "epsilon": EpsilonConsistencyMeasure,
    "rough_membership": RoughMembershipMeasure,
}


@dataclass
class ApproximationConfig:
    """Settings of the rough set model used to approximate unions."""

    model: RoughSetModel = RoughSetModel.CLASSICAL
    measure: str = "epsilon"
    threshold: float = 0.0
    eager: bool = False

    def validate(self) -> None:
        if not isinstance(self.model, RoughSetModel):
            raise InvalidValueError(f"Unknown rough set model: {self.model!r}")
        if self.measure not in MEASURES:
            raise InvalidValueError(f"Unknown consistency measure: {self.measure!r}. Available: {sorted(MEASURES)}")
        if not 0.0 <= self.threshold <= 1.0:
            raise InvalidValueError(f"Consistency threshold has to be in [0, 1], got {self.threshold}")


def build_calculator(config: ApproximationConfig | None = None) -> RoughSetCalculator:
    config = config or ApproximationConfig()
    config.validate()

    if config.model == RoughSetModel.CLASSICAL:
        return ClassicalDominanceBasedRoughSetCalculator()
    return VCDominanceBasedRoughSetCalculator(MEASURES[config.measure](), config.threshold)


def build_unions(table: InformationTable, config: ApproximationConfig | None = None) -> Unions:
    config = config or ApproximationConfig()
    calculator = build_calculator(config)
    logger.info("Approximating unions with %r", calculator)

    unions = Unions(table, calculator)
    return unions.materialize() if config.eager else unions
