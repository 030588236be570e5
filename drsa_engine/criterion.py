from .types import AttributeType, PreferenceType


class BaseCriterion:
    def __init__(self, name: str, active: bool = True) -> None:
        """Base class for criteria (columns of an information table)."""
        self.name = name
        self.active = active

    @property
    def attribute_type(self) -> AttributeType:
        return AttributeType.DESCRIPTION

    @property
    def is_evaluation(self) -> bool:
        return False

    def __repr__(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.name


class Criterion(BaseCriterion):
    def __init__(self, name: str, is_cost: bool = False, ordinal: bool = True, active: bool = True) -> None:
        """Class for condition criteria.

        :param name: name of the criterion
        :param is_cost: if ``True``, lower values are preferred
        :param ordinal: if ``False``, the criterion is a nominal attribute without preference order
        :param active: inactive criteria are ignored by dominance checks
        """
        super().__init__(name, active)
        self.is_cost = is_cost
        self.ordinal = ordinal

    @property
    def attribute_type(self) -> AttributeType:
        return AttributeType.CONDITION

    @property
    def is_evaluation(self) -> bool:
        return True

    @property
    def preference_type(self) -> PreferenceType:
        if not self.ordinal:
            return PreferenceType.NONE
        return PreferenceType.COST if self.is_cost else PreferenceType.GAIN

    def __repr__(self) -> str:
        return f"{self.name}; {self.preference_type.value} attr"


class DecisionCriterion(Criterion):
    def __init__(self, name: str, is_cost: bool = False, ordinal: bool = True, active: bool = True) -> None:
        """Class for decision criteria."""
        super().__init__(name, is_cost=is_cost, ordinal=ordinal, active=active)

    @property
    def attribute_type(self) -> AttributeType:
        return AttributeType.DECISION

    def __repr__(self) -> str:
        return f"{self.name}; decision attr"


class DescriptionCriterion(BaseCriterion):
    """Column that only describes objects (e.g. an identifier); it is never evaluated."""

    def __repr__(self) -> str:
        return f"{self.name}; description attr"
