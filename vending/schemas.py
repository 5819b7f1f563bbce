from pydantic import BaseModel, Field, NonNegativeInt, PositiveInt, conlist, field_validator

from . import settings

# [available, restock level]
StockLevels = conlist(NonNegativeInt, min_length=2, max_length=2)


class MachineLoad(BaseModel):
    """
    Defines the data contract for what a machine is loaded with at construction.
    Live state is built from a validated copy of this, never from the raw arguments.
    """

    inventory: dict[str, StockLevels]
    coins: dict[str, NonNegativeInt]
    prices: dict[str, PositiveInt] = Field(default_factory=dict)

    @field_validator("coins")
    @classmethod
    def coins_are_known_denominations(cls, coins: dict[str, int]) -> dict[str, int]:
        unknown = [label for label in coins if label not in settings.DENOMINATIONS]
        if unknown:
            raise ValueError(f"unknown denominations: {', '.join(unknown)}")
        return coins
