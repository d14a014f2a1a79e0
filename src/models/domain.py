from dataclasses import dataclass, field
from typing import Literal

TransactionType = Literal["income", "expense"]
FuelField = Literal["kmCurrent", "pricePerLiter", "liters", "totalCost"]
FuelMode = Literal["auto", "manual"]


@dataclass(frozen=True)
class NumericToken:
    value: float
    start: int
    end: int


@dataclass(frozen=True)
class Candidate:
    field: FuelField
    token_index: int
    priority: float


@dataclass
class ParsedTransaction:
    type: TransactionType
    amount: float | None
    description: str
    category: str | None = None
    platform: str | None = None


@dataclass
class ParsedFuelEntry:
    price_per_liter: float | None = None
    total_cost: float | None = None
    liters: float | None = None
    km_current: float | None = None
    # fonte de cada campo resolvido (índice do token), usado para garantir injetividade
    token_indexes: dict[str, int] = field(default_factory=dict, repr=False, compare=False)

    def is_empty(self) -> bool:
        return (
            self.price_per_liter is None
            and self.total_cost is None
            and self.liters is None
            and self.km_current is None
        )


@dataclass
class TransactionForm:
    type: TransactionType = "income"
    amount: str = ""
    description: str = ""
    category: str = ""
    platform: str = ""


@dataclass
class FuelForm:
    total_cost: str = ""
    price_per_liter: str = ""
    manual_liters: str = ""
    km_current: str = ""
    km_update: str = ""
