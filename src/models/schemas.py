from typing import Literal

from pydantic import BaseModel, Field


class TranscriptRequest(BaseModel):
    transcript: str = Field(..., min_length=1)


class TransactionData(BaseModel):
    type: Literal["income", "expense"]
    amount: float | None = None
    description: str
    category: str | None = None
    platform: str | None = None


class TransactionParseResponse(BaseModel):
    recognized: bool
    transaction: TransactionData | None = None
    message: str


class FuelEntryData(BaseModel):
    price_per_liter: float | None = None
    total_cost: float | None = None
    liters: float | None = None
    km_current: float | None = None


class FuelParseResponse(BaseModel):
    recognized: bool
    entry: FuelEntryData | None = None
    message: str


class TransactionFormData(BaseModel):
    type: Literal["income", "expense"] = "income"
    amount: str = ""
    description: str = ""
    category: str = ""
    platform: str = ""


class TransactionApplyRequest(TranscriptRequest):
    form: TransactionFormData = Field(default_factory=TransactionFormData)


class TransactionApplyResponse(BaseModel):
    recognized: bool
    form: TransactionFormData
    message: str


class FuelFormData(BaseModel):
    total_cost: str = ""
    price_per_liter: str = ""
    manual_liters: str = ""
    km_current: str = ""
    km_update: str = ""


class FuelApplyRequest(TranscriptRequest):
    form: FuelFormData = Field(default_factory=FuelFormData)
    mode: Literal["auto", "manual"] = "auto"


class FuelApplyResponse(BaseModel):
    recognized: bool
    form: FuelFormData
    updated: bool = False
    had_applicable_data: bool = False
    message: str
