import logging
from dataclasses import dataclass, replace

from src.models.domain import FuelForm, FuelMode, ParsedFuelEntry, ParsedTransaction, TransactionForm
from src.utils.formatting import format_decimal, format_price_per_liter

logger = logging.getLogger(__name__)


def _amount_to_str(amount: float) -> str:
    return str(int(amount)) if amount.is_integer() else str(amount)


@dataclass
class FuelMergeResult:
    form: FuelForm
    updated: bool
    had_applicable_data: bool


def merge_transaction_form(form: TransactionForm, parsed: ParsedTransaction) -> TransactionForm:
    merged = replace(form, type=parsed.type, description=parsed.description)
    if parsed.amount is not None:
        merged.amount = _amount_to_str(parsed.amount)

    if parsed.type == "expense":
        merged.category = parsed.category or ""
        merged.platform = ""
    else:
        merged.platform = parsed.platform or ""
        merged.category = ""
    return merged


def merge_fuel_form(form: FuelForm, parsed: ParsedFuelEntry, mode: FuelMode = "auto") -> FuelMergeResult:
    """
    Aplica os campos reconhecidos no formulário de abastecimento.

    Só valores positivos são aplicados; campos não reconhecidos mantêm o
    valor anterior. Litros só entram no modo manual.
    """
    updates: dict[str, str] = {}

    if parsed.total_cost is not None and parsed.total_cost > 0:
        updates["total_cost"] = format_decimal(parsed.total_cost, 2)

    if parsed.price_per_liter is not None and parsed.price_per_liter > 0:
        updates["price_per_liter"] = format_price_per_liter(parsed.price_per_liter)

    if mode == "manual" and parsed.liters is not None and parsed.liters > 0:
        updates["manual_liters"] = format_decimal(parsed.liters, 3)

    if parsed.km_current is not None and parsed.km_current > 0:
        # round half up, como Math.round
        km_value = int(parsed.km_current + 0.5)
        if km_value > 0:
            updates["km_current"] = str(km_value)
            updates["km_update"] = str(km_value)

    updates = {key: value for key, value in updates.items() if value}
    updated = any(getattr(form, key) != value for key, value in updates.items())

    logger.debug(f"Fuel form merge: fields={sorted(updates)}, updated={updated}")

    return FuelMergeResult(
        form=replace(form, **updates),
        updated=updated,
        had_applicable_data=bool(updates),
    )
