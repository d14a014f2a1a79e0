import logging

from src.models.domain import FuelForm
from src.models.schemas import (
    FuelApplyRequest,
    FuelApplyResponse,
    FuelEntryData,
    FuelFormData,
    FuelParseResponse,
    TranscriptRequest,
)
from src.services.form_merge import merge_fuel_form
from src.services.fuel_parser import parse_fuel_entry
from src.utils.text_normalizer import get_clarification_message

logger = logging.getLogger(__name__)


class FuelAgent:
    async def parse(self, request: TranscriptRequest) -> FuelParseResponse:
        parsed = parse_fuel_entry(request.transcript)

        if parsed is None:
            logger.info(f"Fuel transcript not recognized ({len(request.transcript)} chars)")
            return FuelParseResponse(
                recognized=False,
                message=get_clarification_message("fuel"),
            )

        logger.info(f"Fuel transcript recognized: fields={sorted(parsed.token_indexes)}")

        return FuelParseResponse(
            recognized=True,
            entry=FuelEntryData(
                price_per_liter=parsed.price_per_liter,
                total_cost=parsed.total_cost,
                liters=parsed.liters,
                km_current=parsed.km_current,
            ),
            message=get_clarification_message("fuel_filled"),
        )

    async def apply(self, request: FuelApplyRequest) -> FuelApplyResponse:
        parsed = parse_fuel_entry(request.transcript)

        if parsed is None:
            return FuelApplyResponse(
                recognized=False,
                form=request.form,
                message=get_clarification_message("fuel"),
            )

        result = merge_fuel_form(FuelForm(**request.form.model_dump()), parsed, request.mode)

        if result.had_applicable_data:
            message = get_clarification_message("fuel_filled")
        else:
            message = get_clarification_message("fuel_no_data")

        logger.info(f"Fuel form merged: mode={request.mode}, updated={result.updated}")

        return FuelApplyResponse(
            recognized=True,
            form=FuelFormData(**vars(result.form)),
            updated=result.updated,
            had_applicable_data=result.had_applicable_data,
            message=message,
        )
