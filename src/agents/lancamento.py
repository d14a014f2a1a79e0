import logging

from src.models.domain import TransactionForm
from src.models.schemas import (
    TransactionApplyRequest,
    TransactionApplyResponse,
    TransactionData,
    TransactionFormData,
    TransactionParseResponse,
    TranscriptRequest,
)
from src.services.form_merge import merge_transaction_form
from src.services.transaction_parser import parse_transaction
from src.utils.text_normalizer import get_clarification_message

logger = logging.getLogger(__name__)


class TransactionAgent:
    async def parse(self, request: TranscriptRequest) -> TransactionParseResponse:
        parsed = parse_transaction(request.transcript)

        if parsed is None:
            logger.info(f"Transaction transcript not recognized ({len(request.transcript)} chars)")
            return TransactionParseResponse(
                recognized=False,
                message=get_clarification_message("transaction"),
            )

        logger.info(f"Transaction transcript recognized: type={parsed.type}, has_amount={parsed.amount is not None}")

        return TransactionParseResponse(
            recognized=True,
            transaction=TransactionData(
                type=parsed.type,
                amount=parsed.amount,
                description=parsed.description,
                category=parsed.category,
                platform=parsed.platform,
            ),
            message=get_clarification_message("transaction_filled"),
        )

    async def apply(self, request: TransactionApplyRequest) -> TransactionApplyResponse:
        parsed = parse_transaction(request.transcript)

        if parsed is None:
            return TransactionApplyResponse(
                recognized=False,
                form=request.form,
                message=get_clarification_message("transaction"),
            )

        merged = merge_transaction_form(TransactionForm(**request.form.model_dump()), parsed)

        return TransactionApplyResponse(
            recognized=True,
            form=TransactionFormData(**vars(merged)),
            message=get_clarification_message("transaction_filled"),
        )
