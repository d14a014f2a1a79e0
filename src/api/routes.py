from fastapi import APIRouter, Depends

from src.agents.abastecimento import FuelAgent
from src.agents.lancamento import TransactionAgent
from src.config import Settings, get_settings
from src.models.schemas import (
    FuelApplyRequest,
    FuelApplyResponse,
    FuelParseResponse,
    TransactionApplyRequest,
    TransactionApplyResponse,
    TransactionParseResponse,
    TranscriptRequest,
)
from src.utils.exceptions import TranscriptTooLongError

router = APIRouter()

transaction_agent = TransactionAgent()
fuel_agent = FuelAgent()


def ensure_transcript_length(transcript: str, settings: Settings) -> None:
    if len(transcript) > settings.max_transcript_length:
        raise TranscriptTooLongError(len(transcript), settings.max_transcript_length)


@router.post("/speech/transaction", response_model=TransactionParseResponse)
async def parse_transaction_speech(
    request: TranscriptRequest,
    settings: Settings = Depends(get_settings),
) -> TransactionParseResponse:
    """Interpreta a fala de uma receita ou despesa"""
    ensure_transcript_length(request.transcript, settings)
    return await transaction_agent.parse(request)


@router.post("/speech/transaction/apply", response_model=TransactionApplyResponse)
async def apply_transaction_speech(
    request: TransactionApplyRequest,
    settings: Settings = Depends(get_settings),
) -> TransactionApplyResponse:
    ensure_transcript_length(request.transcript, settings)
    return await transaction_agent.apply(request)


@router.post("/speech/fuel", response_model=FuelParseResponse)
async def parse_fuel_speech(
    request: TranscriptRequest,
    settings: Settings = Depends(get_settings),
) -> FuelParseResponse:
    """Interpreta a fala de um abastecimento"""
    ensure_transcript_length(request.transcript, settings)
    return await fuel_agent.parse(request)


@router.post("/speech/fuel/apply", response_model=FuelApplyResponse)
async def apply_fuel_speech(
    request: FuelApplyRequest,
    settings: Settings = Depends(get_settings),
) -> FuelApplyResponse:
    ensure_transcript_length(request.transcript, settings)
    return await fuel_agent.apply(request)
