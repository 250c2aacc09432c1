import logging

from fastapi import APIRouter, Depends, HTTPException

from model_compare.config import Settings, get_settings
from model_compare.core.compare import run_comparison
from model_compare.core.errors import ComparisonError, FormatError, TransportError, ValidationError
from model_compare.core.highlight import highlight_differences
from model_compare.models import (CompareRequest, CompareResponse, HighlightRequest,
                                  HighlightResult, ResultsPanel)

logger = logging.getLogger(__name__)
router = APIRouter()


def status_code_for(error: ComparisonError) -> int:
    """Maps a comparison failure onto the HTTP status returned to the dashboard."""
    if isinstance(error, ValidationError):
        return 422
    if isinstance(error, (TransportError, FormatError)):
        return 502
    return 500


def with_generation_defaults(request: CompareRequest, settings: Settings) -> CompareRequest:
    # Parameters left out of the request fall back to the configured ones.
    return request.model_copy(update={
        "max_tokens": request.max_tokens if request.max_tokens is not None else settings.MAX_TOKENS,
        "temperature": request.temperature if request.temperature is not None else settings.TEMPERATURE,
    })


@router.post("/compare", response_model=CompareResponse)
async def compare_endpoint(request: CompareRequest, settings: Settings = Depends(get_settings)):
    request = with_generation_defaults(request, settings)
    panel = ResultsPanel()
    try:
        outcome = await run_comparison(request, panel)
    except ComparisonError as e:
        raise HTTPException(status_code=status_code_for(e), detail=str(e))
    except Exception as e:
        logger.exception("Comparison failed")
        raise HTTPException(status_code=500, detail=f"Unexpected error: {str(e)}")

    return CompareResponse(
        status="success",
        first=outcome.first,
        second=outcome.second,
        panel=panel,
    )


@router.post("/highlight", response_model=HighlightResult)
def highlight_endpoint(request: HighlightRequest):
    """
    Highlights word-level differences between two texts without calling any model.
    """
    markup1, markup2 = highlight_differences(request.text1, request.text2)
    return HighlightResult(markup1=markup1, markup2=markup2)
