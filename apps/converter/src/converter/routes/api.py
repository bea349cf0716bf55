# region Docstrings
"""
converter.routes.api
HTTP endpoints for numeral conversion and the persisted history.
Endpoints:
- GET    /api/bases    supported bases and their display names
- POST   /api/convert  convert a numeral and record it
- GET    /api/history  current history, most recent first
- DELETE /api/history  remove the stored history
Handlers that touch storage are plain `def` so FastAPI runs them in its
threadpool instead of on the event loop.
"""
# endregion
# region Imports
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import BaseModel, Field

from radix_core.constants import SUPPORTED_BASES, Base
from radix_core.errors import ConversionError, StorageError
from radix_core.models import ConversionRecord
from radix_core.session import ConversionSession
from radix_core.utils import base_name

from ..logger import logger

_logger = logger.getChild("api")

# endregion
# region API Models


class BaseInfo(BaseModel):
    base: int = Field(..., description="Radix value.")
    name: str = Field(..., description="Display name, e.g. 'Binary'.")


class ConversionRequest(BaseModel):
    input: str = Field(..., description="The numeral exactly as typed.")
    from_base: Base = Field(..., description="Base the numeral is written in.")
    to_base: Base = Field(..., description="Base to convert to.")


class ConversionResponse(BaseModel):
    result: str = Field(..., description="The converted numeral, uppercase.")
    record: ConversionRecord = Field(..., description="The record added to the history.")
    saved: bool = Field(..., description="Whether the history was persisted.")
    message: Optional[str] = Field(
        None, description="Notice shown when the history could not be saved."
    )


class MessageResponse(BaseModel):
    message: str


# endregion
# region Dependencies


def get_session(request: Request) -> ConversionSession:
    """The session created at application startup."""
    return request.app.state.session


# endregion
# region API Router and Endpoints

conversion_api = APIRouter(prefix="/api", tags=["conversion"])


@conversion_api.get("/bases", summary="Supported Bases", response_model=list[BaseInfo])
async def list_bases() -> list[BaseInfo]:
    return [BaseInfo(base=base, name=base_name(base)) for base in SUPPORTED_BASES]


@conversion_api.post(
    "/convert", summary="Convert Numeral", response_model=ConversionResponse
)
def convert_numeral(
    request: ConversionRequest,
    session: ConversionSession = Depends(get_session),
) -> ConversionResponse:
    """Convert a numeral between bases and add it to the history."""
    try:
        outcome = session.convert(request.input, request.from_base, request.to_base)
    except ConversionError as e:
        raise HTTPException(
            status_code=422,
            detail={"error": e.name, "message": e.message, "base": e.base},
        ) from e

    if not outcome.saved:
        _logger.warning(
            f"Conversion of {request.input!r} kept for this session only: {outcome.message}"
        )
    return ConversionResponse(
        result=outcome.result,
        record=outcome.record,
        saved=outcome.saved,
        message=outcome.message,
    )


@conversion_api.get(
    "/history", summary="Conversion History", response_model=list[ConversionRecord]
)
def get_history(
    session: ConversionSession = Depends(get_session),
) -> list[ConversionRecord]:
    return list(session.history)


@conversion_api.delete(
    "/history", summary="Clear Conversion History", response_model=MessageResponse
)
def clear_history(
    session: ConversionSession = Depends(get_session),
) -> MessageResponse:
    try:
        session.clear_history()
    except StorageError as e:
        _logger.error(f"Error clearing history: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to clear history") from e
    return MessageResponse(message="History cleared successfully!")


# endregion
