from fastapi import APIRouter, HTTPException, Query, status

from app.core.exceptions import EngineNotFoundError
from app.models.schemas import CipherInfo, ErrorResponse, KeySquareResponse
from app.services.dispatch import get_cipher_engine
from app.services.engines.polygraphic.playfair import KeySquare
from app.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the supported ciphers with a short description of each.",
)
async def list_ciphers() -> list[CipherInfo]:
    """List all registered ciphers in display order."""
    registry = EngineRegistry()
    return [engine.info() for engine in registry.get_all_engines()]


@router.get(
    "/playfair/square",
    response_model=KeySquareResponse,
    summary="Show a Playfair key square",
    description="Build the 5x5 Playfair key square for a keyword.",
)
async def playfair_square(
    key: str = Query("", description="Keyword seeding the square"),
) -> KeySquareResponse:
    """
    Build the Playfair key square for a keyword.

    An empty keyword gives the plain alphabet square.
    """
    return KeySquareResponse(key=key, rows=KeySquare.from_keyword(key).rows())


@router.get(
    "/{cipher}",
    response_model=CipherInfo,
    responses={
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Describe a cipher",
)
async def get_cipher(cipher: str) -> CipherInfo:
    """Describe a single cipher."""
    try:
        return get_cipher_engine(cipher).info()
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
