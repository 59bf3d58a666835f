from fastapi import APIRouter

from app.api.v1.endpoints.transform import transform_text
from app.dependencies import SettingsDep
from app.models.schemas import CipherRequest, CipherResponse, ErrorResponse

router = APIRouter()


@router.post(
    "",
    response_model=CipherResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type and key.",
)
async def encrypt_plaintext(
    request: CipherRequest,
    settings: SettingsDep,
) -> CipherResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Caesar and Rail Fence fall back to a key of 3 when the key is blank or
    not a number; Vigenère and Playfair require a keyword.
    """
    return transform_text(request, settings, decrypt=False)
