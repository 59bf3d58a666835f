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
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: CipherRequest,
    settings: SettingsDep,
) -> CipherResponse:
    """
    Decrypt ciphertext with a specified cipher type.

    Playfair decryption keeps any filler letters added during encryption.
    """
    return transform_text(request, settings, decrypt=True)
