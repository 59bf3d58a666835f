import logging

from fastapi import HTTPException, status

from app.core.config import Settings
from app.core.exceptions import EngineNotFoundError, TextTooLongError, ValidationError
from app.models.schemas import CipherRequest, CipherResponse
from app.services.dispatch import run_cipher, validate_cipher_input

logger = logging.getLogger(__name__)


def transform_text(
    request: CipherRequest,
    settings: Settings,
    decrypt: bool,
) -> CipherResponse:
    """Validate a request, run the cipher and build the response."""
    try:
        # Validate text length
        if len(request.text) > settings.max_text_length:
            raise TextTooLongError(len(request.text), settings.max_text_length)

        engine = validate_cipher_input(
            request.cipher_type, request.text, request.key, decrypt
        )
        result = run_cipher(engine, request.text, request.key, decrypt)

        return CipherResponse(
            result=result,
            cipher_type=request.cipher_type,
            key_used=str(engine.parse_key(request.key)),
            decrypt=decrypt,
            explanation=engine.explain(request.key, decrypt),
        )

    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        )
    except EngineNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=e.message,
        )
    except Exception as e:
        logger.exception("Cipher request failed")
        action = "Decryption" if decrypt else "Encryption"
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"{action} failed: {str(e)}",
        )
