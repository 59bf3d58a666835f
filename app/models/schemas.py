from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    TRANSPOSITION = "transposition"
    POLYGRAPHIC = "polygraphic"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    VIGENERE = "vigenere"
    RAIL_FENCE = "railfence"
    PLAYFAIR = "playfair"


# ============================================================================
# Request Schemas
# ============================================================================


class CipherRequest(BaseModel):
    """Request schema for /encrypt and /decrypt endpoints."""

    cipher_type: CipherType
    # Empty and over-long text are rejected by the endpoint, not here
    text: str = ""
    key: str = ""


# ============================================================================
# Response Schemas
# ============================================================================


class CipherResponse(BaseModel):
    """Response schema for /encrypt and /decrypt endpoints."""

    result: str
    cipher_type: CipherType
    key_used: str
    decrypt: bool
    explanation: str


class CipherInfo(BaseModel):
    """Description of a supported cipher."""

    id: CipherType
    name: str
    family: CipherFamily
    summary: str
    description: str
    key_hint: str
    requires_keyword: bool


class KeySquareResponse(BaseModel):
    """A Playfair key square."""

    key: str
    rows: list[list[str]]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
