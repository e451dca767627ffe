# /app/models/common_model.py

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """The `{message}` envelope used for confirmations and every error body."""
    message: str = Field(..., description="Human-readable outcome of the request.")


def blank_to_none(value):
    """Clients send "" for cleared optional fields; treat it as null."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


