"""schemas/shared.py — Reusable building blocks shared across schema modules."""

from pydantic import BaseModel, ConfigDict


class ErrorResponse(BaseModel):
    """Body of every non-2xx response produced by api/errors.py."""
    model_config = ConfigDict(from_attributes=False)

    status: int
    error: str
    message: str
    path: str
