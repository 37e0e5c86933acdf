from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """Schema for simple confirmation messages."""
    message: str = Field(..., description="Human readable result message")
