"""Pydantic models for response validation."""

from pydantic import BaseModel, Field

GREETING_MESSAGE = "Hello from Node.js app running on Kubernetes!"


class MessageResponse(BaseModel):
    """Greeting response model."""

    message: str = Field(..., description="Greeting text")
