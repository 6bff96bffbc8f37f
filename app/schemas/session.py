"""Session API schemas."""

from pydantic import BaseModel, Field


class SessionUserResponse(BaseModel):
    """The user behind the request's session cookies."""

    id: str
    email: str | None = Field(None, description="None for phone-only accounts")
