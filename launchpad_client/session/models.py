"""Session models."""

from pydantic import BaseModel, ConfigDict


class SessionUser(BaseModel):
    """User record stored alongside a token. Portal users carry extra fields."""

    model_config = ConfigDict(extra="allow")

    id: str
    email: str | None = None
    role: str | None = None
    name: str | None = None


class Session(BaseModel):
    """Token plus user for one auth domain."""

    token: str
    user: SessionUser
