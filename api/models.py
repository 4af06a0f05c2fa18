"""Pydantic response schemas for the cookie probe API."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Responses ──────────────────────────────────────────────────────────────

class SetCookieResponse(_CamelModel):
    success: bool
    session_id: str
    message: str


class ClearCookieResponse(_CamelModel):
    success: bool
    message: str


class StatusResponse(_CamelModel):
    received_cookie: str | None
    active_sessions: list[str]
    all_cookies: str


class HealthResponse(_CamelModel):
    status: str
    active_sessions: int
