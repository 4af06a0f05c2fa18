"""HTTP routes that issue, clear and inspect the session cookie."""

import logging
import time

from fastapi import APIRouter, Request, Response

from cookieprobe.cookies import (
    COOKIE_PATH,
    SESSION_COOKIE_NAME,
    cookie_domain_for,
    get_session_cookie,
)
from cookieprobe.sessions import SessionStore, generate_session_id

from .models import ClearCookieResponse, HealthResponse, SetCookieResponse, StatusResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def _store(request: Request) -> SessionStore:
    return request.app.state.store


def _write_session_cookie(response: Response, request: Request, value: str, max_age: int | None = None):
    # httponly=False so the test page can read the cookie from script
    response.set_cookie(
        SESSION_COOKIE_NAME,
        value,
        max_age=max_age,
        path=COOKIE_PATH,
        domain=cookie_domain_for(request.headers.get("host")),
        httponly=False,
    )


@router.get("/set-cookie", response_model=SetCookieResponse)
def set_cookie(request: Request, response: Response):
    session_id = generate_session_id()
    _store(request).create(session_id)
    logger.info("Setting cookie via HTTP: %s", session_id)

    _write_session_cookie(response, request, session_id)
    return SetCookieResponse(
        success=True,
        session_id=session_id,
        message="Cookie set successfully",
    )


@router.get("/clear-cookie", response_model=ClearCookieResponse)
def clear_cookie(request: Request, response: Response):
    logger.info("Clearing cookie via HTTP with Max-Age=0")

    # Max-Age=0 asks the client to drop the cookie immediately. Whether it
    # actually does before the next handshake is what this tool observes.
    _write_session_cookie(response, request, "", max_age=0)

    store = _store(request)
    presented = get_session_cookie(request.headers.get("cookie"))
    record = store.get(presented) if presented else None
    if record is not None and store.invalidate(presented):
        logger.info(
            "Invalidated session %s after %.1fs", presented, time.time() - record.created_at
        )

    return ClearCookieResponse(
        success=True,
        message="Cookie cleared with Max-Age=0 - browser should delete it",
    )


@router.get("/status", response_model=StatusResponse)
def status(request: Request):
    raw = request.headers.get("cookie", "")
    return StatusResponse(
        received_cookie=get_session_cookie(raw),
        active_sessions=_store(request).list_active(),
        all_cookies=raw,
    )


@router.get("/health", response_model=HealthResponse)
def health(request: Request):
    return HealthResponse(status="ok", active_sessions=len(_store(request)))
