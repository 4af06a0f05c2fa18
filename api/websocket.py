"""WebSocket endpoint: validate the handshake cookie, then run the session channel."""

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from cookieprobe.channel import SessionChannel
from cookieprobe.handshake import validate_handshake

logger = logging.getLogger(__name__)

router = APIRouter()


def _log_closed(channel: SessionChannel, code: int) -> None:
    logger.info(
        "WebSocket connection closed (session=%s code=%s state=%s)",
        channel.session_id, code, channel.state.value,
    )


@router.websocket("/")
@router.websocket("/ws")
async def session_socket(websocket: WebSocket):
    logger.info("New WebSocket connection attempt")
    cookie_header = websocket.headers.get("cookie")
    logger.info("Received cookies: %r", cookie_header or "")

    result = validate_handshake(cookie_header, websocket.app.state.store)

    # Accept before closing: a close sent before accept reaches the client
    # as a bare HTTP 403 and loses the code and reason.
    await websocket.accept()

    if not result.accepted:
        await websocket.close(code=result.close_code, reason=result.reason)
        return

    channel = SessionChannel(result.session_id, websocket.app.state.store)

    try:
        await websocket.send_json(result.connected_message())

        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                _log_closed(channel, message.get("code", 1000))
                return

            # Text and binary frames are both accepted as JSON
            raw = message.get("text")
            if raw is None:
                raw = message.get("bytes")
            reply = channel.handle(raw)
            if reply is not None:
                await websocket.send_json(reply)
    except WebSocketDisconnect as e:
        # Client went away while a reply was being sent
        _log_closed(channel, e.code)
