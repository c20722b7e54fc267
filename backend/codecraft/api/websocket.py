"""WebSocket endpoint for keystroke-driven validation."""

import json
from fastapi import APIRouter, WebSocket, WebSocketDisconnect

import structlog

from codecraft.config import get_settings
from codecraft.validators import validation_engine

logger = structlog.get_logger()

router = APIRouter()


async def _send_json(websocket: WebSocket, data: dict):
    await websocket.send_text(json.dumps(data))


@router.websocket("/ws/validate")
async def validation_websocket(websocket: WebSocket):
    """Live validation channel for the editor.

    Protocol:
        Client → Server: {"type": "validate", "code": ..., "language": ...}
                         {"type": "ping"}
        Server → Client: {"type": "diagnostics", ...ValidationReport}
                         {"type": "pong"}
                         {"type": "error", "message": ...}

    Every validate message is answered from that snapshot alone; earlier
    reports are never merged in.
    """
    await websocket.accept()
    logger.info("ws_connected", client=websocket.client.host if websocket.client else "unknown")
    max_length = get_settings().MAX_CODE_LENGTH

    try:
        while True:
            try:
                data = await websocket.receive_text()
                message = json.loads(data)
                if not isinstance(message, dict):
                    raise ValueError("message must be a JSON object")
                msg_type = message.get("type")

                if msg_type == "validate":
                    code = message.get("code") or ""
                    if not isinstance(code, str) or len(code) > max_length:
                        await _send_json(websocket, {
                            "type": "error",
                            "message": f"'code' must be a string of at most {max_length} characters",
                        })
                        continue

                    report = validation_engine.validate(code, message.get("language"))
                    await _send_json(websocket, {
                        "type": "diagnostics",
                        **report.model_dump(mode="json", by_alias=True),
                    })

                elif msg_type == "ping":
                    await _send_json(websocket, {"type": "pong"})

                else:
                    await _send_json(websocket, {
                        "type": "error",
                        "message": f"Unknown message type: {msg_type}",
                    })

            except WebSocketDisconnect:
                break
            except ValueError:
                await _send_json(websocket, {
                    "type": "error",
                    "message": "Invalid JSON",
                })

    except WebSocketDisconnect:
        pass
    finally:
        logger.info("ws_disconnected")
