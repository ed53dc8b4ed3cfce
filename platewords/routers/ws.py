import json
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from platewords.managers.checks import CheckManager, PLATE_CHECK, WORD_CHECK
from platewords.schemas import PlateCheck, WordCheck

logger = logging.getLogger(__name__)

router = APIRouter()


@router.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    checks: CheckManager = websocket.app.state.checks
    await websocket.accept()

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", 1000))
            raw = message.get("text")
            if raw is None:
                await websocket.send_json({"type": "error", "channel": None, "detail": "Message must be a text frame"})
                continue
            try:
                data = json.loads(raw)
            except json.JSONDecodeError:
                await websocket.send_json({"type": "error", "channel": None, "detail": "Message is not JSON"})
                continue

            kind = data.get("type") if isinstance(data, dict) else None
            try:
                if kind == WORD_CHECK:
                    result = checks.check_word(WordCheck.model_validate(data).word)
                elif kind == PLATE_CHECK:
                    result = checks.check_plate(PlateCheck.model_validate(data).plate)
                else:
                    await websocket.send_json({"type": "error", "channel": kind, "detail": "Unknown message type"})
                    continue
            except ValidationError:
                logger.warning("Rejected %s websocket payload", kind)
                await websocket.send_json({"type": "error", "channel": kind, "detail": f"Invalid {kind} payload"})
                continue

            # Reply to the sender only
            await websocket.send_json({"type": kind, **result.model_dump()})
    except WebSocketDisconnect:
        logger.debug("WebSocket client disconnected")
