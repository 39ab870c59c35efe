"""WebSocket endpoint: /ws registers with the connection manager on app.state.

Clients only listen; anything they send is read and discarded so the loop
notices disconnects.
"""

from fastapi import APIRouter, Request, WebSocket, WebSocketDisconnect

from taskhub.schemas.websocket import WebSocketStatusResponse

router = APIRouter()


@router.websocket("")
async def websocket_endpoint(websocket: WebSocket):
    """Register the client with the manager and keep it until it disconnects."""
    manager = websocket.app.state.ws_manager
    await manager.connect(websocket)
    try:
        while True:
            await websocket.receive_text()
    except WebSocketDisconnect:
        pass
    finally:
        await manager.disconnect(websocket)


@router.get("/status", response_model=WebSocketStatusResponse)
async def websocket_status(request: Request) -> WebSocketStatusResponse:
    """Return the number of connected clients."""
    total = await request.app.state.ws_manager.get_connection_count()
    return WebSocketStatusResponse(total_connections=total)
