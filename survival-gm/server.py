import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from game_context import build_requester, configure_logging
from game_runner import Game
from game_session import GameSession
from ui.events import build_state_payload
from ui.ui import UI
from ui.web_provider import WebProvider

configure_logging()
logger = logging.getLogger(__name__)

requester = None


@asynccontextmanager
async def lifespan(_app: FastAPI):
    # A missing API key must stop the server before it takes requests.
    global requester
    requester = build_requester()
    yield


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


sessions: Dict[str, GameSession] = {}


class StepRequest(BaseModel):
    session_id: str
    action: str
    choice: int | None = None
    prompt: str | None = None


class EventsRequest(BaseModel):
    session_id: str


def new_session() -> GameSession:
    session = GameSession(None)
    ui = UI(WebProvider(session))
    session.game = Game(ui, requester)
    return session


@app.get("/health")
def health():
    return {"ok": requester is not None, "model": getattr(requester, "model", None)}


@app.post("/step")
def step(req: StepRequest):
    # Starting over always rebuilds the in-memory session.
    if req.action in {"start", "restart"} and req.session_id in sessions:
        if not sessions[req.session_id].busy:
            sessions.pop(req.session_id, None)

    if req.session_id not in sessions:
        sessions[req.session_id] = new_session()
        logger.info("New session %s", req.session_id)

    session = sessions[req.session_id]
    payload: Dict[str, Any] = {
        "action": req.action,
        "choice": req.choice,
        "prompt": req.prompt,
    }
    payload = {k: v for k, v in payload.items() if v is not None}
    return session.step(payload)


@app.get("/state/{session_id}")
def state(session_id: str):
    session: Optional[GameSession] = sessions.get(session_id)
    if session is None:
        return build_state_payload(None)
    return build_state_payload(session.game.state)


@app.post("/events")
def events(req: EventsRequest):
    if req.session_id not in sessions:
        return []
    return sessions[req.session_id].drain()


if __name__ == "__main__":
    uvicorn.run("server:app", host="127.0.0.1", port=8000)
