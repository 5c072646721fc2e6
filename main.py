from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from typing import Optional
import threading
import time

import config
import reveal
from errors import ConfigurationError, InsufficientCategoriesError
from game_logic import game_instance
from logs import log_message, log_error
from selector import daily_seed, today_key

app = FastAPI(title="Connections Puzzle API")

# Sync endpoints run in a threadpool; commands must not interleave
engine_lock = threading.Lock()


class ToggleWordRequest(BaseModel):
    word: str


class DismissRequest(BaseModel):
    session_id: Optional[int] = None


class ResetRequest(BaseModel):
    session_size: Optional[int] = Field(default=None, ge=1)


@app.middleware("http")
async def logging_middleware(request: Request, call_next):
    start_time = time.time()

    log_message("http", f"→ {request.method} {request.url.path}")

    response = await call_next(request)

    process_time = time.time() - start_time
    log_message("http", f"← {request.method} {request.url.path} - {response.status_code} ({process_time:.3f}s)")

    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def game_state():
    return game_instance.snapshot().to_dict()


@app.get("/")
def root():
    log_message("http", "Root endpoint accessed")
    return {"message": "Connections Puzzle API is running", "docs": "/docs"}


@app.get("/api/game")
def get_game():
    with engine_lock:
        return game_state()


@app.post("/api/toggle_word")
def toggle_word(body: ToggleWordRequest):
    with engine_lock:
        game_instance.toggle_word(body.word)
        return game_state()


@app.post("/api/clear_selection")
def clear_selection():
    with engine_lock:
        game_instance.clear_selection()
        return game_state()


@app.post("/api/shuffle")
def shuffle():
    with engine_lock:
        game_instance.shuffle()
        return game_state()


@app.post("/api/submit_guess")
def submit_guess():
    with engine_lock:
        selection = list(game_instance.selected)
        result = game_instance.submit_guess()
        log_message("http", f"Guess {selection} → {result['status']}")
        return {"result": result, "game": game_state()}


@app.post("/api/dismiss_shake")
def dismiss_shake(body: Optional[DismissRequest] = None):
    body = body or DismissRequest()
    with engine_lock:
        game_instance.dismiss_shake(body.session_id)
        return game_state()


@app.post("/api/dismiss_confetti")
def dismiss_confetti(body: Optional[DismissRequest] = None):
    body = body or DismissRequest()
    with engine_lock:
        game_instance.dismiss_confetti(body.session_id)
        return game_state()


@app.post("/api/reset")
def reset(body: Optional[ResetRequest] = None):
    body = body or ResetRequest()
    seed = daily_seed(today_key()) if config.DAILY_MODE else None

    with engine_lock:
        try:
            game_instance.reset(body.session_size, seed=seed)
        except InsufficientCategoriesError as e:
            log_error("http", "Requested session is larger than the catalog", e)
            return JSONResponse({"error": str(e)}, status_code=400)
        except ConfigurationError as e:
            log_error("http", "Category catalog is misconfigured", e)
            return JSONResponse({"error": str(e)}, status_code=500)

        log_message("http", "🔄 Game reset")
        return game_state()


@app.get("/api/reveal_schedule")
def reveal_schedule():
    return reveal.schedule()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        app,
        host=config.HOST,
        port=config.PORT,
        log_config=None
    )
