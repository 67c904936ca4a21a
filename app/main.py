from __future__ import annotations

import logging
from typing import Any, Dict, Iterator, Optional

import uvicorn
from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from bot.core.landing import LANDING_PAGE
from bot.handler import handle_bot_request
from bot.tools.fact_lookup import FactClient
from config.settings import Settings, get_settings


settings = get_settings()

logging.basicConfig(level=settings.log_level, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("funfacts")

app = FastAPI(title="Fun Facts Bot Webhook", version="1.0.0")

# CORS: allow the bot builder's test console during development
if settings.app_env.lower() in {"dev", "development", "local"}:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def get_fact_client() -> Iterator[FactClient]:
    with FactClient.from_settings(get_settings()) as client:
        yield client


@app.get("/", response_class=HTMLResponse)
def index() -> str:
    return LANDING_PAGE


@app.post("/bot")
async def bot(request: Request, client: FactClient = Depends(get_fact_client)) -> Dict[str, Any]:
    settings = get_settings()
    # Read the raw body ourselves: malformed JSON must degrade to defaults, not a 422
    body = await request.body()
    try:
        return await run_in_threadpool(handle_bot_request, body, client, settings)
    except Exception as e:
        logger.exception("Bot webhook processing failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/health")
def health():
    return {"status": "ok"}


def run(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    logger.info("Starting webhook on %s:%s (env=%s)", settings.host, settings.port, settings.app_env)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
