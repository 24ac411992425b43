"""
FastAPI application — single entry point for the emoji gallery.

Run as a script:
    python app/app.py

Or as a module:
    uvicorn app.app:app --port 8080

Per request (nothing is kept between requests):
    1. Fetch the emoji list from EmojiHub   → list[EmojiRecord]
    2. Derive the distinct groups and render → HTML document

Endpoint:
    GET /
        returns: 200 text/html gallery page, or
                 500 text/plain on fetch / decode / template failure

Logs each request and wall-clock response time to stdout and logs/app.log
(rotating, 5 MB max, 3 backups).
"""

import logging
import logging.handlers
import os
import sys
import time
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.responses import HTMLResponse, PlainTextResponse, Response

# Ensure project root is on sys.path when running as a script (python app/app.py)
sys.path.insert(0, str(Path(__file__).parent.parent))

from render.gallery import GalleryPage, TemplateError, gallery_template, render
from upstream.emojihub import DecodeFailed, FetchFailed, fetch_emojis

load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8080"))

LOG_DIR  = Path(os.getenv("LOG_DIR", Path(__file__).parent.parent / "logs"))
LOG_FILE = LOG_DIR / "app.log"

def _setup_logging() -> None:
    root = logging.getLogger()
    if any(isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers):
        return  # already configured (module re-imported)

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    fmt = logging.Formatter("%(asctime)s  %(levelname)s  %(message)s")

    stream = logging.StreamHandler(sys.stdout)
    stream.setFormatter(fmt)

    # Rotate at 5 MB, keep 3 backups
    rotating = logging.handlers.RotatingFileHandler(
        LOG_FILE, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
    )
    rotating.setFormatter(fmt)

    root.setLevel(logging.INFO)
    root.addHandler(stream)
    root.addHandler(rotating)

_setup_logging()
log = logging.getLogger("api")


# ---------------------------------------------------------------------------
# App + lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(_: FastAPI):
    log.info("Compiling gallery template…")
    gallery_template()  # raises TemplateError here rather than on the first request
    log.info("  Template ready.")

    yield  # server runs here


app = FastAPI(title="Emoji Gallery", lifespan=lifespan)


# ---------------------------------------------------------------------------
# Endpoint
# ---------------------------------------------------------------------------

def _failure(message: str, exc: Exception) -> PlainTextResponse:
    log.error("%s: %s", message, exc)
    return PlainTextResponse(message, status_code=500)


@app.get("/", response_class=HTMLResponse)
def gallery() -> Response:
    t0 = time.perf_counter()

    try:
        records = fetch_emojis()
    except FetchFailed as exc:
        return _failure("Failed to reach emoji API", exc)
    except DecodeFailed as exc:
        return _failure("Failed to parse API response", exc)

    page = GalleryPage.from_records(records)
    try:
        body = render(page.records, page.groups)
    except TemplateError as exc:
        return _failure("Failed to render gallery", exc)

    elapsed = time.perf_counter() - t0
    log.info("gallery  emojis=%d  groups=%d  %.2fs", len(page.records), len(page.groups), elapsed)

    return HTMLResponse(body)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def _launch_server() -> None:
    uvicorn.run(app, host=HOST, port=PORT, reload=False)


if __name__ == "__main__":
    log.info("=== Emoji Gallery — launching server on http://%s:%d ===", HOST, PORT)
    _launch_server()
