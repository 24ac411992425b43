"""
Client for the EmojiHub public API (emojihub.yurace.pro).

One GET per call, no retries and no caching: the gallery is rebuilt from a
fresh upstream response on every request.

Failure taxonomy:
    FetchFailed   — the request never produced a response
                    (DNS, connection refused, timeout, broken stream)
    DecodeFailed  — a response arrived but was not a 2xx JSON array
                    of emoji objects

Public API:
    fetch_emojis(url, timeout) → list[EmojiRecord]
    decode_emojis(payload)     → list[EmojiRecord]
"""

import logging
import os
import time

import requests
from dotenv import load_dotenv
from pydantic import TypeAdapter, ValidationError

from upstream.models import EmojiRecord

load_dotenv()

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

API_URL = os.getenv("EMOJI_API_URL", "https://emojihub.yurace.pro/api/all")
FETCH_TIMEOUT = float(os.getenv("EMOJI_FETCH_TIMEOUT", "10"))  # seconds

log = logging.getLogger(__name__)

SESSION = requests.Session()
SESSION.headers["User-Agent"] = "Emoji-Gallery/1.0"

_RECORDS = TypeAdapter(list[EmojiRecord])


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class UpstreamError(Exception):
    """Base class for anything that goes wrong talking to EmojiHub."""


class FetchFailed(UpstreamError):
    pass


class DecodeFailed(UpstreamError):
    pass


# ---------------------------------------------------------------------------
# Decode
# ---------------------------------------------------------------------------

def decode_emojis(payload: bytes | str) -> list[EmojiRecord]:
    """Parse a JSON array of emoji objects, preserving upstream order."""
    try:
        return _RECORDS.validate_json(payload)
    except ValidationError as exc:
        raise DecodeFailed(f"Malformed emoji payload: {exc.error_count()} error(s)") from exc


# ---------------------------------------------------------------------------
# Fetch
# ---------------------------------------------------------------------------

def fetch_emojis(url: str = API_URL, timeout: float = FETCH_TIMEOUT) -> list[EmojiRecord]:
    """GET the emoji list and decode it. Raises FetchFailed or DecodeFailed."""
    t0 = time.perf_counter()
    try:
        # Response is released on every exit path
        with SESSION.get(url, timeout=timeout) as resp:
            if not 200 <= resp.status_code < 300:
                raise DecodeFailed(f"Upstream returned HTTP {resp.status_code} for {url}")
            body = resp.content
    except requests.RequestException as exc:
        raise FetchFailed(f"Could not reach {url}: {exc}") from exc

    records = decode_emojis(body)
    log.info("Fetched %d emojis from %s in %.2fs", len(records), url, time.perf_counter() - t0)
    return records
