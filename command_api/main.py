"""Command API - Slack slash-command endpoint for the watchlist.

Run with: uvicorn command_api.main:app --port 8787
(or `python main.py serve`, which also starts the scheduled jobs)
"""

from datetime import datetime, timezone
from urllib.parse import parse_qs

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

import config
from domains.slack.signature import verify_request
from domains.storage import StoreError
from domains.watchlist.commands import handle_command
from logger import logger

app = FastAPI(
    title="CTF Notice",
    description="Slack slash commands for the CTF watchlist",
    version="1.0.0"
)


# ============================================================
# Health Check
# ============================================================

@app.get("/")
async def root():
    """Service banner."""
    return {
        "status": "ok",
        "service": "CTF Notice",
        "timestamp": datetime.now(timezone.utc).isoformat()
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok"}


# ============================================================
# Slack Slash Commands
# ============================================================

def _form_value(form: dict, name: str) -> str:
    values = form.get(name) or [""]
    return values[0]


@app.post("/slack")
async def slack_command(request: Request):
    """Handle `/ctf <subcommand> ...` posted by Slack as a urlencoded form."""
    body = await request.body()

    if config.SLACK_SIGNING_SECRET:
        valid = verify_request(
            config.SLACK_SIGNING_SECRET,
            request.headers.get("X-Slack-Request-Timestamp"),
            request.headers.get("X-Slack-Signature"),
            body
        )
        if not valid:
            logger.warning("Rejected slash command with an invalid Slack signature")
            raise HTTPException(status_code=401, detail="Invalid signature")

    form = parse_qs(body.decode("utf-8", errors="replace"), keep_blank_values=True)
    command = _form_value(form, "command") or "/ctf"
    text = _form_value(form, "text").strip()

    try:
        reply = await handle_command(text, command=command)
    except StoreError as e:
        logger.error(f"Slash command '{command} {text}' failed: {e}")
        raise HTTPException(status_code=500, detail="Watchlist storage is unavailable, try again later")

    return JSONResponse({"response_type": "ephemeral", "text": reply})
