"""Supabase persistence for JSON documents.

Expects a table with a text primary key and a jsonb value column:

    create table kv_store (key text primary key, value jsonb not null,
                           updated_at timestamptz default now());
"""

from datetime import datetime, timezone
from typing import Any

import httpx

from logger import logger
from utils.log_sanitizer import sanitize_for_log
from .base import DocumentStore, StoreError


class SupabaseDocumentStore(DocumentStore):
    """Key-value documents over the Supabase REST API."""

    def __init__(self, url: str, key: str, table: str = "kv_store", timeout: float = 10):
        self.url = url.rstrip("/")
        self.key = key
        self.table = table
        self.timeout = timeout

    def _headers(self, prefer: str | None = None) -> dict:
        """Get headers for Supabase API calls."""
        headers = {
            "apikey": self.key,
            "Authorization": f"Bearer {self.key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    async def get(self, key: str) -> Any | None:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    f"{self.url}/rest/v1/{self.table}",
                    headers=self._headers(),
                    params={"key": f"eq.{key}", "select": "value"},
                    timeout=self.timeout
                )
                response.raise_for_status()
                rows = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(f"Supabase read of '{key}' failed: {sanitize_for_log(e.response.text)}")
            raise StoreError(f"Supabase read failed with {e.response.status_code}") from e
        except (httpx.HTTPError, ValueError) as e:
            raise StoreError(f"Supabase read of '{key}' failed: {e}") from e

        if not rows:
            return None
        return rows[0]["value"]

    async def put(self, key: str, document: Any) -> None:
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.url}/rest/v1/{self.table}",
                    headers=self._headers("resolution=merge-duplicates,return=minimal"),
                    json={
                        "key": key,
                        "value": document,
                        "updated_at": datetime.now(timezone.utc).isoformat()
                    },
                    timeout=self.timeout
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(f"Supabase write of '{key}' failed: {sanitize_for_log(e.response.text)}")
            raise StoreError(f"Supabase write failed with {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise StoreError(f"Supabase write of '{key}' failed: {e}") from e

        logger.debug(f"Saved document '{key}' to Supabase")
