"""
Memo records stored by the hosted memo service.

Creation and update are write-then-read-back: the service answers a write with
the memo id only, so the full record is fetched right after. A memo that cannot
be read back raises MemoInconsistencyError, not the ordinary "not found" None.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from smartmemo.domains.events import EventSink, NullEventSink, publish_memo_updated
from smartmemo.domains.models import Memo, MemoMutationResponse, MessageResponse
from smartmemo.infrastructure.http.api_client import ApiClient
from smartmemo.infrastructure.http.errors import MemoInconsistencyError
from smartmemo.utils.config import memo_api_url
from smartmemo.utils.logger import get_logger

logger = get_logger()

DEFAULT_TITLE_PREFIX = "Untitled Recording"


def default_title(now: datetime | None = None) -> str:
    """Title given to a fresh recording, stamped with local time to the minute."""
    now = now or datetime.now()
    return f"{DEFAULT_TITLE_PREFIX} - {now.strftime('%Y-%m-%d %H:%M')}"


class MemoClient:
    def __init__(self, api: ApiClient | None = None, events: EventSink | None = None) -> None:
        self._api = api or ApiClient(memo_api_url())
        self._events = events or NullEventSink()

    async def create(
        self,
        token: str,
        audio: bytes,
        duration: str,
        tags: List[str],
    ) -> Memo:
        """
        Upload a recording and return the stored memo.

        Raises:
            MemoInconsistencyError: The service acknowledged the memo but cannot return it.
        """
        payload = {
            "title": default_title(),
            "duration": duration,
            "audio_blob": list(audio),
            "tags": list(tags),
        }
        created = await self._api.request_json(
            "POST", "save_memo", MemoMutationResponse, token=token, json_body=payload
        )
        logger.info("New memo created with ID: %s", created.memo_id)

        memo = await self.get(token, created.memo_id)
        if memo is None:
            raise MemoInconsistencyError(created.memo_id, "creation")
        publish_memo_updated(self._events)
        return memo

    async def update(
        self,
        token: str,
        memo_id: str,
        title: str,
        transcript: Optional[str] = None,
        translation: Optional[str] = None,
        summary: Optional[str] = None,
        tags: Optional[List[str]] = None,
    ) -> Memo:
        """
        Replace the supplied fields of a memo and return the stored result.

        Fields left as None are not sent; what the service does with absent
        fields is up to the service.
        """
        payload: dict[str, Any] = {"title": title}
        optional = {
            "transcript": transcript,
            "translate": translation,
            "summary": summary,
            "tags": list(tags) if tags is not None else None,
        }
        payload.update({k: v for k, v in optional.items() if v is not None})

        updated = await self._api.request_json(
            "PATCH", f"update_memo/{memo_id}", MemoMutationResponse, token=token, json_body=payload
        )
        logger.info("Memo updated with ID: %s", updated.memo_id)

        memo = await self.get(token, memo_id)
        if memo is None:
            raise MemoInconsistencyError(memo_id, "update")
        publish_memo_updated(self._events)
        return memo

    async def list(self, token: str) -> List[Memo]:
        memos = await self._api.request_json("GET", "get_memos", List[Memo], token=token)
        logger.info("Retrieved %d memos", len(memos))
        return memos

    async def get(self, token: str, memo_id: str) -> Optional[Memo]:
        """Fetch one memo; None when the service reports 404."""
        return await self._api.request_json(
            "GET", f"get_memo/{memo_id}", Memo, token=token, allow_not_found=True
        )

    async def delete(self, token: str, memo_id: str) -> None:
        # A second delete of the same id surfaces whatever the service returns.
        await self._api.request_empty("DELETE", f"delete_memo/{memo_id}", token=token)
        logger.info("Memo deleted with ID: %s", memo_id)
        publish_memo_updated(self._events)

    async def delete_all(self, token: str) -> str:
        out = await self._api.request_json("DELETE", "delete_all_memos", MessageResponse, token=token)
        logger.info("All memos deleted. Server response: %s", out.message)
        publish_memo_updated(self._events)
        return out.message
