"""
Memo change notifications for the UI.

Delivery is best-effort: no acknowledgement, no queueing when nobody listens.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

from smartmemo.utils.logger import get_logger

logger = get_logger()

MEMO_UPDATED_EVENT = "memo:updated"
MEMO_UPDATED_PAYLOAD = "refresh"

Listener = Callable[[str, str], None]


class EventSink(Protocol):
    """Anything that can deliver a named event with a string payload to the UI."""

    def emit(self, event: str, payload: str) -> None:
        ...


class NullEventSink:
    def emit(self, event: str, payload: str) -> None:
        return None


class LoggingEventSink:
    def emit(self, event: str, payload: str) -> None:
        logger.info("Event %s: %s", event, payload)


class CallbackEventSink:
    """Fans events out to subscribed callables, in subscription order."""

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; the returned callable removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def emit(self, event: str, payload: str) -> None:
        for listener in list(self._listeners):
            listener(event, payload)


def publish_memo_updated(sink: EventSink, payload: str = MEMO_UPDATED_PAYLOAD) -> Optional[Exception]:
    """
    Tell the UI that memos changed. Returns the sink's exception if it failed, else None.

    A failing sink never fails the mutation that triggered it.
    """
    logger.debug("Emitting %s event...", MEMO_UPDATED_EVENT)
    try:
        sink.emit(MEMO_UPDATED_EVENT, payload)
    except Exception as e:
        logger.warning("Failed to emit %s event: %s", MEMO_UPDATED_EVENT, e)
        return e
    return None
