import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional

LOGGER_NAME = "loxlink"


class RingBufferHandler(logging.Handler):
    def __init__(self, max_entries: int = 200):
        super().__init__()
        self.max_entries = max_entries
        self._events: Deque[Dict] = deque(maxlen=max_entries)
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        event = {
            "event": record.getMessage(),
            "level": record.levelname,
            "logger": record.name,
            "ts": record.created,
            "details": getattr(record, "details", {}),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def clear(self) -> None:
        with self._lock:
            self._events.clear()


def create_logger(name: str = LOGGER_NAME, ring_size: int = 200, level: str = "WARNING") -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if any(isinstance(h, RingBufferHandler) for h in logger.handlers):
        return logger
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def hexdump(data: Optional[bytes], limit: int = 32) -> str:
    if not data:
        return ""
    excerpt = bytes(data[:limit]).hex()
    if len(data) > limit:
        return f"{excerpt}... ({len(data)} bytes)"
    return excerpt
