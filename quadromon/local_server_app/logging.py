import logging
import threading
from collections import deque
from typing import Deque, Dict, List, Optional


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
            "details": redact(getattr(record, "details", {})),
        }
        with self._lock:
            self._events.append(event)

    def get_events(self) -> List[Dict]:
        with self._lock:
            return list(self._events)

    def resize(self, max_entries: int) -> None:
        with self._lock:
            self.max_entries = max_entries
            self._events = deque(self._events, maxlen=max_entries)


def create_logger(name: str, ring_size: int) -> logging.Logger:
    """Attach a ring buffer to the named logger, or resize the one already attached."""
    logger = logging.getLogger(name)
    existing = ring_buffer(logger)
    if existing is not None:
        if existing.max_entries != ring_size:
            existing.resize(ring_size)
        return logger
    logger.setLevel(logging.INFO)
    handler = RingBufferHandler(max_entries=ring_size)
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def ring_buffer(logger: logging.Logger) -> Optional[RingBufferHandler]:
    for handler in logger.handlers:
        if isinstance(handler, RingBufferHandler):
            return handler
    return None


def redact(details: Optional[dict]) -> dict:
    if not details:
        return {}
    # transport identifiers are HID device paths, which carry the USB serial
    redacted_keys = {"serial", "device_path", "identifier"}
    secrets = [str(details[key]) for key in redacted_keys if details.get(key)]
    cleaned = {}
    for key, value in details.items():
        if key in redacted_keys:
            cleaned[key] = "***"
        elif isinstance(value, str):
            for secret in secrets:
                value = value.replace(secret, "***")
            cleaned[key] = value
        else:
            cleaned[key] = value
    return cleaned
