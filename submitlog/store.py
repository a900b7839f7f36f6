import logging
import threading
from datetime import datetime

logger = logging.getLogger(__name__)


class LogFile:
    """Append-only text file holding one submission per line."""

    def __init__(self, path, timestamps=True):
        self.path = path
        self.timestamps = timestamps
        self._lock = threading.Lock()

    def format_line(self, body, now=None):
        if not self.timestamps:
            return body + b"\n"
        now = now or datetime.now().astimezone()
        stamp = now.isoformat(timespec="seconds")
        return stamp.encode("ascii") + b" " + body + b"\n"

    def append(self, body, now=None):
        line = self.format_line(body, now)
        with self._lock:
            try:
                # unbuffered: one write call per line
                f = open(self.path, "ab", buffering=0)
            except OSError:
                logger.exception("open file error on %s", self.path)
                raise
            with f:
                try:
                    f.write(line)
                except OSError:
                    logger.exception("write error on %s", self.path)
                    raise
        return line

    def read(self):
        with open(self.path, "rb") as f:
            return f.read()
