import sys
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from django.conf import settings


def running_tests() -> bool:
    return "test" in sys.argv or "pytest" in sys.modules


class LogDirFileHandler(TimedRotatingFileHandler):
    """File handler that writes under ``settings.LOG_DIR``.

    The file name is resolved at emit time so the test suite logs to
    ``tests.log`` instead of the application log.
    """

    def __init__(self, filename: str = "sidebars.log", **kwargs) -> None:
        self.log_name = filename
        kwargs.setdefault("when", "midnight")
        kwargs.setdefault("backupCount", 7)
        kwargs.setdefault("encoding", "utf-8")
        kwargs["delay"] = True
        super().__init__(filename, **kwargs)

    def _current_file(self) -> Path:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        if running_tests():
            return log_dir / "tests.log"
        return log_dir / self.log_name

    def emit(self, record: logging.LogRecord) -> None:
        current = str(self._current_file())
        if self.baseFilename != current:
            self.baseFilename = current
            if self.stream:
                self.stream.close()
            self.stream = self._open()
        super().emit(record)
