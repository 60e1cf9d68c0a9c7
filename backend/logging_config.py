import json
import logging
import logging.handlers
import os
from datetime import datetime

LOG_FILE = "quiz.jsonl"
CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JsonLineFormatter(logging.Formatter):
    """One JSON object per record, for the log file."""

    def format(self, record):
        entry = {
            "time": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False)


def setup_logging(level="INFO", log_dir=None):
    root = logging.getLogger()
    root.setLevel(level)
    # uvicorn --reload re-imports main
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    root.addHandler(console)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            os.path.join(log_dir, LOG_FILE), maxBytes=1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(JsonLineFormatter())
        root.addHandler(file_handler)

    return root
