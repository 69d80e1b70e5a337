from pathlib import Path
from typing import Optional
import logging.config

# raise InconsistentSegmentNumbering when a pinned segment number breaks the sequence
strict_numbering = False

# what to do with tags no codec knows about: "preserve" or "reject"
unknown_tag_policy = "preserve"

UNKNOWN_TAG_POLICIES = ("preserve", "reject")


def dictConfig(dir: Optional[Path] = None):
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "stream": "ext://sys.stdout",
            "formatter": "simple",
        },
    }
    if dir is not None:
        handlers["file_debug"] = {
            "class": "logging.FileHandler",
            "level": "DEBUG",
            "filename": Path(dir) / "debug.log",
            "formatter": "simple",
        }
        handlers["file_info"] = {
            "class": "logging.FileHandler",
            "level": "INFO",
            "filename": Path(dir) / "info.log",
            "formatter": "simple",
        }
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "simple": {
                    "format": "%(asctime)s [%(levelname)s] [%(module)s.%(funcName)s: %(lineno)d] - %(message)s",
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                }
            },
            "handlers": handlers,
            "loggers": {
                "m3u8codec": {"level": "DEBUG", "handlers": list(handlers)},
            },
        }
    )
