"""Logging setup for the curvefit command line."""
import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

ROOT_LOGGER = "curvefit"
SUMMARY_LOGGER = f"{ROOT_LOGGER}.summary"

_FILE_FORMAT = "{asctime} {levelname:<7} {name} - {message}"
_SUMMARY_FORMAT = "{asctime} SUMMARY - {message}"
_CONSOLE_FORMAT = "{levelname:<7} {message}"


def _log_file_path(log_dir: str) -> Path:
    directory = Path(log_dir)
    directory.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return directory / f"{ROOT_LOGGER}_{stamp}.log"


def _dict_config(log_path: Path, level: str) -> dict:
    """File handler on the curvefit logger only; the root logger stays untouched."""
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "file": {"format": _FILE_FORMAT, "style": "{"},
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "formatter": "file",
                "filename": str(log_path),
                "encoding": "utf-8",
                "mode": "w",
                "level": "DEBUG",
            },
        },
        "loggers": {
            ROOT_LOGGER: {
                "level": level.upper(),
                "handlers": ["file"],
                "propagate": False,
            },
        },
    }


def _reset_summary_logger(log_path: Path) -> logging.Logger:
    summary_logger = logging.getLogger(SUMMARY_LOGGER)
    summary_logger.setLevel(logging.INFO)
    summary_logger.propagate = False
    for handler in list(summary_logger.handlers):
        summary_logger.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_path, encoding="utf-8", mode="a")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(_SUMMARY_FORMAT, style="{"))
    summary_logger.addHandler(file_handler)
    return summary_logger


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT, style="{"))
    return handler


def setup_logging(
    log_dir: str = "./logs",
    console: bool = True,
    level: str = "INFO",
    quiet_console: bool = False,
    console_level: Optional[str] = None,
) -> Tuple[logging.Logger, logging.Logger]:
    """
    Route the ``curvefit`` logger tree to a timestamped file in ``log_dir``.

    Everything from DEBUG up reaches the file once ``level`` lets it through.
    The ``curvefit.summary`` logger writes its end-of-run lines to the same
    file. With ``console`` set, both loggers also print to stderr at
    ``console_level`` (default ``level``). ``quiet_console`` narrows the
    console to errors on the summary logger.

    Returns:
        (logger, summary_logger)
    """
    log_path = _log_file_path(log_dir)
    logging.config.dictConfig(_dict_config(log_path, level))
    logging.captureWarnings(True)

    logger = logging.getLogger(ROOT_LOGGER)
    summary_logger = _reset_summary_logger(log_path)

    if console and quiet_console:
        summary_logger.addHandler(_console_handler(logging.ERROR))
    elif console:
        handler = _console_handler(getattr(logging, (console_level or level).upper()))
        logger.addHandler(handler)
        summary_logger.addHandler(handler)

    logger.info("Logging initialised. File: %s", log_path)
    return logger, summary_logger
