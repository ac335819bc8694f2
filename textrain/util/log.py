# textrain/util/log.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..errors import ConfigError

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def configure_logging(log_file: Optional[Path], verbose: bool = False) -> logging.Logger:
    """
    Route the package's log records to `log_file`.

    The animation owns the whole terminal, so nothing is ever logged to the
    console; without a log file the records are dropped. A log file that
    cannot be created raises `ConfigError`.
    """
    handler: logging.Handler
    if log_file is None:
        handler = logging.NullHandler()
    else:
        log_file = Path(log_file).expanduser()
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"cannot open log file {log_file}: {exc}") from exc
        handler.setFormatter(logging.Formatter(LOG_FORMAT))

    pkg_logger = logging.getLogger("textrain")
    for old in list(pkg_logger.handlers):
        pkg_logger.removeHandler(old)
        old.close()

    pkg_logger.addHandler(handler)
    if log_file is not None:
        pkg_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        pkg_logger.propagate = False
    return pkg_logger
