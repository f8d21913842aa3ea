from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s | %(name)s | %(message)s"

# File handler attached by the last DEBUG setup; replaced on every call
_debug_handler: logging.FileHandler | None = None


def _drop_debug_handler() -> None:
    global _debug_handler
    if _debug_handler is None:
        return
    logging.getLogger().removeHandler(_debug_handler)
    _debug_handler.close()
    _debug_handler = None


def setup_logging(level: str = "INFO", report_dir: str | Path = "Report") -> Path | None:
    """Configure root logging; at DEBUG also write a timestamped log file.

    Returns the debug log path when one was created.
    """
    global _debug_handler
    lvl = getattr(logging, str(level).upper(), logging.INFO)
    logging.basicConfig(level=lvl, format=LOG_FORMAT)
    logging.getLogger().setLevel(lvl)
    _drop_debug_handler()

    if str(level).upper() != "DEBUG":
        return None
    try:
        out_dir = Path(report_dir)
        out_dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_path = out_dir / f"rowgen_debug_{ts}.txt"
        fh = logging.FileHandler(log_path, mode="w", encoding="utf-8")
    except OSError as exc:
        # Continue with console logging only
        logging.getLogger(__name__).warning("Could not open debug log file: %s", exc)
        return None
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.getLogger().addHandler(fh)
    _debug_handler = fh
    logging.getLogger(__name__).info("Writing DEBUG logs to %s", log_path)
    return log_path


__all__ = ["setup_logging", "LOG_FORMAT"]
