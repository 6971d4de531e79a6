from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from clinic_console.bootstrap.startup import initialize_database
from clinic_console.config import DB_FILE, LOG_DIR, settings
from clinic_console.container import build_container
from clinic_console.ui.tui import run_tui


def _setup_logging() -> Path:
    log_path = LOG_DIR / "app.log"
    handler = RotatingFileHandler(log_path, maxBytes=2_000_000, backupCount=3, encoding="utf-8")
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO)
    root_logger.addHandler(handler)
    return log_path


def _install_exception_hook(log_path: Path) -> None:
    def _handle_exception(exc_type, exc, tb) -> None:
        if issubclass(exc_type, KeyboardInterrupt):
            sys.__excepthook__(exc_type, exc, tb)
            return
        logging.getLogger(__name__).error("Unhandled exception", exc_info=(exc_type, exc, tb))
        print(f"clinic-console: unexpected error. Report: {log_path}", file=sys.stderr)
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _handle_exception


def main() -> int:
    log_path = _setup_logging()
    _install_exception_hook(log_path)
    logging.getLogger(__name__).info("Starting clinic-console, database %s", DB_FILE)
    if not initialize_database(
        db_file=DB_FILE,
        database_url=settings.database_url,
        log_dir=LOG_DIR,
    ):
        return 1
    container = build_container()
    run_tui(container)
    logging.getLogger(__name__).info("clinic-console stopped")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
