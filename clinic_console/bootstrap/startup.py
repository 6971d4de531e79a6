from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import inspect

from clinic_console.infrastructure.db.engine import get_engine

MIGRATIONS_DIR = Path(__file__).resolve().parents[1] / "infrastructure" / "db" / "migrations"
REQUIRED_TABLES = {"patients", "staff", "medical_records", "invoices", "shift_assignments"}

logger = logging.getLogger(__name__)


def _report(message: str) -> None:
    print(f"clinic-console: {message}", file=sys.stderr)


def check_startup_prerequisites(db_file: Path) -> bool:
    if not MIGRATIONS_DIR.exists():
        _report("migrations directory is missing; check the installation.")
        return False
    try:
        test_file = db_file.parent / ".write_test"
        test_file.write_text("ok", encoding="utf-8")
        test_file.unlink(missing_ok=True)
    except OSError:
        logger.exception("Database directory is not writable: %s", db_file.parent)
        _report(f"no write access to the database directory: {db_file.parent}")
        return False
    return True


def build_alembic_config(database_url: str) -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.attributes["configure_logger"] = False
    return cfg


def run_migrations(database_url: str, log_dir: Path, db_file: Path) -> bool:
    try:
        command.upgrade(build_alembic_config(database_url), "head")
        return True
    except Exception:  # noqa: BLE001
        logger.exception("Failed to run migrations")
        error_path = log_dir / "migration_error.log"
        try:
            error_path.parent.mkdir(parents=True, exist_ok=True)
            with error_path.open("a", encoding="utf-8") as handle:
                handle.write("\n--- Migration error ---\n")
                handle.write(f"DB: {db_file}\n")
                handle.write(f"Migrations: {MIGRATIONS_DIR}\n")
                handle.write(traceback.format_exc())
        except OSError:
            logger.exception("Failed to write migration error log")
        _report(f"could not apply database migrations. Details: {error_path}")
        return False


def ensure_schema_compatibility(database_url: str) -> bool:
    try:
        tables = set(inspect(get_engine(database_url)).get_table_names())
    except Exception:  # noqa: BLE001
        logger.exception("Failed to verify database schema")
        _report("could not verify the database schema.")
        return False
    missing = REQUIRED_TABLES - tables
    if missing:
        logger.error("DB schema is missing tables: %s", ", ".join(sorted(missing)))
        _report("the database is outdated and cannot be upgraded automatically.")
        return False
    return True


def initialize_database(*, db_file: Path, database_url: str, log_dir: Path) -> bool:
    if not check_startup_prerequisites(db_file):
        return False
    if not run_migrations(database_url, log_dir, db_file):
        return False
    return ensure_schema_compatibility(database_url)
