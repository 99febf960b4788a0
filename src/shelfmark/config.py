"""Runtime settings for SHELFMARK.

Settings come from the environment:

| Variable             | Meaning                                        |
|----------------------|------------------------------------------------|
| `SHELFMARK_DB_URL`   | database the author commands and `db` connect to |
| `SHELFMARK_LOG_PATH` | flight-recorder file (default: per-user log dir) |

The Alembic configuration is built in code so migrations run from an
installed package without an ``alembic.ini``.
"""

import os
import sys
from importlib.resources import files
from pathlib import Path
from typing import TextIO

from alembic.config import Config
from platformdirs import user_log_dir

APP_NAME = "shelfmark"

DB_URL_ENV_VAR = "SHELFMARK_DB_URL"
LOG_PATH_ENV_VAR = "SHELFMARK_LOG_PATH"
LOG_FILE_NAME = "latest.log"

MIGRATIONS_PACKAGE = "shelfmark.adapters.db.alembic"
ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when no database URL is configured."""

    def __init__(self) -> None:
        super().__init__(f"{DB_URL_ENV_VAR} is not set")


def get_db_url() -> str:
    """Return the database URL from `SHELFMARK_DB_URL`, without surrounding blanks.

    Raises:
        DatabaseUrlNotSetError: If the variable is unset, empty or only blanks.
    """
    if not (url := os.environ.get(DB_URL_ENV_VAR, "").strip()):
        raise DatabaseUrlNotSetError
    return url


def default_log_path() -> Path:
    """Flight-recorder file inside the per-user log directory, which is created."""
    return Path(user_log_dir(APP_NAME, appauthor=False, ensure_exists=True)) / LOG_FILE_NAME


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Alembic `Config` for the migrations shipped in `MIGRATIONS_PACKAGE`.

    Args:
        db_url: Database URL; may be omitted for commands that only read
            the scripts (``heads``, ``history``).
        stdout: Stream Alembic writes its status lines to.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(ALEMBIC_SCRIPT_LOCATION_KEY, str(files(MIGRATIONS_PACKAGE)))
    return cfg
