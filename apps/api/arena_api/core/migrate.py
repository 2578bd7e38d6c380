"""
Programmatic Alembic runner.

Same revisions as `alembic upgrade head` from apps/api, without needing
alembic.ini (no fileConfig, so application logging is left untouched).
"""
from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config

# apps/api/arena_api/core/migrate.py -> apps/api = parents[2]
API_DIR = Path(__file__).resolve().parents[2]
MIGRATIONS_DIR = API_DIR / "migrations"


def alembic_config() -> Config:
    cfg = Config()
    cfg.set_main_option("script_location", str(MIGRATIONS_DIR))
    return cfg


def upgrade(revision: str = "head") -> None:
    command.upgrade(alembic_config(), revision)


def downgrade(revision: str = "base") -> None:
    command.downgrade(alembic_config(), revision)


def main(argv: Optional[list] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    action = args[0] if args else "upgrade"
    if action == "upgrade":
        upgrade(args[1] if len(args) > 1 else "head")
    elif action == "downgrade":
        downgrade(args[1] if len(args) > 1 else "base")
    else:
        print(f"unknown action: {action!r} (expected upgrade|downgrade)", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
