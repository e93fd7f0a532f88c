"""
Programmatic Alembic runner for the gallery schema.

No alembic.ini is needed; the script location is this package's
`migrations` directory and the URL comes from src.db.config.

Usage examples:
    python -m src.db.run_migrations upgrade head
    python -m src.db.run_migrations downgrade -1
    python -m src.db.run_migrations current
"""

import sys
from pathlib import Path
from typing import Callable, Dict, List

from alembic import command
from alembic.config import Config

from src.db.config import get_settings


def build_config() -> Config:
    """Alembic Config pointing at the bundled migrations."""
    cfg = Config()
    cfg.set_main_option("script_location", str(Path(__file__).resolve().parent / "migrations"))
    # env.py uses the async URL when online; this one serves offline mode.
    cfg.set_main_option("sqlalchemy.url", get_settings().sync_database_url)
    return cfg


_COMMANDS: Dict[str, Callable[[Config, List[str]], None]] = {
    "upgrade": lambda cfg, rest: command.upgrade(cfg, *(rest or ["head"])),
    "downgrade": lambda cfg, rest: command.downgrade(cfg, *(rest or ["-1"])),
    "current": lambda cfg, rest: command.current(cfg, *rest),
    "history": lambda cfg, rest: command.history(cfg, *rest),
    "heads": lambda cfg, rest: command.heads(cfg, *rest),
    "stamp": lambda cfg, rest: command.stamp(cfg, *(rest or ["head"])),
}


# PUBLIC_INTERFACE
def main(argv: List[str] | None = None) -> None:
    """Run an Alembic command, e.g. main(["upgrade", "head"])."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("No Alembic arguments provided. Example: upgrade head")
        sys.exit(1)

    cmd, rest = args[0], args[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        print(f"Unsupported Alembic command: {cmd} (supported: {', '.join(sorted(_COMMANDS))})")
        sys.exit(2)
    handler(build_config(), rest)


if __name__ == "__main__":
    main()
