"""Entry point: python -m moltagent [setup]

- No args / "setup": validate credentials and seed ./memory/
"""

from __future__ import annotations

import asyncio
import logging
import sys

from moltagent.config import load_config
from moltagent.credentials import CREDENTIALS_EXAMPLE
from moltagent.errors import MissingCredentials, SetupError


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def _run_setup() -> int:
    """Run setup once. Returns the process exit code."""
    from moltagent.bootstrap import run_setup

    try:
        config = load_config()
        _setup_logging(config.log_level)
        asyncio.run(run_setup(config))
    except MissingCredentials as e:
        print(f"✗ {e}", file=sys.stderr)
        print(f"  Create it with: {CREDENTIALS_EXAMPLE}", file=sys.stderr)
        return 1
    except (SetupError, OSError) as e:
        print(f"✗ Setup failed: {e}", file=sys.stderr)
        return 1
    return 0


def main() -> None:
    cmd = sys.argv[1] if len(sys.argv) > 1 else "setup"

    if cmd == "setup":
        sys.exit(_run_setup())
    else:
        print("Usage: python -m moltagent [setup]")
        print("  setup  Validate API credentials and create memory/ files (default)")
        sys.exit(1)


if __name__ == "__main__":
    main()
