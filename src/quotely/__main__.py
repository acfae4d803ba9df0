"""Allow ``python -m quotely`` invocation."""
from __future__ import annotations

from quotely.cli.main import cli

if __name__ == "__main__":
    cli()
