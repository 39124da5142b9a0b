"""Package entry point.

Preferred invocation is via the installed console script:

    csv-insight ...

For convenience we also support:

    python -m csv_insight ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m csv_insight`."""

    app()


if __name__ == "__main__":
    main()
