"""Entry point for the Foodex counter app."""

from __future__ import annotations

import logging
from pathlib import Path

from foodex.config import DEBUG_LOG_PATH, LOG_LEVEL
from foodex.pos_app import FoodexPosApp


def configure_logging(log_path: str = DEBUG_LOG_PATH, level: str = LOG_LEVEL) -> None:
    """Send logs to a file; the terminal belongs to the Textual UI."""
    path = Path(log_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    logging.basicConfig(
        filename=path,
        level=getattr(logging, level, logging.DEBUG),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


def main() -> None:
    """Run the Textual application."""
    configure_logging()
    FoodexPosApp().run()


if __name__ == "__main__":
    main()
