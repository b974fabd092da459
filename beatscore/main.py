"""Print the contents of a score database."""

import logging
import sys
from pathlib import Path

from .config.loader import load_config
from .db import ScoreStore
from .errors import InitializationFailure


def main():
    """Dump every stored score, oldest first."""
    config = load_config(Path.cwd())
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # Database path from command line, else from config
    store = ScoreStore.from_config(config)
    if len(sys.argv) > 1:
        store = ScoreStore(Path(sys.argv[1]).resolve(), store.reporter)

    try:
        with store:
            for record in store.all_scores():
                print(f"{record} | Grade: {record.grade().value}")
    except InitializationFailure:
        # Already reported as fatal
        sys.exit(1)


if __name__ == "__main__":
    main()
