import curses
import os
import sys

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

import config_paths
from app_state import AppState
from logging_setup import configure_logging, get_logger
from orchestrator import Orchestrator
from transaction_store import StoreError, TransactionStore

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"


USAGE = "fintrackr - terminal personal finance tracker\n\nUsage:\n  fintrackr [path]\n  fintrackr -v\n"

log = get_logger("fintrackr.main")


def _setup_logging(cfg):
    try:
        config_paths.ensure_config_dirs()
        configure_logging(cfg["LOG_LEVEL"], config_paths.LOG_PATH)
    except OSError:
        # no writable config dir: run without a log file
        configure_logging(cfg["LOG_LEVEL"], None)


def load_state(path, cfg):
    """Open the store and build the UI state. Raises StoreError."""
    store = TransactionStore(path)
    data = store.load()
    return AppState(store, data, blink_ms=cfg["CURSOR_BLINK_MS"])


def main(argv=None):
    args = sys.argv[1:] if argv is None else list(argv)

    if "-v" in args or "-V" in args:
        print(__version__)
        return 0

    if "-h" in args or len(args) > 1:
        print(USAGE)
        return 0 if "-h" in args else 2

    cfg = config_paths.load_config()
    _setup_logging(cfg)

    path = args[0] if args else cfg["DATA_PATH"]
    try:
        state = load_state(path, cfg)
    except StoreError as exc:
        log.error("load failed: %s", exc)
        print(f"Load failed: {exc}", file=sys.stderr)
        return 1

    def curses_main(stdscr):
        Orchestrator(stdscr, state, poll_interval_ms=cfg["POLL_INTERVAL_MS"]).run()

    curses.wrapper(curses_main)
    return 0


if __name__ == "__main__":
    sys.exit(main())
