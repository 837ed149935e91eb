import os
from dotenv import load_dotenv

load_dotenv()


def _get_int(name: str, default: int, minimum: int) -> int:
    raw = os.getenv(name, "")

    if raw == "":
        return default

    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from e

    if value < minimum:
        raise ValueError(f"{name} must be at least {minimum}, got {value}")

    return value


def get_worker_count() -> int:
    return _get_int("REVERSI_TREE_WORKERS", os.cpu_count() or 1, 1)


def get_seed_depth() -> int:
    return _get_int("REVERSI_TREE_SEED_DEPTH", 6, 1)


def get_channel_size() -> int:
    # Zero means the result queue is unbounded.
    return _get_int("REVERSI_TREE_CHANNEL_SIZE", 100_000, 0)


def get_report_interval() -> int:
    return _get_int("REVERSI_TREE_REPORT_INTERVAL", 1_000_000, 1)


def get_random_seed() -> str:
    return os.getenv("REVERSI_TREE_RANDOM_SEED", "reversi")


def get_verbose() -> bool:
    return os.getenv("REVERSI_TREE_VERBOSE", "0") != "0"
