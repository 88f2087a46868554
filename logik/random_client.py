"""
- Seed for a new game's secret
By default the seed is the current time in nanoseconds. With
LOGIK_SEED_SOURCE=random_org we ask random.org for one integer instead; if
anything goes wrong (no internet, timeout, bad response), we fall back to the
time seed so the game still starts.
"""

import logging
import time

import requests

logger = logging.getLogger(__name__)

RANDOM_URL = "https://www.random.org/integers/"
SEED_MAX = 1_000_000_000  # random.org upper bound for a single integer

def time_seed() -> int:
    return time.time_ns()

def fetch_seed(source: str = "time") -> int:
    if source != "random_org":
        return time_seed()

    params = {
        "num": 1,
        "min": 0,
        "max": SEED_MAX,
        "col": 1,
        "base": 10,
        "format": "plain",
        "rnd": "new",
    }

    # keep network quick; if it takes too long, we will just fallback
    timeout_seconds = 3.0

    try:
        response = requests.get(RANDOM_URL, params=params, timeout=timeout_seconds)
        response.raise_for_status()

        # The body looks like: 123456789\n
        text = response.text.strip()
        seed = int(text)
        if seed < 0 or seed > SEED_MAX:
            raise ValueError(f"random.org number {seed} out of range 0..{SEED_MAX}.")
        return seed

    except (requests.RequestException, ValueError) as exc:
        logger.warning("random.org seed unavailable (%s); using time seed", exc)
        return time_seed()
