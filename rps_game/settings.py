from decouple import config

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_seed(value):
    """Turn a raw RPS_SEED value into an int, or None when it is unset."""
    if value in (None, ""):
        return None
    return int(value)


# Logging level for the CLI; the round table always goes to stdout.
# Checked against LOG_LEVELS by the CLI, not here, so a bad value is a usage error.
LOG_LEVEL = config("RPS_LOG_LEVEL", default="WARNING").strip().upper()

# Seed for the computer's moves, kept raw until the CLI parses it.
# Unset means a fresh, unseeded session.
SEED = config("RPS_SEED", default="")
