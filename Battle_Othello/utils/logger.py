"""Timestamped diagnostic output for games and the pygame view."""

import datetime


def log_event(message, source=None):
    """Print `[HH:MM:SS] message`, or `[HH:MM:SS] source: message` when tagged."""
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    prefix = f"[{timestamp}] {source}: " if source else f"[{timestamp}] "
    print(f"{prefix}{message}", flush=True)


def tagged(source):
    """Return a one-argument logger that tags every line with `source`."""
    return lambda message: log_event(message, source=source)
