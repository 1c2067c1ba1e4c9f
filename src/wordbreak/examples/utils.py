"""Utility classes for examples and the CLI."""

from collections import defaultdict


class SimpleConsoleLogger:
    """Simple console logger for examples."""

    def info(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"INFO: {msg} {details}" if details else f"INFO: {msg}")

    def warn(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"WARN: {msg} {details}" if details else f"WARN: {msg}")

    def error(self, msg: str, **kv):
        details = " ".join(f"{k}={v}" for k, v in kv.items())
        print(f"ERROR: {msg} {details}" if details else f"ERROR: {msg}")


class InMemoryMeter:
    """Keeps counters and observations in memory."""

    def __init__(self):
        self.counters = defaultdict(int)
        self.observations = defaultdict(list)

    def inc(self, name: str, amount: int = 1, **tags: str):
        self.counters[name] += amount

    def observe(self, name: str, value: float, **tags: str):
        self.observations[name].append(value)
