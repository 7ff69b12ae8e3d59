# profkit.py: ultra-light profiling helpers for the indexing and ranking pipeline
# `from irengine.profkit import timeit, tick, COUNTERS`.
# Toggle via env var: set PROFKIT=1 to enable; otherwise it's no-op with near-zero overhead.

import os
import sys
import time
from collections import defaultdict
from contextlib import contextmanager

ENABLED = os.getenv("PROFKIT", "0") == "1"
COUNTERS = defaultdict(float)  # str -> float (counts / milliseconds)


def tick(name: str, n: float = 1.0):
    if ENABLED:
        COUNTERS[name] += n


@contextmanager
def timeit(name: str):
    if not ENABLED:
        yield
        return
    t0 = time.perf_counter()
    try:
        yield
    finally:
        COUNTERS[name] += (time.perf_counter() - t0) * 1000.0  # ms


def report(file=None):
    file = file or sys.stderr
    if not ENABLED or not COUNTERS:
        return
    print("[profkit] counters:", file=file)
    for name in sorted(COUNTERS):
        print(f"  {name:<28} {COUNTERS[name]:,.2f}", file=file)
