from __future__ import annotations
from concurrent.futures import Future
import sys
import time

from connectfour.config import AI_THINKING_SPINNER, SPINNER_INTERVAL_SEC


def ai_thinking(future: Future, label: str = "AI is thinking") -> None:
    """
    Keep the terminal alive with a spinner until the background search is done.
    """
    if not AI_THINKING_SPINNER:
        future.exception()  # block until done without raising
        return

    frames = ["|", "/", "-", "\\"]
    i = 0
    while not future.done():
        sys.stdout.write(f"\r{label}... {frames[i % len(frames)]}")
        sys.stdout.flush()
        time.sleep(SPINNER_INTERVAL_SEC)
        i += 1
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
