"""Lightweight logging utilities for games and debugging."""

import datetime


def log_event(message):
    timestamp = datetime.datetime.now().strftime("%H:%M:%S")
    print(f"[{timestamp}] {message}")


def silent(message):
    pass


def make_logger(enabled=True):
    return log_event if enabled else silent
