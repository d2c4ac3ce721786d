"""CLI, settings, and logging helpers."""
