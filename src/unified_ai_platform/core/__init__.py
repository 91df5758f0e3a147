"""Cross-cutting errors and logging helpers."""
