"""Helpers around the engine: logging/metrics, JSON config, word lists."""
