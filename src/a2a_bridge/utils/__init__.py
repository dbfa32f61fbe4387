"""Logging and tracing helpers."""
