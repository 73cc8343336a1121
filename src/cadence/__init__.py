"""Cadence: cron schedule editing, preview and job settings."""

__version__ = "0.3.0"
