"""Scheduling and review of outbound email and chat notifications."""

__version__ = "0.1.0"
