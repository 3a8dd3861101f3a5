"""Service module exports."""

from . import habits, tracker

__all__ = ["habits", "tracker"]
