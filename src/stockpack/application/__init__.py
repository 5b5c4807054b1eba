"""Application layer - job configuration and packing commands."""

from .commands import PackJobCommand

__all__ = ["PackJobCommand"]
