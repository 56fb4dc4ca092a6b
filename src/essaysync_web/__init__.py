"""Flask UI for side-by-side essay comparison."""
from __future__ import annotations
from .web import app, main

__all__ = ["app", "main"]
