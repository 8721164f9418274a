"""Command-line front end for cardkit."""

from .main import app, main

__all__ = ["app", "main"]
