"""run-spine command line interface."""

from runspine.cli.app import app

__all__ = ["app"]
