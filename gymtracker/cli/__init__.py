from gymtracker.cli.main import app, main

__all__ = ["app", "main"]
