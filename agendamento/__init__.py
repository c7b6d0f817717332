"""Scheduling service backend: models, migrations, database config, HTTP routes and server command."""

__version__ = "0.1.0"
__all__ = ["config", "main", "migrations", "models", "routes"]