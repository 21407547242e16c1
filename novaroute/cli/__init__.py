"""CLI module for novaroute."""
