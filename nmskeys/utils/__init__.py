"""Utility modules for nmskeys.

- cli: error handling decorator for typer commands
- logging_utils: CLI and TUI logging setup
- output: shared rich console and JSON printing
"""
