"""Command modules for the nmskeys CLI."""
