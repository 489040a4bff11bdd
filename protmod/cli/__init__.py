"""Command-line entry points for protmod."""
