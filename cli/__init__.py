"""Command-line entry points for running the functions locally."""
