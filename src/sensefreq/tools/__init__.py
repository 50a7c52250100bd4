"""Command-line entry points and opt-in debug helpers."""
