"""Command-line harness for the lemon.markets clients."""
