"""Input clients for lift-log."""
