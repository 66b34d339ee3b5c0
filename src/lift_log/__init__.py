"""lift-log: a manual strength-training log."""

__version__ = "0.1.0"
