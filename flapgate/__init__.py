"""Cat flap state detection from a 3-axis accelerometer."""

__version__ = "1.2.0"
