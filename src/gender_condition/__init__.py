"""Customer gender and title conditions for promotion rules."""

__version__ = "1.0.0"
