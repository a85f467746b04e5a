"""ISS pass finder: upcoming International Space Station passes for the caller's location."""

__version__ = "1.0.0"
