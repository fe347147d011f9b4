"""Basic arithmetic calculator with a single-screen Qt UI."""
__version__ = "1.0.0"
