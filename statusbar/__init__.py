"""Status monitor that collects system information into a single line."""

__version__ = "0.1.0"