"""Reading and writing ZigBee Cluster Library frames, headers and pressure measurements."""

__version__ = "0.1.0a2"
__all__ = ["frame", "header", "parse", "pressure"]