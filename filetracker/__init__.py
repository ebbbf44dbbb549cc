"""Poll a directory and log files that are added, modified, resized or removed."""

__version__ = "0.1.0"
__all__ = ["cli", "tracker", "utils"]