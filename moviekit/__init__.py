"""Support utilities for a movie player front-end: file reading, process reaping, settings, logging."""

__version__ = "0.1.0"