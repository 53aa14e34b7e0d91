"""Encoding and decoding of HSES robot controller messages, variables, status, positions and alarms."""

__version__ = "0.0.1"