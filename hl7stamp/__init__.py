"""Parse, format and convert HL7v2 date, time and timestamp values."""

__version__ = "0.1.0"