"""Packet format, sessions, status decoding and RC4 helper for a fiscal printer spooler."""

__version__ = "4.1.0b0"