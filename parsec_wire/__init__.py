"""Requests, responses and the version 1.0 wire header of the Parsec wire protocol."""

__version__ = "0.29.1"

__all__ = ["bodies", "headers", "ids", "request", "response", "status", "wire_header"]