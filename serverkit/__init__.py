"""Building blocks for API servers: field selectors, error codes, passwords, tokens and utilities."""

__version__ = "0.1.0"