"""Tailforge - utility-first CSS generation from theme tokens and content scans."""

__version__ = "0.1.0"
