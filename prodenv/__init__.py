"""Materialize a production secrets env file from a template."""

__version__ = "1.0.0"
