"""A small message board as a Starlette application over a store you supply."""

__version__ = "0.1.0"