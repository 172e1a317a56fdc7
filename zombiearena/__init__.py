"""A top-down wave survival shooter: game rules, actors and a pygame front end."""

__version__ = "0.1.0"