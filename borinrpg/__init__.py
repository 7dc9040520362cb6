"""A small terminal role-playing game with a curses front end and an in-memory screen."""

__version__ = "0.1.0"