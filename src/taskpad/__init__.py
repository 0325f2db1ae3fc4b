"""taskpad: a console task list with a persistent task state engine."""

__version__ = "0.1.0"
