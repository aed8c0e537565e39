"""checkmark - a terminal to-do list with persisted state and a completion chart."""

__version__ = "0.1.0"
