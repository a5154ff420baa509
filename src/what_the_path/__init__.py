"""Find the shell a user runs and the rc files it reads."""

__version__ = "0.1.0"
