"""StackIt: a question and answer forum backend."""

__version__ = "0.1.0"
