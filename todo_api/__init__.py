"""Todo API: a minimal todo service on FastAPI."""

__version__ = "1.0.0"
