"""Starter API: user management backend on FastAPI and SQLModel."""

__version__ = "0.1.0"
