"""Declarative base for the relational user backend."""

from sqlalchemy.orm import DeclarativeBase


class BaseSchema(DeclarativeBase):
    """Base class for all SQLAlchemy schemas; owns the shared metadata."""

    pass
