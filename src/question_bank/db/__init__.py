"""Database configuration and utilities."""

from .session import SessionLocal, begin_write, build_engine, get_db

__all__ = ["get_db", "begin_write", "build_engine", "SessionLocal"]
