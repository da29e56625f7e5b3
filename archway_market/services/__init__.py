"""Service modules"""
from .session import LazySigner, Session

__all__ = ["LazySigner", "Session"]
