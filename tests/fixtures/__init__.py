"""Shared pytest fixtures and helpers for the user registry tests."""

from .core import *  # noqa: F401,F403
from .services import *  # noqa: F401,F403
