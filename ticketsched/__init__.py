"""Cooperative task scheduling with round-robin and lottery ticket policies."""

__version__ = "0.1.0"
__all__ = ["scheduler", "demo", "examples"]