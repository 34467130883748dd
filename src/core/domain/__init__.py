"""
Domain models and value objects.

Contains the Rational value type (canonical fraction).
"""

from src.core.domain.rational import Rational

__all__ = [
    "Rational",
]
