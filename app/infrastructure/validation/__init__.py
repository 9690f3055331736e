"""
Input validation package.
"""

from .validators import DataValidator

__all__ = [
    'DataValidator',
]
