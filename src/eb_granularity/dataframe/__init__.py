"""
Pandas / DataFrame entrypoints for creating and validating granularities.
"""

from .create import create_granularity
from .validate import validate_granularity

__all__ = [
    "create_granularity",
    "validate_granularity",
]
