"""
Models for Dart package metadata and fetch outcomes.
"""

from .package import PackageInfo
from .result import FetchFailure, FetchResult, FetchSuccess

__all__ = [
    'PackageInfo',
    'FetchSuccess',
    'FetchFailure',
    'FetchResult'
]
