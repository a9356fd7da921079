"""
Outcomes of a package fetch.
"""

from dataclasses import dataclass
from typing import Union

from ..errors import RetrievalError
from .package import PackageInfo


@dataclass(frozen=True)
class FetchSuccess:
    """The package was retrieved and decoded."""
    info: PackageInfo


@dataclass(frozen=True)
class FetchFailure:
    """The endpoint answered with something other than 200."""
    error: RetrievalError


FetchResult = Union[FetchSuccess, FetchFailure]
