"""
Domain layer for repouri.

Contains pure domain objects with no I/O or side effects:
- RepositoryReference: Which repository is being analyzed, plus metadata
- LocalPath / HostedRepo: The two locator variants a reference can hold
- RepoType: Discriminator between the two
"""

from .locator import RepoType, LocalPath, HostedRepo, Locator
from .reference import RepositoryReference

__all__ = [
    'RepositoryReference',
    'RepoType',
    'LocalPath',
    'HostedRepo',
    'Locator',
]
