"""Package searchers for different package managers.

This module exports the searcher classes for finding packages by name.
"""

from purgectl.searchers.apt import AptSearcher
from purgectl.searchers.base import Candidate, Searcher
from purgectl.searchers.flatpak import FlatpakSearcher
from purgectl.searchers.snap import SnapSearcher

__all__ = ["AptSearcher", "Candidate", "FlatpakSearcher", "Searcher", "SnapSearcher"]
