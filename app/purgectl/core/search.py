"""Multi-source search orchestration.

Runs every package searcher in a fixed order (Flatpak, Snap, APT)
and hands each result to an optional callback as soon as it is ready,
so output can be displayed incrementally.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from purgectl.core.config import Settings
from purgectl.models.package import MatchMode
from purgectl.models.search_result import SearchResult
from purgectl.searchers.apt import AptSearcher
from purgectl.searchers.base import Searcher
from purgectl.searchers.flatpak import FlatpakSearcher
from purgectl.searchers.snap import SnapSearcher

logger = logging.getLogger(__name__)


def get_searchers(settings: Settings | None = None) -> list[Searcher]:
    """Get searcher instances in search order.

    Args:
        settings: Runtime settings. Defaults are used if None.

    Returns:
        Flatpak, Snap and APT searchers.
    """
    settings = settings or Settings()
    return [
        FlatpakSearcher(timeout=settings.query_timeout),
        SnapSearcher(timeout=settings.query_timeout),
        AptSearcher(
            timeout=settings.query_timeout,
            refresh_cache=settings.refresh_apt_cache,
        ),
    ]


def search_all(
    term: str,
    mode: MatchMode,
    searchers: list[Searcher],
    on_start: Callable[[Searcher], None] | None = None,
    on_result: Callable[[Searcher, SearchResult], None] | None = None,
) -> list[SearchResult]:
    """Search every source sequentially.

    Args:
        term: Search term.
        mode: Match mode applied by every searcher.
        searchers: Searchers in the order they should run.
        on_start: Called before a searcher runs.
        on_result: Called with each searcher's result.

    Returns:
        One SearchResult per searcher, in order.
    """
    results: list[SearchResult] = []

    for searcher in searchers:
        if on_start is not None:
            on_start(searcher)

        result = searcher.search(term, mode)
        logger.debug(
            "%s search for %r (%s): %s, %d package(s)",
            searcher.source.value,
            term,
            mode.value,
            result.status.value,
            result.count,
        )
        results.append(result)

        if on_result is not None:
            on_result(searcher, result)

    return results
