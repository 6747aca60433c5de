"""Asset selection — pick the ordered images that go on screen.

Sequential mode keeps the provider's ranking. Random mode samples
without replacement from an injected random.Random, so a seeded source
always yields the same ordered subset.
"""

import random
from typing import Sequence

from .errors import InsufficientAssets
from .search import Asset
from .templates import SELECT_SEQUENTIAL, VALID_SELECTION_MODES


def select_assets(
    candidates: Sequence[Asset],
    count: int,
    mode: str = SELECT_SEQUENTIAL,
    rng: random.Random | None = None,
    query: str = "",
) -> list[Asset]:
    """Return exactly ``count`` assets from ``candidates``.

    Args:
        candidates: Search results in provider order. Not modified.
        count: Number of assets the template needs.
        mode: "sequential" or "random".
        rng: Random source for "random" mode. Required there; the
            module-level random functions are never used.
        query: Search text, reported in InsufficientAssets.

    Raises:
        InsufficientAssets: Fewer than ``count`` candidates.
        ValueError: Unknown mode, or random mode without ``rng``.
    """
    if mode not in VALID_SELECTION_MODES:
        raise ValueError(
            f"Unknown selection mode '{mode}'. Valid: {sorted(VALID_SELECTION_MODES)}"
        )
    if count > len(candidates):
        raise InsufficientAssets(query, count, len(candidates))

    if mode == SELECT_SEQUENTIAL:
        return list(candidates[:count])

    if rng is None:
        raise ValueError("Random selection requires an explicit random source")
    return rng.sample(list(candidates), count)
