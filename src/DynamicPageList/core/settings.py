from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class EngineSettings:
    """Site-wide limits consulted by individual handlers.

    Attributes:
        max_result_count: Upper bound for ``count``.
        allow_unlimited_results: Disable the ``count`` upper bound.
        allowed_namespaces: Namespace names ``namespace=`` may select; None allows all.
        article_label: Header of the page-link column generated by ``table``.
    """

    max_result_count: int = 500
    allow_unlimited_results: bool = False
    allowed_namespaces: Optional[tuple[str, ...]] = None
    article_label: str = "Article"
