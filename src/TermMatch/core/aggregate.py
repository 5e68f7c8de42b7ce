from __future__ import annotations

from typing import Iterable

from TermMatch.core.models import MatchPolicy


def aggregate(results: Iterable[bool], policy: MatchPolicy) -> bool:
    """Combine per-term results into one accept/reject decision.

    No results at all means there is no constraint to fail, so the record is
    accepted under either policy. Lazy iterables stop at the first failure
    under AND and at the first success under OR.

    Args:
        results: Per-term pass/fail results for one record.
        policy: Aggregation policy.

    Returns:
        True when the record is accepted.
    """
    iterator = iter(results)
    sentinel = object()
    first = next(iterator, sentinel)
    if first is sentinel:
        return True
    if policy is MatchPolicy.AND:
        return bool(first) and all(iterator)
    if policy is MatchPolicy.OR:
        return bool(first) or any(iterator)
    raise ValueError(f"Unsupported match policy: {policy!r}")
