"""Suggestion ranking over cached workflow paths."""

from typing import Iterable

from jiraflow.domain.models import PathKey, PathSuggestion, WorkflowPath

DEFAULT_SUGGESTION_LIMIT = 3


def rank_suggestions(
    entries: Iterable[tuple[str, WorkflowPath]],
    issue_type: str,
    from_state: str,
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> list[PathSuggestion]:
    """
    Rank cached destinations reachable from a state by past usage.

    Args:
        entries: (serialized key, path) pairs, in cache order
        issue_type: Issue type the suggestions are for
        from_state: State the issue is currently in
        limit: Maximum number of suggestions

    Returns:
        Suggestions ordered by usage count, most used first. Ties keep
        cache order.
    """
    if limit <= 0:
        return []

    prefix = PathKey.prefix(issue_type, from_state)
    relevant = [(key, path) for key, path in entries if key.startswith(prefix)]
    relevant.sort(key=lambda item: item[1].usage_count, reverse=True)

    return [
        PathSuggestion(
            to_state=key[len(prefix) :],
            step_count=len(path.steps),
            usage_count=path.usage_count,
        )
        for key, path in relevant[:limit]
    ]
