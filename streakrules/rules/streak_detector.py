"""
Streak Detector - Consecutive Identical Results

Given a rule's history (which already contains the latest result),
find the trailing run of records matching that result.

The latest record always matches itself, so a streak is at least 1.
Because history is bounded, a streak never exceeds the rule's
max_history_required; longer real streaks are capped.
"""

from typing import List, Sequence

from streakrules.models.evaluation import EvaluationRecord


def consecutive_hits(
    history: Sequence[EvaluationRecord],
    result: bool,
) -> List[EvaluationRecord]:
    """
    Return the trailing run of records whose result equals `result`.

    Args:
        history: Records of one rule, in any order
        result: The result just recorded

    Returns:
        The run, ascending by (timestamp, sequence_id)
    """
    newest_first = sorted(history, key=lambda r: r.sort_key, reverse=True)

    hits: List[EvaluationRecord] = []
    for record in newest_first:
        if record.result != result:
            break
        hits.append(record)

    hits.reverse()
    return hits


def streak_length(history: Sequence[EvaluationRecord], result: bool) -> int:
    """Length of the trailing run matching `result`."""
    return len(consecutive_hits(history, result))
