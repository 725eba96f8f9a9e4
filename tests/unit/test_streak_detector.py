"""Unit tests for the streak detector"""
from datetime import datetime, timedelta, timezone

from streakrules.models.evaluation import EvaluationRecord
from streakrules.rules.streak_detector import consecutive_hits, streak_length

BASE = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_records(results, same_timestamp=False):
    return [
        EvaluationRecord(
            rule_id="r1",
            result=result,
            timestamp=BASE if same_timestamp else BASE + timedelta(seconds=i),
            sequence_id=i + 1,
        )
        for i, result in enumerate(results)
    ]


def test_single_record_is_streak_of_one():
    records = make_records([True])

    assert consecutive_hits(records, True) == records


def test_trailing_run_only():
    records = make_records([True, True, False, True, True])

    hits = consecutive_hits(records, True)

    assert [r.sequence_id for r in hits] == [4, 5]


def test_hits_returned_oldest_first():
    records = make_records([False, False, False])

    hits = consecutive_hits(list(reversed(records)), False)

    assert [r.sequence_id for r in hits] == [1, 2, 3]


def test_tied_timestamps_use_sequence_id():
    """With one timestamp for all, the order must still follow sequence ids."""
    records = make_records([True, False, False], same_timestamp=True)
    shuffled = [records[1], records[2], records[0]]

    hits = consecutive_hits(shuffled, False)

    assert [r.sequence_id for r in hits] == [2, 3]


def test_latest_mismatch_gives_empty_run():
    records = make_records([True, True])

    assert consecutive_hits(records, False) == []


def test_streak_length():
    records = make_records([False, True, True, True])

    assert streak_length(records, True) == 3
    assert streak_length([], True) == 0
