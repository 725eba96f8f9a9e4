"""
History Store - Bounded Evaluation History per Rule

Keeps the most recent evaluation results of each rule, ordered by
(timestamp, sequence_id). The sequence counter belongs to the store, so
independent stores never share hidden state.

Thread-safe: append, prune and snapshot run under one lock per rule.
Timestamps never go backward: a clock step back reuses the last one and
the sequence id orders the records.
"""

import itertools
import logging
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from streakrules.models.evaluation import EvaluationRecord
from streakrules.models.rule import Rule

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class HistoryStore:
    """
    In-memory evaluation history keyed by rule_id.

    Invariants:
    - at most rule.max_history_required records are retained per rule
    - sequence ids are strictly increasing across all rules of the store
    - history is always returned ascending by (timestamp, sequence_id)
    """

    def __init__(self, clock: Optional[Clock] = None):
        """
        Args:
            clock: Returns the current time (defaults to UTC now)
        """
        self._clock = clock or utc_now
        self._sequence = itertools.count(1)
        self._last_timestamp: Optional[datetime] = None
        self._records: Dict[str, List[EvaluationRecord]] = {}
        self._locks: Dict[str, threading.RLock] = {}
        self._guard = threading.Lock()

    @contextmanager
    def _locked(self, rule_id: str, create: bool = True) -> Iterator[Optional[threading.RLock]]:
        """
        Hold the lock of a rule.

        Yields None when create is False and the rule has no lock. A lock
        dropped by reset() while waiting on it is not used; the current
        one is taken instead.
        """
        while True:
            with self._guard:
                lock = self._locks.get(rule_id)
                if lock is None:
                    if not create:
                        break
                    lock = self._locks[rule_id] = threading.RLock()
            with lock:
                with self._guard:
                    current = self._locks.get(rule_id)
                if current is lock:
                    yield lock
                    return
        yield None

    def _next_record(self, rule: Rule, result: bool) -> EvaluationRecord:
        # timestamp and sequence id are taken together so both orders agree;
        # timestamps never go backward, even if the clock does
        with self._guard:
            timestamp = self._clock()
            if self._last_timestamp is not None and timestamp < self._last_timestamp:
                logger.debug(f"Clock moved back to {timestamp}, keeping {self._last_timestamp}")
                timestamp = self._last_timestamp
            self._last_timestamp = timestamp
            return EvaluationRecord(
                rule_id=rule.rule_id,
                result=result,
                timestamp=timestamp,
                sequence_id=next(self._sequence),
            )

    def record_and_snapshot(
        self,
        rule: Rule,
        result: bool,
    ) -> Tuple[EvaluationRecord, List[EvaluationRecord]]:
        """
        Append a result, prune, and read the history as one atomic step.

        Args:
            rule: Rule the result belongs to
            result: Evaluation outcome

        Returns:
            Tuple (new record, ascending history including it)
        """
        with self._locked(rule.rule_id):
            record = self._next_record(rule, result)
            with self._guard:
                records = self._records.setdefault(rule.rule_id, [])
            records.append(record)
            records.sort(key=lambda r: r.sort_key)

            expired = len(records) - rule.max_history_required
            if expired > 0:
                del records[:expired]
                logger.debug(
                    f"Pruned {expired} record(s) for rule {rule.rule_id} "
                    f"(bound={rule.max_history_required})"
                )

            return record, list(records)

    def record(self, rule: Rule, result: bool) -> EvaluationRecord:
        """Append a result for a rule and prune its history."""
        record, _ = self.record_and_snapshot(rule, result)
        return record

    def history(self, rule: Rule) -> List[EvaluationRecord]:
        """Return a point-in-time copy of a rule's history, oldest first."""
        with self._locked(rule.rule_id, create=False) as lock:
            if lock is None:
                return []
            return list(self._records.get(rule.rule_id, []))

    def _drop(self, rule_id: str) -> None:
        with self._locked(rule_id, create=False) as lock:
            if lock is None:
                return
            with self._guard:
                self._records.pop(rule_id, None)
                self._locks.pop(rule_id, None)

    def reset(self, rule: Rule) -> None:
        """Drop all retained results for a rule."""
        self._drop(rule.rule_id)

    def clear(self) -> None:
        """Drop all retained results. Sequence ids keep increasing."""
        with self._guard:
            rule_ids = list(self._locks)
        for rule_id in rule_ids:
            self._drop(rule_id)

    def lock_count(self) -> int:
        """Number of per-rule locks currently held by the store."""
        with self._guard:
            return len(self._locks)

    def __len__(self) -> int:
        with self._guard:
            return len(self._records)
