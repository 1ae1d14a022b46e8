"""Hash-chained audit trail of one recovery run.

Each entry carries the SHA-256 of the previous entry so that an edited or
reordered trail is detectable.  Entries are numbered by their position in
the run rather than stamped with wall-clock time, so the same input always
yields the same trail.  The trail lives in memory and is only ever emitted
alongside the report.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Any, Dict, List

GENESIS_HASH = "0" * 64


@dataclass
class AuditEntry:
    seq: int
    event: str
    data: Dict[str, Any]
    prev_hash: str
    entry_hash: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "seq": self.seq,
            "event": self.event,
            "data": self.data,
            "prev_hash": self.prev_hash,
            "entry_hash": self.entry_hash,
        }


def _entry_hash(seq: int, event: str, data: Dict[str, Any], prev_hash: str) -> str:
    payload = json.dumps(
        {"seq": seq, "event": event, "data": data, "prev_hash": prev_hash},
        sort_keys=True,
        separators=(",", ":"),
    )
    return hashlib.sha256(payload.encode()).hexdigest()


class AuditLog:
    """Append-only hash-chained log of recovery events."""

    def __init__(self) -> None:
        self._entries: List[AuditEntry] = []
        self._prev_hash: str = GENESIS_HASH

    def append(self, event: str, data: Dict[str, Any]) -> AuditEntry:
        seq = len(self._entries)
        entry = AuditEntry(
            seq=seq,
            event=event,
            data=data,
            prev_hash=self._prev_hash,
            entry_hash=_entry_hash(seq, event, data, self._prev_hash),
        )
        self._entries.append(entry)
        self._prev_hash = entry.entry_hash
        return entry

    def entries(self) -> List[Dict[str, Any]]:
        return [e.to_dict() for e in self._entries]

    def verify_chain(self) -> bool:
        """Verify the integrity of the full chain."""
        return verify_entries(self.entries())


def verify_entries(entries: List[Dict[str, Any]]) -> bool:
    """Verify a serialised trail, e.g. one read back from a JSON report."""
    prev = GENESIS_HASH
    for seq, e in enumerate(entries):
        if e["seq"] != seq or e["prev_hash"] != prev:
            return False
        expected = _entry_hash(e["seq"], e["event"], e["data"], e["prev_hash"])
        if e["entry_hash"] != expected:
            return False
        prev = e["entry_hash"]
    return True
