"""Record storage for TermMatch.

Provides the ordered in-memory record store that filter predicates run over,
and loading of records from JSON/YAML files.
"""

from __future__ import annotations

from TermMatch.storage.records import RecordLoadError, RecordStore, load_records

__all__ = [
    "RecordLoadError",
    "RecordStore",
    "load_records",
]
