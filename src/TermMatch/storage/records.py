"""In-memory record store and record file loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Callable, Iterable, Iterator, Mapping, Sequence

import yaml

from TermMatch.core.models import Record
from TermMatch.utils.log import log


class RecordLoadError(RuntimeError):
    """Raised when a record file cannot be read or has the wrong shape."""


class RecordStore:
    """Ordered collection of records that can be narrowed by a predicate.

    Records are kept as given and never mutated; the store only decides
    which of them are visible.
    """

    def __init__(self, records: Iterable[Record] = ()) -> None:
        self._records: tuple[Record, ...] = tuple(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    @property
    def records(self) -> tuple[Record, ...]:
        return self._records

    def filter(self, predicate: Callable[[Record], bool] | None) -> list[Record]:
        """Return the records accepted by ``predicate``, in store order.

        A None predicate means "no filter" and returns every record.
        """
        if predicate is None:
            return list(self._records)
        return [record for record in self._records if predicate(record)]

    def count(self, predicate: Callable[[Record], bool] | None = None) -> int:
        """Return how many records ``predicate`` accepts."""
        if predicate is None:
            return len(self._records)
        return sum(1 for record in self._records if predicate(record))


def load_records(path: str | Path) -> list[dict[str, Any]]:
    """Load records from a JSON or YAML file.

    The file must hold a list of objects. ``.json`` files are parsed as JSON,
    everything else as YAML.

    Args:
        path: Record file path.

    Returns:
        Records as plain dicts, in file order.

    Raises:
        RecordLoadError: If the file cannot be read or parsed, or is not a
            list of objects.
    """
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RecordLoadError(f"Failed to read records: {file_path}") from exc

    try:
        data = json.loads(text) if file_path.suffix.lower() == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise RecordLoadError(f"Failed to parse records: {file_path}") from exc

    records = _expect_record_list(data, file_path)
    log.info("Loaded %d records from %s", len(records), file_path)
    return records


def _expect_record_list(data: Any, file_path: Path) -> list[dict[str, Any]]:
    """Validate parsed file content as a list of mappings."""
    if data is None:
        return []
    if not isinstance(data, Sequence) or isinstance(data, (str, bytes)):
        raise RecordLoadError(f"Record file must contain a list: {file_path}")
    out: list[dict[str, Any]] = []
    for idx, item in enumerate(data):
        if not isinstance(item, Mapping):
            raise RecordLoadError(f"Record [{idx}] in {file_path} must be an object")
        out.append(dict(item))
    return out
