"""A JSON file holding one list of records."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.exceptions import StoreUnavailableError
from storefront.infrastructure.persistence.records import (
    Record,
    RecordKind,
    dump_record,
    parse_record,
)


class JsonCollection:

    def __init__(self, file_path: Path, kind: RecordKind) -> None:
        self._file_path = file_path
        self.kind = kind
        self._ensure_file()

    def load(self) -> list[Record]:
        try:
            raw_records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreUnavailableError(
                f"Cannot read {self.kind.value} from {self._file_path}: {exc}"
            ) from exc
        if not isinstance(raw_records, list):
            raise StoreUnavailableError(
                f"{self._file_path} does not hold a list of {self.kind.value}"
            )
        return [parse_record(self.kind, raw) for raw in raw_records]

    def persist(self, records: list[Record]) -> None:
        payload = [dump_record(record) for record in records]
        try:
            self._file_path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as exc:
            raise StoreUnavailableError(
                f"Cannot write {self.kind.value} to {self._file_path}: {exc}"
            ) from exc

    def upsert(self, record: Record) -> None:
        """Replace the record with the same id, otherwise append."""
        records = self.load()
        for i, existing in enumerate(records):
            if existing.id == record.id:
                records[i] = record
                break
        else:
            records.append(record)
        self.persist(records)

    def remove(self, record_id: str) -> None:
        records = self.load()
        kept = [r for r in records if r.id != record_id]
        if len(kept) != len(records):
            self.persist(kept)

    def _ensure_file(self) -> None:
        if self._file_path.exists():
            return
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StoreUnavailableError(
                f"Cannot create {self._file_path}: {exc}"
            ) from exc
