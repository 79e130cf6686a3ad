"""
Registry state persistence.

The registry state is one JSON document plus an append-only JSON Lines file
holding the events. Saves append only the events produced since the last
commit, then write the document through a temporary file and an atomic
replace, so a reader never observes a half-written document. The document
records the sequence number of the last committed event; event lines past it
belong to a commit that never completed and are ignored.

Without a path the store keeps the last committed document in memory.
"""

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from .models import EventRecord, RegistryState

logger = logging.getLogger(__name__)

EVENTS_SUFFIX = ".events.jsonl"


class RegistryStore:
    """Loads and saves the registry document and its event log."""

    def __init__(self, state_file: Optional[Path] = None):
        self.state_file = Path(state_file) if state_file else None
        self._committed: Optional[str] = None
        # Committed events, read from disk once and extended on every save
        self._events: Optional[List[EventRecord]] = None

    @property
    def events_file(self) -> Optional[Path]:
        if self.state_file is None:
            return None
        return self.state_file.with_name(self.state_file.stem + EVENTS_SUFFIX)

    @property
    def exists(self) -> bool:
        if self.state_file is None:
            return self._committed is not None
        return self.state_file.exists()

    def load(self) -> RegistryState:
        """Load the last committed state, or an empty state if none exists."""
        data = self._read_document()
        events = self._committed_events()
        if data is None:
            return RegistryState(events=list(events))

        data.pop("event_seq", None)
        state = RegistryState.model_validate(data)
        state.events = list(events)
        return state

    def save(self, state: RegistryState) -> None:
        """Commit the state, appending only events that are not yet stored."""
        committed = self._committed_events()
        last_seq = committed[-1].seq if committed else 0

        new_events: List[EventRecord] = []
        for record in reversed(state.events):
            if record.seq <= last_seq:
                break
            new_events.append(record)
        new_events.reverse()

        document = state.model_dump(mode="json", exclude={"events"})
        document["event_seq"] = new_events[-1].seq if new_events else last_seq

        if self.state_file is None:
            self._committed = json.dumps(document, ensure_ascii=False)
        else:
            self._append_events(new_events)
            self._write_document(document)
        committed.extend(new_events)

    def backup(self, backup_dir: Path) -> Optional[Path]:
        """Copy the committed document and its event log into ``backup_dir``."""
        if self.state_file is None or not self.state_file.exists():
            return None

        backup_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        backup_path = backup_dir / f"{self.state_file.stem}_backup_{timestamp}.json"
        backup_path.write_text(self.state_file.read_text(encoding="utf-8"), encoding="utf-8")
        if self.events_file.exists():
            events_backup = backup_dir / f"{self.state_file.stem}_backup_{timestamp}{EVENTS_SUFFIX}"
            events_backup.write_text(self.events_file.read_text(encoding="utf-8"), encoding="utf-8")
        logger.info(f"Created backup: {backup_path}")
        return backup_path

    # ------------------------------------------------------------------

    def _read_document(self) -> Optional[Dict[str, Any]]:
        if self.state_file is None:
            return json.loads(self._committed) if self._committed is not None else None

        if not self.state_file.exists():
            return None
        with open(self.state_file, "r", encoding="utf-8") as f:
            return json.load(f)

    def _committed_events(self) -> List[EventRecord]:
        if self._events is None:
            data = self._read_document() or {}
            self._events = self._read_events(data.get("event_seq", 0))
        return self._events

    def _read_events(self, event_seq: int) -> List[EventRecord]:
        """Read committed events; a later line for the same seq replaces an earlier one."""
        events_file = self.events_file
        if events_file is None or not events_file.exists():
            return []

        records: Dict[int, EventRecord] = {}
        with open(events_file, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, 1):
                if not line.strip():
                    continue
                try:
                    record = EventRecord.model_validate_json(line)
                except ValueError:
                    logger.warning(f"Skipping unreadable event line {line_no} in {events_file}")
                    continue
                records[record.seq] = record
        return [records[seq] for seq in sorted(records) if seq <= event_seq]

    def _append_events(self, events: List[EventRecord]) -> None:
        if not events:
            return
        self.state_file.parent.mkdir(parents=True, exist_ok=True)
        torn = False
        if self.events_file.exists() and self.events_file.stat().st_size:
            with open(self.events_file, "rb") as f:
                f.seek(-1, os.SEEK_END)
                torn = f.read(1) != b"\n"

        with open(self.events_file, "a", encoding="utf-8") as f:
            if torn:
                f.write("\n")
            for record in events:
                f.write(record.model_dump_json() + "\n")
            f.flush()
            os.fsync(f.fileno())

    def _write_document(self, document: Dict[str, Any]) -> None:
        self.state_file.parent.mkdir(parents=True, exist_ok=True)
        tmp_file = self.state_file.with_suffix(self.state_file.suffix + ".tmp")
        with open(tmp_file, "w", encoding="utf-8") as f:
            json.dump(document, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_file, self.state_file)
