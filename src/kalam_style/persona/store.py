"""
Persona Store

File-backed persona records: one <id>.json per persona plus an
index.json of summaries for cheap listing.
"""

from datetime import datetime
from pathlib import Path
from typing import Optional, Protocol
import json
import logging
import re
import uuid

from kalam_style.errors import PersonaNotFoundError
from kalam_style.models.fingerprint import LinguisticFingerprint
from kalam_style.models.persona import PersonaRecord, PersonaStatus, PersonaSummary


logger = logging.getLogger(__name__)

INDEX_VERSION = "1.0.0"

# uuid4().hex; anything else never names a file in data_dir
PERSONA_ID_PATTERN = re.compile(r"[0-9a-f]{32}")


def is_persona_id(value: str) -> bool:
    return bool(PERSONA_ID_PATTERN.fullmatch(value))


class FingerprintRepository(Protocol):
    """Anything that can persist fingerprints by id."""

    def save(self, persona_id: str, fingerprint: LinguisticFingerprint) -> None:
        ...

    def load(self, persona_id: str) -> Optional[LinguisticFingerprint]:
        ...


class JsonPersonaStore:
    """
    Stores personas as JSON files in a directory.

    Usage:
        store = JsonPersonaStore("data/personas")
        record = store.save_persona("Ada", original_texts=[essay])
        store.list_personas()
    """

    def __init__(self, data_dir: str | Path):
        """
        Initialize the store.

        Args:
            data_dir: Directory holding persona files (created if missing)
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self.index_file = self.data_dir / "index.json"

    def _persona_file(self, persona_id: str) -> Path:
        if not is_persona_id(persona_id):
            raise ValueError(f"Invalid persona id: {persona_id!r}")
        return self.data_dir / f"{persona_id}.json"

    def _fresh_index(self) -> dict:
        return {
            "personas": [],
            "last_updated": datetime.now().isoformat(),
            "version": INDEX_VERSION,
            "total_personas": 0,
        }

    def _read_index(self) -> dict:
        """Load the index, rebuilding it empty when missing or unreadable."""
        try:
            index = json.loads(self.index_file.read_text(encoding="utf-8"))
        except FileNotFoundError:
            index = None
        except json.JSONDecodeError as e:
            logger.warning("Persona index %s is corrupt (%s); rebuilding", self.index_file, e)
            index = None

        if not isinstance(index, dict) or not isinstance(index.get("personas"), list):
            index = self._fresh_index()
            self._write_index(index)
        return index

    def _write_index(self, index: dict):
        index["last_updated"] = datetime.now().isoformat()
        index["total_personas"] = len(index["personas"])
        self.index_file.write_text(json.dumps(index, indent=2), encoding="utf-8")

    def list_personas(self) -> list[PersonaSummary]:
        """All persona summaries, newest first."""
        summaries = [PersonaSummary.model_validate(p) for p in self._read_index()["personas"]]
        return sorted(summaries, key=lambda s: s.created_at, reverse=True)

    def get_persona(self, persona_id: str) -> Optional[PersonaRecord]:
        if not is_persona_id(persona_id):
            return None
        path = self._persona_file(persona_id)
        if not path.exists():
            return None
        return PersonaRecord.model_validate_json(path.read_text(encoding="utf-8"))

    def save_persona(
        self,
        name: str,
        persona_id: Optional[str] = None,
        *,
        status: Optional[PersonaStatus] = None,
        original_texts: Optional[list[str]] = None,
        linguistic_fingerprint: Optional[LinguisticFingerprint] = None,
        error_message: Optional[str] = None,
        source_count: Optional[int] = None,
    ) -> PersonaRecord:
        """
        Create or update a persona.

        Fields left as None keep their stored value. A new persona gets a
        random id and starts in the "processing" state.

        Returns:
            The record as written
        """
        existing = self.get_persona(persona_id) if persona_id else None
        data = existing.model_dump() if existing else {}

        updates = {
            "status": status,
            "original_texts": original_texts,
            "linguistic_fingerprint": linguistic_fingerprint,
            "error_message": error_message,
            "source_count": source_count,
        }
        data.update({key: value for key, value in updates.items() if value is not None})
        data["id"] = persona_id or uuid.uuid4().hex
        data["name"] = name
        data["updated_at"] = datetime.now().isoformat()

        record = PersonaRecord.model_validate(data)
        self._persona_file(record.id).write_text(record.model_dump_json(indent=2), encoding="utf-8")

        index = self._read_index()
        summary = record.to_summary().model_dump()
        positions = [i for i, p in enumerate(index["personas"]) if p.get("id") == record.id]
        if positions:
            index["personas"][positions[0]] = summary
        else:
            index["personas"].append(summary)
        self._write_index(index)

        logger.info("Saved persona %s (%s, %s)", record.id, record.name, record.status)
        return record

    def delete_persona(self, persona_id: str) -> bool:
        """Remove a persona. Returns False, touching nothing, if the index does not list it."""
        if not is_persona_id(persona_id):
            return False

        index = self._read_index()
        before = len(index["personas"])
        index["personas"] = [p for p in index["personas"] if p.get("id") != persona_id]
        if len(index["personas"]) == before:
            return False

        self._persona_file(persona_id).unlink(missing_ok=True)
        self._write_index(index)
        logger.info("Deleted persona %s", persona_id)
        return True

    def health(self) -> dict:
        index = self._read_index()
        return {
            "total": len(index["personas"]),
            "last_updated": index["last_updated"],
            "data_dir": str(self.data_dir),
        }

    # FingerprintRepository

    def save(self, persona_id: str, fingerprint: LinguisticFingerprint) -> None:
        existing = self.get_persona(persona_id)
        if existing is None:
            raise PersonaNotFoundError(persona_id)
        self.save_persona(existing.name, persona_id, linguistic_fingerprint=fingerprint)

    def load(self, persona_id: str) -> Optional[LinguisticFingerprint]:
        record = self.get_persona(persona_id)
        return record.linguistic_fingerprint if record else None
