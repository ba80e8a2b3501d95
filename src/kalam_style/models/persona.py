"""Persona records stored alongside their fingerprints."""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from kalam_style.models.fingerprint import LinguisticFingerprint


PersonaStatus = Literal["processing", "ready", "failed"]


class PersonaSummary(BaseModel):
    """Index entry for a persona."""

    id: str
    name: str
    status: PersonaStatus = "processing"
    source_count: int = Field(default=0, ge=0)
    created_at: str = Field(default_factory=lambda: datetime.now().isoformat())
    updated_at: str = Field(default_factory=lambda: datetime.now().isoformat())


class PersonaRecord(PersonaSummary):
    """A writing persona: its source texts and, once analyzed, its fingerprint."""

    original_texts: list[str] = Field(default_factory=list)
    linguistic_fingerprint: LinguisticFingerprint | None = None
    error_message: str | None = None

    def to_summary(self) -> PersonaSummary:
        return PersonaSummary(
            id=self.id,
            name=self.name,
            status=self.status,
            source_count=self.source_count,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
