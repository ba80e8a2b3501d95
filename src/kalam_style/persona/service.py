"""
Persona Service

Creates personas from sample texts and renders prompts for them.
"""

from dataclasses import dataclass
from typing import Optional
import logging

from kalam_style.config import get_settings
from kalam_style.errors import (
    InsufficientInputError,
    PersonaNotFoundError,
    PersonaNotReadyError,
)
from kalam_style.models.fingerprint import LinguisticFingerprint
from kalam_style.models.persona import PersonaRecord
from kalam_style.style.analyzer import StyleAnalyzer, create_linguistic_fingerprint
from kalam_style.style.prompts import generate_humanized_persona_prompt, generate_persona_prompt

from .store import JsonPersonaStore


logger = logging.getLogger(__name__)


@dataclass
class PersonaPrompts:
    """Fingerprint and rendered prompts for one persona."""
    persona_id: str
    name: str
    fingerprint: Optional[LinguisticFingerprint] = None
    task: Optional[str] = None
    persona_prompt: Optional[str] = None
    humanized_prompt: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.persona_id,
            "name": self.name,
            "linguistic_fingerprint": self.fingerprint.to_dict() if self.fingerprint else None,
            "task": self.task,
            "persona_prompt": self.persona_prompt,
            "humanized_prompt": self.humanized_prompt,
        }


class PersonaService:
    """
    Persona lifecycle on top of a JsonPersonaStore.

    Usage:
        service = PersonaService(JsonPersonaStore("data/personas"))
        record = service.create_persona("Ada", [essay_one, essay_two])
        prompts = service.persona_prompts(record.id, task="Write a cover letter")
    """

    def __init__(
        self,
        store: JsonPersonaStore,
        analyzer: Optional[StyleAnalyzer] = None,
        min_persona_text_length: Optional[int] = None,
        source_texts: Optional[int] = None,
    ):
        settings = get_settings()
        self.store = store
        self.analyzer = analyzer or StyleAnalyzer()
        self.min_persona_text_length = (
            settings.min_persona_text_length
            if min_persona_text_length is None
            else min_persona_text_length
        )
        self.source_texts = source_texts or settings.persona_source_texts

    def create_persona(self, name: str, texts: list[str]) -> PersonaRecord:
        """
        Store a persona and fingerprint its texts.

        The record is written as "processing" first, then marked "ready"
        with its fingerprint, or "failed" if the texts cannot be analyzed.

        Raises:
            InsufficientInputError: If the combined texts are too short
        """
        record = self.store.save_persona(
            name,
            status="processing",
            original_texts=list(texts),
            source_count=len(texts),
        )

        combined = "\n\n".join(t.strip() for t in texts if t.strip())
        try:
            fingerprint = self.analyzer.fingerprint(combined)
        except InsufficientInputError as e:
            logger.warning("Persona %s failed analysis: %s", record.id, e)
            self.store.save_persona(name, record.id, status="failed", error_message=str(e))
            raise

        return self.store.save_persona(
            name,
            record.id,
            status="ready",
            linguistic_fingerprint=fingerprint,
        )

    def get_persona(self, persona_id: str) -> PersonaRecord:
        record = self.store.get_persona(persona_id)
        if record is None:
            raise PersonaNotFoundError(f"Persona not found: {persona_id}")
        return record

    def delete_persona(self, persona_id: str):
        if not self.store.delete_persona(persona_id):
            raise PersonaNotFoundError(f"Persona not found: {persona_id}")

    def persona_prompts(self, persona_id: str, task: Optional[str] = None) -> PersonaPrompts:
        """
        Fingerprint and, when a task is given, both prompts for a ready persona.

        Personas stored without a fingerprint get one computed on the fly
        from their first few source texts, provided there is enough text.
        The computed fingerprint is not stored.

        Raises:
            PersonaNotFoundError: If no persona has this id
            PersonaNotReadyError: If the persona is not "ready"
        """
        record = self.get_persona(persona_id)
        if record.status != "ready":
            raise PersonaNotReadyError(f"Persona is not ready for use: {persona_id} ({record.status})")

        result = PersonaPrompts(persona_id=record.id, name=record.name, task=task)
        result.fingerprint = record.linguistic_fingerprint
        if result.fingerprint is None:
            result.fingerprint = self._fallback_fingerprint(record)

        if result.fingerprint is not None and task is not None:
            result.persona_prompt = generate_persona_prompt(result.fingerprint, task)
            result.humanized_prompt = generate_humanized_persona_prompt(result.fingerprint, task)

        return result

    def _fallback_fingerprint(self, record: PersonaRecord) -> Optional[LinguisticFingerprint]:
        combined = "\n\n".join(record.original_texts[: self.source_texts])
        if len(combined) <= self.min_persona_text_length:
            logger.debug("Persona %s has too little source text for a fingerprint", record.id)
            return None

        logger.info("Computing fingerprint for persona %s from source texts", record.id)
        return create_linguistic_fingerprint(combined)
