"""Persona storage and lifecycle."""

from kalam_style.persona.store import FingerprintRepository, JsonPersonaStore
from kalam_style.persona.service import PersonaPrompts, PersonaService

__all__ = ["FingerprintRepository", "JsonPersonaStore", "PersonaPrompts", "PersonaService"]
