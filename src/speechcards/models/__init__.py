"""Pydantic data models for speechcards."""

from speechcards.models.card import BulletItem, SpeechCard
from speechcards.models.config import CardsConfig, Config, EditorConfig, OutlineConfig

__all__ = ["BulletItem", "SpeechCard", "CardsConfig", "Config", "EditorConfig", "OutlineConfig"]
