"""Pydantic request/response schemas used by the API.

Schemas keep API input/output shapes stable and provide validation for
controller handlers and tests. JSON keys are camelCase on the wire;
requests may also use the snake_case field names.
"""

from datetime import date
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from .models import Difficulty


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)


class SentencePracticeIn(CamelModel):
    """Payload for creating or replacing a practice sentence."""
    english_sentence: str
    turkish_translation: Optional[str] = None
    difficulty: Difficulty = Difficulty.EASY
    created_date: Optional[date] = None

    @field_validator('difficulty', mode='before')
    @classmethod
    def _upper_difficulty(cls, value):
        if isinstance(value, str):
            return value.strip().upper()
        return value


class SentencePracticeOut(CamelModel):
    """A stored practice sentence."""
    id: int
    english_sentence: str
    turkish_translation: Optional[str] = None
    difficulty: Difficulty
    created_date: date


class UnifiedSentence(CamelModel):
    """One row of the merged listing.

    `source` tells which store the row came from; `id` carries the same
    prefix so ids stay unique across both stores.
    """
    id: str
    english_sentence: str
    turkish_translation: Optional[str] = None
    difficulty: Difficulty
    created_date: Optional[date] = None
    source: Literal['practice', 'word']


class SentenceStats(CamelModel):
    """Combined sentence counts across both stores."""
    total: int
    easy: int
    medium: int
    hard: int
