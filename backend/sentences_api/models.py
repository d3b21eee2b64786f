"""SQLModel data models.

This module defines the application's database tables using SQLModel.
`SentencePractice` rows are owned by this service; `Word` and
`WordSentence` mirror tables maintained by the vocabulary subsystem and
are declared here so the foreign key and read queries have a mapping.
"""

from enum import Enum
from typing import Optional
from sqlmodel import SQLModel, Field, Relationship
from datetime import date
from typing import List


class Difficulty(str, Enum):
    """Difficulty classification of a practice sentence."""
    EASY = "EASY"
    MEDIUM = "MEDIUM"
    HARD = "HARD"


class SentencePractice(SQLModel, table=True):
    """A standalone practice sentence.

    Fields:
    - `english_sentence`: the English text, never blank
    - `turkish_translation`: free-form translation, may be empty
    - `difficulty`: explicit `Difficulty` level
    - `created_date`: calendar date the sentence was added
    """
    __tablename__ = "sentence_practices"

    id: Optional[int] = Field(default=None, primary_key=True)
    english_sentence: str = Field(nullable=False)
    turkish_translation: Optional[str] = None
    difficulty: Difficulty = Field(default=Difficulty.EASY, index=True)
    created_date: date = Field(default_factory=date.today, index=True)


class Word(SQLModel, table=True):
    """A vocabulary word owning example sentences."""
    __tablename__ = "words"

    id: Optional[int] = Field(default=None, primary_key=True)
    english_word: str = Field(index=True)
    turkish_meaning: str
    learned_date: date = Field(default_factory=date.today)
    notes: Optional[str] = None
    difficulty: Optional[str] = None
    sentences: List['WordSentence'] = Relationship(back_populates='word')


class WordSentence(SQLModel, table=True):
    """Example sentence attached to a `Word`.

    Word sentences carry no difficulty or date of their own.
    """
    __tablename__ = "sentences"

    id: Optional[int] = Field(default=None, primary_key=True)
    sentence: str = Field(nullable=False)
    translation: Optional[str] = None
    word_id: int = Field(foreign_key='words.id', nullable=False, index=True)
    word: Optional[Word] = Relationship(back_populates='sentences')
