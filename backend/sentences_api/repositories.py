"""Repository classes encapsulating database operations.

Each repository is small and focused on a single table. Repositories
return SQLModel objects and perform commits/refreshes where appropriate.
"""

from datetime import date
from typing import List, Optional
from sqlmodel import Session, select
from sqlalchemy import func
from . import models


class SentencePracticeRepository:
    """CRUD and filter queries for `SentencePractice` rows."""
    def __init__(self, session: Session):
        self.session = session

    def save(self, sentence: models.SentencePractice) -> models.SentencePractice:
        """Insert or update a sentence and return the refreshed instance."""
        self.session.add(sentence)
        self.session.commit()
        self.session.refresh(sentence)
        return sentence

    def get(self, sentence_id: int) -> Optional[models.SentencePractice]:
        """Fetch a sentence by primary key."""
        return self.session.get(models.SentencePractice, sentence_id)

    def delete(self, sentence: models.SentencePractice) -> None:
        self.session.delete(sentence)
        self.session.commit()

    def list_all(self) -> List[models.SentencePractice]:
        """Return every practice sentence ordered by id."""
        stmt = select(models.SentencePractice).order_by(models.SentencePractice.id)
        return self.session.exec(stmt).all()

    def list_by_difficulty(self, difficulty: models.Difficulty) -> List[models.SentencePractice]:
        stmt = select(models.SentencePractice).where(
            models.SentencePractice.difficulty == difficulty
        ).order_by(models.SentencePractice.id)
        return self.session.exec(stmt).all()

    def list_by_date(self, created: date) -> List[models.SentencePractice]:
        stmt = select(models.SentencePractice).where(
            models.SentencePractice.created_date == created
        ).order_by(models.SentencePractice.id)
        return self.session.exec(stmt).all()

    def list_by_date_range(self, start: date, end: date) -> List[models.SentencePractice]:
        """Return sentences created within `start`..`end`, both inclusive."""
        stmt = select(models.SentencePractice).where(
            models.SentencePractice.created_date >= start,
            models.SentencePractice.created_date <= end
        ).order_by(models.SentencePractice.created_date, models.SentencePractice.id)
        return self.session.exec(stmt).all()

    def list_distinct_dates(self) -> List[date]:
        """Return the distinct creation dates, newest first."""
        stmt = select(models.SentencePractice.created_date).distinct().order_by(
            models.SentencePractice.created_date.desc()
        )
        return self.session.exec(stmt).all()

    def count(self) -> int:
        stmt = select(func.count()).select_from(models.SentencePractice)
        return self.session.exec(stmt).one()

    def count_by_difficulty(self, difficulty: models.Difficulty) -> int:
        stmt = select(func.count()).select_from(models.SentencePractice).where(
            models.SentencePractice.difficulty == difficulty
        )
        return self.session.exec(stmt).one()


class WordSentenceRepository:
    """Query helpers for `WordSentence` rows.

    Writes belong to the vocabulary subsystem; `delete_by_word_id` is kept
    here so that subsystem can cascade a word removal through one place.
    """
    def __init__(self, session: Session):
        self.session = session

    def get(self, sentence_id: int) -> Optional[models.WordSentence]:
        return self.session.get(models.WordSentence, sentence_id)

    def list_all(self) -> List[models.WordSentence]:
        """Return every word sentence ordered by id."""
        stmt = select(models.WordSentence).order_by(models.WordSentence.id)
        return self.session.exec(stmt).all()

    def list_by_word_id(self, word_id: int) -> List[models.WordSentence]:
        """List all sentences attached to the word `word_id`."""
        stmt = select(models.WordSentence).where(
            models.WordSentence.word_id == word_id
        ).order_by(models.WordSentence.id)
        return self.session.exec(stmt).all()

    def delete_by_word_id(self, word_id: int) -> int:
        """Delete every sentence of `word_id` and return how many were removed."""
        rows = self.list_by_word_id(word_id)
        for row in rows:
            self.session.delete(row)
        self.session.commit()
        return len(rows)

    def count(self) -> int:
        stmt = select(func.count()).select_from(models.WordSentence)
        return self.session.exec(stmt).one()
