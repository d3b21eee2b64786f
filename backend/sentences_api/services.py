"""Business logic services used by HTTP controllers.

This module holds small service classes that coordinate repositories
and parsing. Services are intentionally thin: they validate caller input
(raising `ValueError`), execute domain logic and persist through the
repositories. Missing rows are reported as `None`/`False`, never raised.
"""

from datetime import date
import logging
from typing import List, Optional
from sqlmodel import Session
from . import models, repositories, schemas
from .utils.parsers import parse_difficulty, parse_iso_date

logger = logging.getLogger("sentences_api.services")


def _require_text(value: Optional[str], field: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{field} must not be empty")
    return value


class SentencePracticeService:
    """Lifecycle and filter operations for practice sentences."""
    def __init__(self, session: Session):
        self.session = session
        self.repo = repositories.SentencePracticeRepository(session)

    def get_by_id(self, sentence_id: int) -> Optional[models.SentencePractice]:
        return self.repo.get(sentence_id)

    def list_all(self) -> List[models.SentencePractice]:
        return self.repo.list_all()

    def create(self, payload: schemas.SentencePracticeIn) -> models.SentencePractice:
        """Persist a new practice sentence.

        The creation date defaults to today when the payload omits it.
        Raises `ValueError` when the English sentence is blank.
        """
        english = _require_text(payload.english_sentence, "englishSentence")
        sentence = models.SentencePractice(
            english_sentence=english,
            turkish_translation=payload.turkish_translation,
            difficulty=payload.difficulty,
            created_date=payload.created_date or date.today(),
        )
        saved = self.repo.save(sentence)
        logger.info("practice sentence created id=%s difficulty=%s", saved.id, saved.difficulty.value)
        return saved

    def update(self, sentence_id: int, payload: schemas.SentencePracticeIn) -> Optional[models.SentencePractice]:
        """Replace the fields of an existing sentence.

        Returns `None` when `sentence_id` does not exist; nothing is
        created in that case. The stored creation date is only replaced
        when the payload carries one.
        """
        existing = self.repo.get(sentence_id)
        if not existing:
            return None
        existing.english_sentence = _require_text(payload.english_sentence, "englishSentence")
        existing.turkish_translation = payload.turkish_translation
        existing.difficulty = payload.difficulty
        if payload.created_date is not None:
            existing.created_date = payload.created_date
        saved = self.repo.save(existing)
        logger.info("practice sentence updated id=%s", saved.id)
        return saved

    def delete(self, sentence_id: int) -> bool:
        """Delete a sentence; return whether a row was removed."""
        existing = self.repo.get(sentence_id)
        if not existing:
            return False
        self.repo.delete(existing)
        logger.info("practice sentence deleted id=%s", sentence_id)
        return True

    def list_by_difficulty(self, difficulty: str) -> List[models.SentencePractice]:
        """Return sentences of a difficulty given by name (case-insensitive)."""
        return self.repo.list_by_difficulty(parse_difficulty(difficulty))

    def list_by_date(self, value: str) -> List[models.SentencePractice]:
        return self.repo.list_by_date(parse_iso_date(value))

    def list_by_date_range(self, start: str, end: str) -> List[models.SentencePractice]:
        """Return sentences created between two ISO dates, inclusive.

        An inverted range is not an error; it simply matches nothing.
        """
        return self.repo.list_by_date_range(parse_iso_date(start), parse_iso_date(end))

    def list_distinct_dates(self) -> List[date]:
        return self.repo.list_distinct_dates()

    def count(self) -> int:
        return self.repo.count()

    def count_by_difficulty(self, difficulty: models.Difficulty) -> int:
        return self.repo.count_by_difficulty(difficulty)


class SentenceAggregationService:
    """Merge practice and word sentences into one listing and count them."""
    def __init__(self, session: Session):
        self.session = session
        self.practice = SentencePracticeService(session)
        self.word_repo = repositories.WordSentenceRepository(session)

    def list_all(self) -> List[schemas.UnifiedSentence]:
        """Return all practice sentences followed by all word sentences.

        Word sentences have no difficulty or date of their own; they are
        reported as EASY with no creation date.
        """
        out = []
        for sp in self.practice.list_all():
            out.append(schemas.UnifiedSentence(
                id=f"practice_{sp.id}",
                english_sentence=sp.english_sentence,
                turkish_translation=sp.turkish_translation,
                difficulty=sp.difficulty,
                created_date=sp.created_date,
                source='practice',
            ))
        for ws in self.word_repo.list_all():
            out.append(schemas.UnifiedSentence(
                id=f"word_{ws.id}",
                english_sentence=ws.sentence,
                turkish_translation=ws.translation,
                difficulty=models.Difficulty.EASY,
                created_date=None,
                source='word',
            ))
        return out

    def statistics(self) -> schemas.SentenceStats:
        """Combine per-store counts; every word sentence counts as easy."""
        practice_total = self.practice.count()
        practice_easy = self.practice.count_by_difficulty(models.Difficulty.EASY)
        practice_medium = self.practice.count_by_difficulty(models.Difficulty.MEDIUM)
        practice_hard = self.practice.count_by_difficulty(models.Difficulty.HARD)
        word_total = self.word_repo.count()
        return schemas.SentenceStats(
            total=practice_total + word_total,
            easy=practice_easy + word_total,
            medium=practice_medium,
            hard=practice_hard,
        )
