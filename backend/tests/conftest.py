import os
import tempfile
from pathlib import Path

import pytest

# Point the app at a throwaway SQLite file before `sentences_api` is imported.
_TMP_DIR = Path(tempfile.mkdtemp(prefix="sentences_api_tests_"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'test.db'}"

from sqlmodel import SQLModel, Session  # noqa: E402

from sentences_api import models  # noqa: E402
from sentences_api.database import engine, create_db_and_tables  # noqa: E402


@pytest.fixture(autouse=True)
def clean_tables():
    """Start every test from empty tables."""
    create_db_and_tables()
    with engine.begin() as conn:
        for table in reversed(SQLModel.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture
def session():
    with Session(engine) as s:
        yield s


@pytest.fixture
def add_word_sentences(session):
    """Return a helper that stores a word with `n` example sentences."""
    def _add(n: int, english_word: str = "apple"):
        word = models.Word(english_word=english_word, turkish_meaning="elma")
        session.add(word)
        session.commit()
        session.refresh(word)
        for i in range(n):
            session.add(models.WordSentence(sentence=f"{english_word} sentence {i}", translation=f"cümle {i}", word_id=word.id))
        session.commit()
        return word
    return _add
