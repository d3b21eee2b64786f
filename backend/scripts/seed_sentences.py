"""CLI script to load practice sentences into the backend DB.
Usage: python scripts/seed_sentences.py [--file sentences.json]
"""
import sys
import argparse
import json
import pathlib
from typing import Optional
# Ensure `backend/` is on sys.path so `sentences_api` imports work when running this script directly
ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
from pydantic import ValidationError
from sqlmodel import Session
from sentences_api.database import engine, create_db_and_tables
from sentences_api import services
from sentences_api.schemas import SentencePracticeIn

SAMPLE_SENTENCES = [
    {"englishSentence": "I usually drink tea in the morning.", "turkishTranslation": "Sabahları genellikle çay içerim.", "difficulty": "EASY"},
    {"englishSentence": "She has been living in Izmir for three years.", "turkishTranslation": "Üç yıldır İzmir'de yaşıyor.", "difficulty": "MEDIUM"},
    {"englishSentence": "Had I known about the meeting, I would have come earlier.", "turkishTranslation": "Toplantıdan haberim olsaydı daha erken gelirdim.", "difficulty": "HARD"},
    {"englishSentence": "Could you open the window, please?", "turkishTranslation": "Pencereyi açar mısınız, lütfen?", "difficulty": "EASY"},
]


def load_items(path: Optional[pathlib.Path]) -> list:
    """Return raw sentence dicts from `path`, or the built-in samples."""
    if path is None:
        return SAMPLE_SENTENCES
    data = json.loads(path.read_text(encoding='utf-8'))
    if not isinstance(data, list):
        raise ValueError('seed file must contain a JSON list')
    return data


def main(path: Optional[pathlib.Path] = None):
    """Validate each item and create it through the service layer.

    Invalid items are reported and skipped; the rest are committed one
    by one so a single bad row does not block the import.
    """
    items = load_items(path)
    create_db_and_tables()
    created = 0
    errors = 0
    with Session(engine) as session:
        svc = services.SentencePracticeService(session)
        for idx, item in enumerate(items):
            try:
                payload = SentencePracticeIn.model_validate(item)
                s = svc.create(payload)
            except (ValidationError, ValueError) as e:
                errors += 1
                print(f'Skipped item {idx}: {e}')
                continue
            created += 1
            print(f'Created practice_{s.id}: {s.english_sentence}')
    print(f'Total created sentences: {created}, errors {errors}')
    return created


if __name__ == '__main__':
    parser = argparse.ArgumentParser()
    parser.add_argument('--file', type=pathlib.Path, help='JSON file with a list of sentences to import')
    args = parser.parse_args()
    main(path=args.file)
