import json
import sys
from pathlib import Path

from sentences_api import services

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / 'scripts'))
import seed_sentences  # noqa: E402


def test_seed_builtin_samples(session):
    created = seed_sentences.main()
    assert created == len(seed_sentences.SAMPLE_SENTENCES)
    stats = services.SentenceAggregationService(session).statistics()
    assert stats.total == created
    assert stats.hard == 1


def test_seed_from_file_skips_invalid_items(tmp_path, session):
    path = tmp_path / 'sentences.json'
    path.write_text(json.dumps([
        {'englishSentence': 'It is raining.', 'turkishTranslation': 'Yağmur yağıyor.', 'difficulty': 'easy', 'createdDate': '2024-04-01'},
        {'englishSentence': '', 'difficulty': 'EASY'},
        {'englishSentence': 'Unknown level.', 'difficulty': 'extreme'},
    ]), encoding='utf-8')
    assert seed_sentences.main(path) == 1
    rows = services.SentencePracticeService(session).list_by_date('2024-04-01')
    assert [r.english_sentence for r in rows] == ['It is raining.']
