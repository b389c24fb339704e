from pathlib import Path

import pytest

from packages.dictionary import (
    DEFAULT_DICTIONARY, FrequencyDictionary, LexiconDictionary, WordListDictionary,
    build_dictionary, create_dictionary, get_dictionary_ids,
)
from packages.engine import RejectReason, validate_word
from packages.dictionary import frequency


def test_registry_lists_backends():
    ids = get_dictionary_ids()
    assert {"wordlist", "wordfreq", "lexicon"} <= set(ids)


def test_create_unknown_dictionary_raises():
    with pytest.raises(ValueError, match="Unknown dictionary id"):
        create_dictionary("nope")


def test_wordlist_from_file(tmp_path: Path):
    p = tmp_path / "words.txt"
    p.write_text("Silk\n\n  worm \n", encoding="utf-8")
    d = create_dictionary("wordlist", path=str(p))
    assert isinstance(d, WordListDictionary)
    assert len(d) == 2
    assert d.is_known_word("silk", "en") is True
    assert d.is_known_word("worm") is True
    assert d.is_known_word("milk", "en") is False


def test_wordlist_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        WordListDictionary(path=tmp_path / "missing.txt")


def test_wordlist_other_language_is_unknown():
    d = WordListDictionary(["chat"], language="fr")
    assert d.is_known_word("chat", "fr") is True
    assert d.is_known_word("chat", "en") is False


def test_frequency_threshold(monkeypatch):
    seen = []

    def fake_zipf(word, lang):
        seen.append((word, lang))
        return {"silk": 3.4, "slik": 0.0, "mirk": 1.2}.get(word, 0.0)

    monkeypatch.setattr(frequency, "zipf_frequency", fake_zipf)
    d = FrequencyDictionary(min_zipf=1.0)
    assert d.is_known_word("silk", "en") is True
    assert d.is_known_word("mirk", "en") is True
    assert d.is_known_word("slik", "en") is False
    assert FrequencyDictionary(min_zipf=2.0).is_known_word("mirk", "en") is False
    assert ("silk", "en") in seen


def test_frequency_rejects_non_alpha_without_lookup(monkeypatch):
    monkeypatch.setattr(frequency, "zipf_frequency", lambda word, lang: 5.0)
    d = FrequencyDictionary()

    def boom(word, lang):
        raise AssertionError("should not be called")

    monkeypatch.setattr(frequency, "zipf_frequency", boom)
    assert d.is_known_word("s1lk", "en") is False


def _zipf_en_only(word, lang):
    if lang != "en":
        raise LookupError(f"No wordlist 'best' available for language {lang!r}")
    return 3.0


def test_frequency_unknown_language_fails_at_construction(monkeypatch):
    monkeypatch.setattr(frequency, "zipf_frequency", _zipf_en_only)
    with pytest.raises(ValueError, match="xx"):
        FrequencyDictionary(language="xx")
    with pytest.raises(ValueError):
        build_dictionary("wordfreq", language="xx")


def test_frequency_unknown_language_lookup_is_false(monkeypatch):
    monkeypatch.setattr(frequency, "zipf_frequency", _zipf_en_only)
    d = FrequencyDictionary()
    assert d.is_known_word("silk", "en") is True
    assert d.is_known_word("silk", "xx") is False
    assert validate_word("silk", "silkworm", [], d, language="xx").reason is RejectReason.NOT_A_WORD


# --- lexicon backend ---
LEXICON = LexiconDictionary(["silk", "worm", "milk", "ilk", "wok", "m", "k", "box", "a"])


@pytest.mark.parametrize("junk", ["lmk", "slr", "wrk", "rms", "mrs", "iws", "okr", "ksi"])
def test_lexicon_rejects_abbreviations_and_junk(junk):
    v = validate_word(junk, "silkworm", [], LEXICON)
    assert v.reason is RejectReason.NOT_A_WORD


@pytest.mark.parametrize("word,expected", [
    ("silk", True),
    ("ilk", True),
    ("worms", True),    # plural of a listed word
    ("boxes", True),
    ("milks", True),
    ("ms", False),      # stem too short for the plural rule
    ("k", False),       # single letters other than a/i
    ("s", False),
    ("a", True),
    ("i", True),
    ("wis", False),
    ("s1lk", False),
])
def test_lexicon_rules(word, expected):
    assert LEXICON.is_known_word(word, "en") is expected


def test_lexicon_other_language_is_unknown():
    assert LEXICON.is_known_word("silk", "fr") is False
    with pytest.raises(ValueError, match="fr"):
        LexiconDictionary(language="fr")


def test_default_dictionary_is_lexicon():
    assert DEFAULT_DICTIONARY == "lexicon"


def test_build_dictionary_wordlist_needs_path(tmp_path: Path):
    with pytest.raises(ValueError):
        build_dictionary("wordlist", language="en")
    p = tmp_path / "words.txt"
    p.write_text("silk\n", encoding="utf-8")
    d = build_dictionary("wordlist", language="en", path=str(p))
    assert d.is_known_word("silk", "en")


def test_nltk_corpus_rejects_silkworm_junk():
    try:
        d = LexiconDictionary()
    except LookupError:
        pytest.skip("nltk 'words' corpus unavailable")
    for junk in ("lmk", "slr", "wrk"):
        assert validate_word(junk, "silkworm", [], d).reason is RejectReason.NOT_A_WORD
    assert validate_word("silk", "silkworm", [], d).accepted
    assert validate_word("worms", "silkworm", [], d).accepted
