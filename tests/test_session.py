import pytest

from packages.datasets import WordListSource
from packages.dictionary import WordListDictionary
from packages.engine import RejectReason
from packages.session import (
    ALERTS, RoundSession, RoundState, alert_for, apply_submission, start_round,
)

DICT = WordListDictionary(["silk", "worm", "worms", "milk", "ski", "sir", "slim", "mow"])


def test_accept_updates_state_and_score():
    st = RoundState("silkworm")
    st2, sub = apply_submission(st, "  Silk ", DICT)
    assert sub.status == "accepted" and sub.word == "silk" and sub.points == 4
    assert st2.used_words == ("silk",)
    assert st2.score == 4
    # original value untouched
    assert st.used_words == () and st.score == 0


def test_rejection_leaves_state_unchanged():
    st = RoundState("silkworm", ("silk",), 4)
    st2, sub = apply_submission(st, "silk", DICT)
    assert sub.status == "rejected" and sub.reason is RejectReason.ALREADY_USED
    assert st2 is st


@pytest.mark.parametrize("entry", ["", "   ", "\n"])
def test_empty_entry_is_ignored(entry):
    st = RoundState("silkworm")
    st2, sub = apply_submission(st, entry, DICT)
    assert sub.status == "ignored" and sub.reason is None
    assert st2 is st


def test_score_invariant_and_order():
    st = RoundState("silkworm")
    words = ["silk", "worm", "ski", "milk", "mow"]
    for w in words:
        st, sub = apply_submission(st, w, DICT)
        assert sub.accepted
        assert st.used_words[0] == w
    assert st.score == sum(len(w) for w in words)
    assert list(st.used_words) == list(reversed(words))
    assert st.root_word not in st.used_words


def test_round_state_round_trips_through_dict():
    st = RoundState("silkworm", ("worm", "silk"), 8)
    assert RoundState.from_dict(st.to_dict()) == st


@pytest.mark.parametrize("payload", [
    {"root_word": "silkworm", "used_words": ["silk"], "score": 5},
    {"root_word": "silkworm", "used_words": ["silkworm"], "score": 8},
    {"root_word": "", "used_words": [], "score": 0},
])
def test_round_state_rejects_bad_payloads(payload):
    with pytest.raises(ValueError):
        RoundState.from_dict(payload)


def test_start_round_uses_source(tmp_path):
    p = tmp_path / "start.txt"
    p.write_text("notebook\n", encoding="utf-8")
    st = start_round(WordListSource(p))
    assert st == RoundState("notebook")


def test_start_round_empty_source_uses_silkworm(tmp_path):
    p = tmp_path / "start.txt"
    p.write_text("\n\n", encoding="utf-8")
    assert start_round(WordListSource(p)).root_word == "silkworm"


def test_session_play_and_new_round(tmp_path):
    p = tmp_path / "start.txt"
    p.write_text("silkworm\n", encoding="utf-8")
    s = RoundSession(DICT, source=WordListSource(p), seed=1)
    assert s.state.root_word == "silkworm"

    assert s.submit("silk").accepted
    assert s.submit("silkworm").reason is RejectReason.IS_ROOT_WORD
    assert s.submit("silkkk").reason is RejectReason.NOT_CONSTRUCTIBLE
    assert s.submit("").status == "ignored"
    assert s.state.score == 4
    assert [h.word for h in s.history] == ["silk", "silkworm", "silkkk"]

    s.new_round()
    assert s.state == RoundState("silkworm")
    assert s.history == []


def test_session_explicit_root_word():
    s = RoundSession(DICT)
    st = s.new_round("  SilkWorm ")
    assert st.root_word == "silkworm"
    with pytest.raises(ValueError):
        s.new_round("   ")


def test_every_reason_has_an_alert():
    assert set(ALERTS) == set(RejectReason)
    a = alert_for(RejectReason.IS_ROOT_WORD)
    assert a.title == "Root Word!"
    assert "root word" in a.message


@pytest.mark.parametrize("used,score", [
    (("silk",), 5),          # score must equal the letters used
    (("silkworm",), 8),      # root word can't be a used word
    ((), 3),
])
def test_round_state_constructor_enforces_invariants(used, score):
    with pytest.raises(ValueError):
        RoundState("silkworm", used, score)


def test_with_word_keeps_invariants():
    st = RoundState("silkworm").with_word("silk").with_word("worm")
    assert st == RoundState("silkworm", ("worm", "silk"), 8)
