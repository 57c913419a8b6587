"""Tests for the transcript store."""
import pytest

from errors import ValidationError
from models import Role
from transcript import Transcript


def test_append_keeps_order():
    transcript = Transcript()
    transcript.add_user("a")
    transcript.add_model("b")
    transcript.append("user", "c")

    assert [(t.role, t.text) for t in transcript] == [
        (Role.USER, "a"),
        (Role.MODEL, "b"),
        (Role.USER, "c"),
    ]
    assert len(transcript) == 3


def test_unknown_role_rejected():
    with pytest.raises(ValidationError):
        Transcript().append("assistant", "hi")


def test_turns_is_a_snapshot():
    transcript = Transcript()
    transcript.add_user("a")
    snapshot = transcript.turns
    transcript.add_model("b")

    assert len(snapshot) == 1
    assert len(transcript.turns) == 2


def test_outbound_filters_blank_turns():
    transcript = Transcript()
    transcript.add_user("a")
    transcript.add_model("  ")
    transcript.add_user("b")

    assert [t.text for t in transcript.outbound()] == ["a", "b"]
    assert len(transcript) == 3


def test_outbound_window_does_not_truncate():
    transcript = Transcript()
    for i in range(6):
        transcript.add_user(str(i))

    assert [t.text for t in transcript.outbound(max_turns=2)] == ["4", "5"]
    assert len(transcript) == 6
