# src/e2e/test_submission_parsing.py

import pytest

from essaysync.submission import (
    Submission, SubmissionError, ImprovedVersion,
    format_improved_text, split_into_paragraphs, band_for_target_score, PLACEHOLDER_TEXT,
)


def _payload(**overrides):
    data = {
        "_id": "sub-1",
        "body": "Intro text.\nBody one.\nBody two.\nConclusion.",
        "status": "ANALYZED",
        "targetScore": "BAND_EIGHT",
        "score": 6.5,
        "criteriaScores": {"taskResponse": 6, "coherence": 6.5, "lexical": 7, "grammar": 6},
        "aiFeedback": {
            "mistakes": ["Repetitive phrasing"],
            "suggestions": ["Vary vocabulary"],
            "improvedVersions": {
                "band7": {"introduction": "I7.", "body_one": "B7 one.", "body_two": "B7 two.", "conclusion": "C7."},
                "band9": {"introduction": "I9.", "body": ["B9 one.", "", "B9 two."], "conclusion": "C9."},
            },
        },
    }
    data.update(overrides)
    return data


def test_parses_backend_payload():
    sub = Submission.from_dict(_payload())
    assert sub.id == "sub-1"
    assert sub.is_analyzed and not sub.is_processing and not sub.is_failed
    assert sub.score == 6.5
    assert sub.target_band == 8
    assert sub.criteria_scores == {"taskResponse": 6.0, "coherence": 6.5, "lexical": 7.0, "grammar": 6.0}
    assert sub.mistakes == ["Repetitive phrasing"]
    assert [v.band for v in sub.band_versions()] == [7, 9]


def test_body_list_and_legacy_fields_both_work():
    sub = Submission.from_dict(_payload())
    assert sub.improved_versions[7].body == ["B7 one.", "B7 two."]
    assert sub.improved_versions[9].body == ["B9 one.", "B9 two."]
    assert sub.improved_versions[9].paragraphs() == ["I9.", "B9 one.", "B9 two.", "C9."]


def test_body_list_wins_over_legacy_fields():
    v = ImprovedVersion.from_dict(8, {"introduction": "I.", "body": ["new"], "body_one": "old", "conclusion": "C."})
    assert v.body == ["new"]


def test_missing_feedback_gives_no_versions():
    sub = Submission.from_dict({"body": "Only text.", "status": "IN_PROGRESS"})
    assert sub.improved_versions == {}
    assert sub.is_processing
    assert sub.target_band == 9


def test_unknown_status_falls_back_to_idle():
    assert Submission.from_dict(_payload(status="WEIRD")).status == "IDLE"


@pytest.mark.parametrize("payload", [None, [], "text", {"status": "IDLE"}, {"body": 12}])
def test_unusable_payload_raises(payload):
    with pytest.raises(SubmissionError):
        Submission.from_dict(payload)


def test_malformed_nested_sections_are_ignored():
    sub = Submission.from_dict(_payload(aiFeedback=["not", "a", "mapping"], criteriaScores="x"))
    assert sub.improved_versions == {} and sub.criteria_scores == {}


def test_target_score_mapping():
    assert band_for_target_score("BAND_SEVEN") == 7
    with pytest.raises(SubmissionError):
        band_for_target_score("BAND_TEN")


def test_split_into_paragraphs_drops_blank_lines():
    assert split_into_paragraphs("a\n\n  \nb\n") == ["a", "b"]
    assert split_into_paragraphs("") == []


def test_generic_backend_paragraph_becomes_placeholder():
    generic = "This conclusion provides exceptional synthesis and leaves a lasting impression."
    assert format_improved_text(generic) == PLACEHOLDER_TEXT
    assert format_improved_text("Real text.") == "Real text."
    assert format_improved_text(None) == ""
