# src/e2e/test_resolve_handle.py

import pytest

from essaysync.align import resolve_corresponding_handle, role_from_container_id, parse_handle
from essaysync.models import Handle, INTRO, CONCLUSION, UNKNOWN, body


@pytest.mark.parametrize("cid, expected", [
    ("original-intro", "intro"),
    ("improved-introduction", "intro"),
    ("original-conclusion", "conclusion"),
    ("original-body-2", "body2"),
    ("improved-body-11", "body11"),
    ("original-body", "body"),
    ("paragraph-3", "unknown"),
    ("", "unknown"),
])
def test_role_from_container_id(cid, expected):
    assert str(role_from_container_id(cid)) == expected


def test_role_is_a_tagged_value_not_a_string():
    assert role_from_container_id("x-body-2") == body(2)
    assert role_from_container_id("x-intro") is INTRO
    assert role_from_container_id(None) is UNKNOWN


def test_resolves_same_index_same_role_other_side():
    h = resolve_corresponding_handle("original-body-2-sentence-1", "improved-body-2", True)
    assert h == Handle("improved", body(2), 1)
    assert h.element_id == "improved-body-2-sentence-1"


def test_resolution_is_its_own_inverse():
    start = Handle("original", CONCLUSION, 4)
    there = resolve_corresponding_handle(start, "improved-conclusion", True)
    back = resolve_corresponding_handle(there, "original-conclusion", False)
    assert back == start


def test_unknown_role_gives_no_match():
    assert resolve_corresponding_handle("original-intro-sentence-0", "sidebar", True) is None


@pytest.mark.parametrize("bad", ["original-intro-sentence-x", "nonsense", "", None, 42])
def test_unparseable_index_gives_no_match(bad):
    assert resolve_corresponding_handle(bad, "improved-intro", True) is None


def test_negative_index_handle_gives_no_match():
    assert resolve_corresponding_handle(Handle("original", INTRO, -1), "improved-intro", True) is None


def test_bare_sentence_id_uses_current_paragraph_role():
    h = resolve_corresponding_handle("sentence-3", "original-intro", False)
    assert h == Handle("original", INTRO, 3)


def test_different_role_in_active_handle_does_not_match():
    assert resolve_corresponding_handle("original-body-1-sentence-0", "improved-intro", True) is None


def test_index_past_counterpart_length_still_resolves():
    # the counterpart paragraph may only have 3 sentences; the renderer no-ops
    h = resolve_corresponding_handle(Handle("original", INTRO, 5), "improved-intro", True)
    assert h == Handle("improved", INTRO, 5)


def test_element_id_round_trips_through_parse_handle():
    h = Handle("improved", body(3), 2)
    assert parse_handle(h.element_id) == h
    assert parse_handle("improved-sidebar-sentence-2") is None
