# src/e2e/test_highlight_channel.py

from essaysync.highlight import HighlightChannel
from essaysync.models import Handle, INTRO, body


def test_publish_notifies_subscribers_and_last_writer_wins():
    ch = HighlightChannel()
    seen = []
    ch.subscribe(seen.append)

    a = Handle("original", INTRO, 0)
    b = Handle("improved", body(1), 2)
    ch.publish(a)
    ch.publish(b)
    assert ch.active == b
    assert seen == [a, b]


def test_republishing_same_handle_is_silent():
    ch = HighlightChannel()
    seen = []
    ch.subscribe(seen.append)
    h = Handle("original", INTRO, 1)
    ch.publish(h)
    ch.publish(h)
    assert seen == [h]


def test_clear_and_unsubscribe():
    ch = HighlightChannel()
    seen = []
    unsubscribe = ch.subscribe(seen.append)
    ch.publish(Handle("original", INTRO, 0))
    ch.clear()
    assert ch.active is None
    unsubscribe()
    unsubscribe()  # second call is harmless
    ch.publish(Handle("original", INTRO, 1))
    assert seen == [Handle("original", INTRO, 0), None]


def test_is_highlighted_covers_active_and_counterpart_only():
    ch = HighlightChannel()
    ch.publish(Handle("original", body(2), 1))
    assert ch.is_highlighted(Handle("original", body(2), 1))
    assert ch.is_highlighted(Handle("improved", body(2), 1))
    assert not ch.is_highlighted(Handle("improved", body(2), 0))
    assert not ch.is_highlighted(Handle("improved", INTRO, 1))
    ch.clear()
    assert not ch.is_highlighted(Handle("original", body(2), 1))


def test_separate_channels_do_not_share_state():
    one, two = HighlightChannel(), HighlightChannel()
    one.publish(Handle("original", INTRO, 0))
    assert two.active is None
