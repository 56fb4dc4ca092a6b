# src/e2e/test_drafts_store.py

from pathlib import Path
import threading
import pytest

from essaysync import config as CFG
from essaysync.DB.api import make_store
from essaysync.drafts import save_draft, get_draft, clear_draft, has_draft


@pytest.fixture(params=["memory", "sqlite"])
def store(request, tmp_path: Path):
    dsn = "memory://" if request.param == "memory" else f"sqlite:///{tmp_path / 'drafts.sqlite'}"
    s = make_store(dsn)
    yield s
    s.close()


def test_save_then_get(store):
    save_draft(store, essay="My essay.", topic="Phones", topic_source="custom",
               custom_topic="Phones", selected_topic_id="t1", now=1000.0)
    d = get_draft(store, now=1000.0 + 60)
    assert d is not None
    assert d.essay == "My essay." and d.topic_source == "custom" and d.selected_topic_id == "t1"
    assert has_draft(store, now=1060.0)


def test_expired_draft_is_cleared(store):
    save_draft(store, essay="Old.", now=0.0)
    assert get_draft(store, now=CFG.DRAFT_MAX_AGE_SECONDS + 1) is None
    assert store.count() == 0


def test_clear_draft(store):
    save_draft(store, essay="x", now=5.0)
    clear_draft(store)
    assert get_draft(store, now=5.0) is None
    clear_draft(store)  # clearing nothing is fine


def test_saving_again_overwrites(store):
    save_draft(store, essay="first", now=1.0)
    save_draft(store, essay="second", now=2.0)
    assert store.count() == 1
    assert get_draft(store, now=2.0).essay == "second"


def test_bad_topic_source_rejected(store):
    with pytest.raises(ValueError):
        save_draft(store, essay="x", topic_source="imported")


def test_sqlite_draft_survives_reopen(tmp_path: Path):
    dsn = f"sqlite:///{tmp_path / 'nested' / 'drafts.sqlite'}"
    s1 = make_store(dsn)
    save_draft(s1, essay="kept", now=10.0)
    s1.close()
    s2 = make_store(dsn)
    try:
        assert get_draft(s2, now=11.0).essay == "kept"
    finally:
        s2.close()


def test_read_failure_degrades_to_none(tmp_path: Path):
    s = make_store(f"sqlite:///{tmp_path / 'd.sqlite'}")
    s.close()  # further queries raise sqlite3.ProgrammingError
    assert get_draft(s, now=0.0) is None
    clear_draft(s)


def test_unknown_dsn():
    with pytest.raises(ValueError):
        make_store("redis://localhost")


def test_sqlite_draft_readable_from_another_thread(tmp_path: Path):
    # the web app opens the store on the main thread and serves requests on workers
    s = make_store(f"sqlite:///{tmp_path / 'd.sqlite'}")
    save_draft(s, essay="threaded", now=1.0)
    seen = []
    worker = threading.Thread(target=lambda: seen.append(get_draft(s, now=2.0)))
    worker.start()
    worker.join()
    s.close()
    assert seen and seen[0] is not None
    assert seen[0].essay == "threaded"
