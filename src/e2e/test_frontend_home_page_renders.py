# src/e2e/test_frontend_home_page_renders.py

import pytest
from essaysync_web.web import app as flask_app


@pytest.mark.e2e
def test_frontend_home_page_renders():
    client = flask_app.test_client()
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "essay comparison" in html
    assert "/api/compare" in html
