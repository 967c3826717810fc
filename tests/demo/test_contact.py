"""
tests.demo.test_contact

Purpose:
    Contact form demo: retarget/reswap on validation failure, HX-Redirect on success.
"""

from __future__ import annotations


def test_contact_page_renders(client) -> None:
    r = client.get("/")
    assert r.status_code == 200
    assert 'hx-post="/send"' in r.text
    assert 'id="error"' in r.text
    assert r.headers.get("x-request-id")


def test_send_missing_fields_retargets_error(client) -> None:
    r = client.post("/send", data={"subject": "", "message": "hi"}, headers={"HX-Request": "true"})
    assert r.status_code == 200, r.text
    assert r.headers["hx-retarget"] == "#error"
    assert r.headers["hx-reswap"] == "outerHTML"
    assert "hx-redirect" not in r.headers
    assert "You must provide a subject and a message." in r.text


def test_send_with_no_form_body(client) -> None:
    r = client.post("/send")
    assert r.status_code == 200
    assert r.headers["hx-retarget"] == "#error"


def test_send_success_redirects(client) -> None:
    r = client.post("/send", data={"subject": "Hello", "message": "World"})
    assert r.status_code == 200, r.text
    assert r.headers["hx-redirect"] == "/thankyou"
    assert "hx-retarget" not in r.headers
    assert "hx-reswap" not in r.headers


def test_thank_you_page(client) -> None:
    r = client.get("/thankyou")
    assert r.status_code == 200
    assert "Thank you" in r.text
