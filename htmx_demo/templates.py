"""
htmx_demo.templates

Purpose:
    HTML pages and partials for the demo routes.

Notes:
    - Plain string rendering; every interpolated value goes through html.escape.
    - The partials are what htmx swaps into the page, so their ids must match
      the HX-Retarget selectors the routes send.
"""

from __future__ import annotations

from html import escape

from htmx_demo.contracts.demo_paths import DemoPaths

HTMX_SCRIPT_URL = "https://unpkg.com/htmx.org@1.9.12"

ERROR_ELEMENT_ID = "error"
COUNTER_INPUT_ID = "counter"

_paths = DemoPaths()


def _page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{escape(title)}</title>
  <script src="{HTMX_SCRIPT_URL}"></script>
</head>
<body>
{body}
</body>
</html>
"""


def contact_page() -> str:
    return _page(
        "Contact",
        f"""  <h1>Send us a message</h1>
  <div id="{ERROR_ELEMENT_ID}"></div>
  <form hx-post="{_paths.send}" hx-swap="none">
    <label>Subject <input type="text" name="subject"></label>
    <label>Message <textarea name="message"></textarea></label>
    <button type="submit">Send</button>
  </form>""",
    )


def error_partial(message: str) -> str:
    return f'<div id="{ERROR_ELEMENT_ID}" class="error">{escape(message)}</div>'


def thank_you_page() -> str:
    return _page(
        "Thank you",
        f"""  <h1>Thank you!</h1>
  <p>Your message has been sent. <a href="{_paths.index}">Send another</a>.</p>""",
    )


def counter_page(value: int = 0) -> str:
    # showAlert arrives via HX-Trigger-After-Swap with the message as event detail.
    return _page(
        "Counter",
        f"""  <h1>Counter</h1>
  <form hx-post="{_paths.increment}" hx-target="#{COUNTER_INPUT_ID}" hx-swap="outerHTML">
    {counter_input_partial(value)}
    <button type="submit">Increment</button>
    <button type="button" hx-get="{_paths.counter}" hx-target="#{COUNTER_INPUT_ID}" hx-swap="outerHTML">Reset</button>
  </form>
  <script>
    document.body.addEventListener("showAlert", function (evt) {{
      alert(evt.detail.value);
    }});
  </script>""",
    )


def counter_input_partial(value: int) -> str:
    return f'<input id="{COUNTER_INPUT_ID}" type="number" name="value" value="{escape(str(value))}" readonly>'
