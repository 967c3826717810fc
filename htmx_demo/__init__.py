"""Example FastAPI app showing the htmx_headers helpers in use."""
