"""API Layer — FastAPI routes, response envelope, CORS, and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return the {status, message|data} envelope
"""
