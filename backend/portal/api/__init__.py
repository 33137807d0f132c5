"""API Layer: FastAPI routes, dependencies and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON with lower-camel-case keys

Design Decisions:
    - Thin routes: validate, make one Storage call, shape the response
"""
