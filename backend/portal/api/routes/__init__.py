"""Route Modules: one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Each handler makes exactly one Storage call
    - Any failure other than schema validation becomes OperationError with a
      static message; the cause is logged, not returned

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
