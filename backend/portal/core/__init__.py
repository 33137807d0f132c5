"""Core Layer: domain types, errors, pure analytics math and the storage contract.

Invariants:
    - No module in core/ imports from api/ or infrastructure/
    - No IO here; the Storage protocol only names the async boundary

Design Decisions:
    - Functional core separated from imperative shell (infrastructure/ does the IO)
"""
