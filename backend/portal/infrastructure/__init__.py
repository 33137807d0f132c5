"""Infrastructure: IO adapters (database sessions, storage, logging).

Invariants:
    - Everything that touches the store lives here; core/ stays pure
"""
