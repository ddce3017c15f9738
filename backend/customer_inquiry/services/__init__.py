"""Services Layer — the imperative shell around the pure inquiry core.

Invariants:
    - Services own IO orchestration (store calls, timeouts, logging)
    - Services return core outcome types; HTTP concerns stay in api/
"""
