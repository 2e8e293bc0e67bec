"""Services Layer — imperative shell around the pure reconciler.

Invariants:
    - Services own all IO (sessions, logging); core/ stays pure
"""
