"""Core Layer — pure reconciliation logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, infrastructure/, models/ or db/
    - All functions are pure and deterministic

Design Decisions:
    - Functional core separated from imperative shell: the ORM query and the
      in-memory reconciler share the same value records
"""
