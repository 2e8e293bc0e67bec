"""Pydantic Schemas — presentation shapes for reconciled articles.

Invariants:
    - Schemas are built from core records, never from ORM rows directly

Design Decisions:
    - Separate from models: schemas are output contracts, models are persistence
"""
