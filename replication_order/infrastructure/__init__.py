"""Infrastructure Layer — database lifecycle and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic other than errors
    - All SQLAlchemy exceptions surface as core DatabaseError
"""
