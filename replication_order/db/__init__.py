"""Database Package — declarative base and session factory.

Invariants:
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite driver by default: the store is a throwaway in-memory database
"""
