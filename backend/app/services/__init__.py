"""Service Layer — request handlers, DTO mapping, and the mediator that runs them.

Invariants:
    - Handlers receive an AsyncSession and return an Outcome; they never commit
    - Only mediator.py decides commit/rollback
"""
