"""Schemas — Pydantic DTOs at the API boundary.

Invariants:
    - No ORM imports: DTOs are built by services/map_dtos.py
"""
