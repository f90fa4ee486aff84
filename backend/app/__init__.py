"""Travel Booking Application Package — airport commands and passenger queries.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
