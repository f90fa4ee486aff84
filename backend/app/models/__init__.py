"""ORM Models — SQLAlchemy declarative models for the write and read sides.

Invariants:
    - All models inherit from Base (db/base.py)
    - Airport is the flight-side aggregate; PassengerReadModel is a query-side projection

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from app.models.airport import Airport  # noqa: F401
from app.models.passenger import PassengerReadModel  # noqa: F401
