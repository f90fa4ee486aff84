"""Route Modules — one file per service/resource.

Invariants:
    - Each module defines its own APIRouter with a relative prefix and tags
    - Routes never contain business logic (delegate to the mediator)
"""
