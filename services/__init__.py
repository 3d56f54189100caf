"""Application services over the clinic storage.

Submodules are imported directly, e.g.::

    from services import team_service as ts
    from services.media_store import MediaStore
"""

__all__: list[str] = []
