# api/__init__.py
from api.server import (
    create_app,
    main,
    VERSION,
)

__all__ = [
    "create_app",
    "main",
    "VERSION",
]
