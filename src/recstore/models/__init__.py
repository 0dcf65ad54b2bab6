"""Record models."""

from recstore.models._base import BaseRecord, HasId
from recstore.models.pokemon import Pokemon

__all__ = [
    "BaseRecord",
    "HasId",
    "Pokemon",
]
