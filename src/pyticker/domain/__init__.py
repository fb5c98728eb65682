from pyticker.domain.errors import InvalidConfiguration
from pyticker.domain.types import Duration

__all__ = ["Duration", "InvalidConfiguration"]
