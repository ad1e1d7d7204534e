from .metadata import resolve_identity
from .autoscaling import resolve_group

__all__ = [
    "resolve_identity",
    "resolve_group",
]
