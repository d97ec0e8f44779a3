"""Dependency Injection package."""
from .container import (
    Container,
    get_container,
    reset_container
)

__all__ = [
    'Container',
    'get_container',
    'reset_container'
]
