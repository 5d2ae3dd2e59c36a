"""Dataset generation."""

from .generator import generate_dataset

__all__ = [
    'generate_dataset'
]
