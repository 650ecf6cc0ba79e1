"""Storage for processed business cards."""

from .card_repository import CardRepository

__all__ = ['CardRepository']
