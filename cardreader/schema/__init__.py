"""Schema definitions for extracted business card data."""

from .models import CandidateRecord, ContactRecord, CONTACT_FIELDS

__all__ = ['CandidateRecord', 'ContactRecord', 'CONTACT_FIELDS']
