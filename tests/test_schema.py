"""Tests for candidate and contact record models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from cardreader.schema import CONTACT_FIELDS, CandidateRecord, ContactRecord


class TestCandidateRecord:
    def test_defaults_unset(self):
        candidate = CandidateRecord()
        assert candidate.is_empty()

    def test_accepts_untrusted_values(self):
        candidate = CandidateRecord(name="<script>", phone="0000000")
        assert candidate.name == "<script>"
        assert not candidate.is_empty()

    def test_immutable(self):
        candidate = CandidateRecord(name="Jane")
        with pytest.raises(ValidationError):
            candidate.name = "John"

    def test_rejects_unknown_fields(self):
        with pytest.raises(ValidationError):
            CandidateRecord(title="CEO")


class TestContactRecord:
    """Test that trusted records refuse unsanitized values."""

    def test_all_unset_is_valid(self):
        record = ContactRecord()
        assert record.is_empty()
        assert record.id is None
        assert record.created_at.tzinfo is not None

    def test_valid_record(self):
        record = ContactRecord(
            name="Jane Doe",
            email="jane@example.com",
            phone="+14155550100",
            company="Acme Ltd",
        )
        assert record.contact_fields() == {
            "name": "Jane Doe",
            "email": "jane@example.com",
            "phone": "+14155550100",
            "company": "Acme Ltd",
        }

    @pytest.mark.parametrize("field,value", [
        ("name", "<b>Jane</b>"),
        ("name", "x" * 101),
        ("name", "   "),
        ("company", "Smith & Sons"),
        ("email", "not-an-email"),
        ("email", "'jane'@example.com"),
        ("phone", "0000000"),
        ("phone", "415-555-0100"),
        ("phone", "123"),
    ])
    def test_refuses_untrusted_values(self, field, value):
        with pytest.raises(ValidationError):
            ContactRecord(**{field: value})

    def test_immutable(self):
        record = ContactRecord(name="Jane Doe")
        with pytest.raises(ValidationError):
            record.name = "<script>"

    def test_naive_timestamp_is_utc(self):
        record = ContactRecord(created_at=datetime(2024, 5, 1, 12, 0, 0))
        assert record.created_at.tzinfo == timezone.utc

    def test_with_identity(self):
        record = ContactRecord(name="Jane Doe", phone="4155550100")
        stored = record.with_identity(7)

        assert stored.id == 7
        assert stored.name == "Jane Doe"
        assert stored.phone == "4155550100"
        assert stored.created_at == record.created_at
        assert record.id is None, "Original record must not change"

    def test_to_json_dict(self):
        created = datetime(2024, 5, 1, 12, 0, 0, tzinfo=timezone.utc)
        record = ContactRecord(id=3, name="Jane Doe", created_at=created)

        result = record.to_json_dict()

        assert result["id"] == 3
        assert result["created_at"] == "2024-05-01T12:00:00+00:00"
        for field in CONTACT_FIELDS:
            assert field in result
