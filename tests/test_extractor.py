"""Tests for line-order field extraction."""

from cardreader.extractors import CardTextExtractor, extract, extract_phone_number, normalize_lines
from cardreader.schema import CandidateRecord


class TestNormalization:
    """Test line splitting and input caps."""

    def test_empty_and_none(self):
        assert normalize_lines("") == []
        assert normalize_lines(None) == []
        assert normalize_lines("  \n\r\n \t ") == []

    def test_trims_and_drops_empty_lines(self):
        lines = normalize_lines("  Jane Doe  \r\n\r\n\tjane@example.com\n\n")
        assert lines == ["Jane Doe", "jane@example.com"]

    def test_keeps_first_twenty_lines(self):
        text = "\n".join(f"line {i}" for i in range(30))
        lines = normalize_lines(text)
        assert len(lines) == 20
        assert lines[0] == "line 0"
        assert lines[-1] == "line 19"

    def test_truncates_text_to_ten_thousand_chars(self):
        text = "x" * 9995 + "\njane@example.com"
        lines = normalize_lines(text)
        assert lines[-1] == "jane", f"Text should be cut at 10,000 chars, got: {lines[-1]}"


class TestPhoneExtraction:
    """Test the per-line phone number sub-algorithm."""

    def test_plain_digit_run(self):
        assert extract_phone_number("Tel: (415) 555-0100") == "4155550100"

    def test_keeps_leading_plus(self):
        assert extract_phone_number("+1 415 555 0100") == "+14155550100"

    def test_plus_reattached_after_digit_run(self):
        assert extract_phone_number("+000 0000") == "+0000000"

    def test_international_without_word_boundary(self):
        # "Phone" glued to the digits defeats the word-bounded run
        assert extract_phone_number("Phone 415.555.0123") == "4155550123"

    def test_formatted_number_on_original_line(self):
        # tabs survive separator removal, only the third pattern sees through them
        assert extract_phone_number("012\t345\t67890") == "01234567890"

    def test_no_digits(self):
        assert extract_phone_number("Jane Doe") is None

    def test_short_numbers_ignored(self):
        assert extract_phone_number("Suite 12, Floor 3") is None

    def test_only_first_hundred_chars_scanned(self):
        line = "x" * 95 + " 4155550100"
        assert extract_phone_number(line) is None


class TestCardTextExtractor:
    """Test field selection over whole cards."""

    def test_empty_input(self):
        for text in ("", None, "\n\n   \n"):
            candidate = extract(text)
            assert isinstance(candidate, CandidateRecord)
            assert candidate.is_empty(), f"Expected no candidates for {text!r}"

    def test_typical_card(self, sample_card_text):
        candidate = CardTextExtractor(sample_card_text).extract()

        assert candidate.name == "John Smith"
        assert candidate.email == "john@example.com"
        assert candidate.phone == "+14155550100"
        assert candidate.company == "Acme Corp Inc"

    def test_first_email_wins(self):
        candidate = extract("first@example.com\nsecond@example.com")
        assert candidate.email == "first@example.com"

    def test_email_inside_line(self):
        candidate = extract("Email: Jane.Doe+work@mail.example.org")
        assert candidate.email == "Jane.Doe+work@mail.example.org"

    def test_overlong_email_ignored(self):
        long_email = "a" * 95 + "@example.com"
        candidate = extract(f"{long_email}\nshort@example.com")
        assert candidate.email == "short@example.com"

    def test_invalid_phone_line_falls_through(self):
        candidate = extract("999 555 1234\n415 555 0100")
        assert candidate.phone == "4155550100"

    def test_plus_prefixed_placeholder_falls_through(self):
        candidate = extract("+999 555 1234\n+1 415 555 0100")
        assert candidate.phone == "+14155550100"

    def test_all_zero_phone_rejected(self):
        candidate = extract("0000000")
        assert candidate.is_empty(), f"Expected no candidates, got: {candidate}"

    def test_company_keyword_case_insensitive(self):
        candidate = extract("Jane Doe\nMUELLER GMBH")
        assert candidate.company == "MUELLER GMBH"
        assert candidate.name == "Jane Doe"

    def test_company_truncated(self):
        line = "Global Consulting " + "x" * 150
        candidate = extract(line)
        assert candidate.company == line[:100]
        assert len(candidate.company) == 100

    def test_company_not_equal_to_email(self):
        # "sales@acme.co" carries the keyword "co" but is the email itself
        candidate = extract("sales@acme.co")
        assert candidate.email == "sales@acme.co"
        assert candidate.company is None

    def test_email_line_with_label_can_be_company(self):
        candidate = extract("Email: jane@example.com")
        assert candidate.email == "jane@example.com"
        assert candidate.company == "Email: jane@example.com"

    def test_short_word_keyword_claims_name_line(self):
        # "Nicole" contains "co": the name line is read as company
        candidate = extract("Nicole Brown\nAcme")
        assert candidate.company == "Nicole Brown"
        assert candidate.name == "Acme"

    def test_name_needs_more_than_two_chars(self):
        candidate = extract("Al\nBob Stone")
        assert candidate.name == "Bob Stone"

    def test_name_skips_email_and_phone_lines(self):
        candidate = extract("jane@example.org\n(415) 555-0100\nJane Doe")
        assert candidate.name == "Jane Doe"

    def test_oversized_line_skipped(self):
        prefix = "Widget Corp contact@widget.com 4155550123 "
        line = prefix + "z" * (250 - len(prefix))
        assert len(line) == 250

        candidate = extract(f"{line}\nJane Doe")

        assert candidate.email is None
        assert candidate.phone is None
        assert candidate.company is None
        assert candidate.name == "Jane Doe"

    def test_line_cap_hides_late_fields(self):
        filler = "\n".join(["ab"] * 20)
        assert extract(f"{filler}\njane@example.com").email is None

        filler = "\n".join(["ab"] * 19)
        assert extract(f"{filler}\njane@example.com").email == "jane@example.com"

    def test_markup_line_is_raw_candidate(self):
        candidate = extract("<script>alert(1)</script>\nAcme Ltd")
        assert candidate.name == "<script>alert(1)</script>"
        assert candidate.company == "Acme Ltd"

    def test_candidates_are_substrings(self, sample_card_text):
        candidate = extract(sample_card_text)
        for value in (candidate.name, candidate.email, candidate.company):
            assert value in sample_card_text
