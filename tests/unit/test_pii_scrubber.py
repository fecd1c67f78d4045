from privacy_relay.redaction.models import Artifact
from privacy_relay.redaction.pii_scrubber import PiiScrubber, scrub_pii


class TestEmail:
    def test_replaces_email_addresses(self) -> None:
        result = scrub_pii("Contact john@example.com for details.")
        assert result.scrubbed_text == "Contact [EMAIL_1] for details."
        assert result.count == 1

    def test_same_email_reuses_tag(self) -> None:
        result = scrub_pii("Email john@test.com and also john@test.com again.")
        assert result.scrubbed_text.count("[EMAIL_1]") == 2
        assert result.count == 1

    def test_different_emails_get_different_numbers(self) -> None:
        result = scrub_pii("Contact a@test.com and b@test.com.")
        assert "[EMAIL_1]" in result.scrubbed_text
        assert "[EMAIL_2]" in result.scrubbed_text
        assert result.count == 2


class TestDanishIdentifiers:
    def test_replaces_iban(self) -> None:
        result = scrub_pii("Payment to DK50 0040 0440 1162 43.")
        assert result.scrubbed_text == "Payment to [IBAN_1]."

    def test_replaces_compact_iban(self) -> None:
        assert scrub_pii("Konto DK5000400440116243").scrubbed_text == "Konto [IBAN_1]"

    def test_replaces_cvr(self) -> None:
        assert scrub_pii("Company CVR: DK12345678.").scrubbed_text == "Company CVR: [CVR_1]."

    def test_replaces_cvr_with_separator(self) -> None:
        result = scrub_pii("CVR DK-12345678 and dk 87654321")
        assert result.scrubbed_text == "CVR [CVR_1] and [CVR_2]"

    def test_replaces_cpr(self) -> None:
        assert scrub_pii("CPR: 010190-1234 is sensitive.").scrubbed_text == (
            "CPR: [CPR_1] is sensitive."
        )

    def test_replaces_postal_code_and_city(self) -> None:
        assert scrub_pii("Address: 2100 København").scrubbed_text == "Address: [POSTAL_1]"

    def test_replaces_postal_code_after_comma(self) -> None:
        result = scrub_pii("Vesterbrogade 3, 1620 København V")
        assert result.scrubbed_text == "Vesterbrogade 3, [POSTAL_1] V"

    def test_replaces_postal_code_at_line_start(self) -> None:
        result = scrub_pii("Acme ApS\n8000 Aarhus\nDenmark")
        assert result.scrubbed_text == "Acme ApS\n[POSTAL_1]\nDenmark"

    def test_cvr_lookalike_in_email_is_scrubbed_as_email(self) -> None:
        result = scrub_pii("Mail dk12345678@firm.dk")
        assert result.scrubbed_text == "Mail [EMAIL_1]"
        assert [a.type for a in result.artifacts] == ["EMAIL"]


class TestPreservedValues:
    def test_plain_amounts_are_kept(self) -> None:
        result = scrub_pii("The budget is 50000 DKK.")
        assert result.scrubbed_text == "The budget is 50000 DKK."
        assert result.count == 0

    def test_four_digit_amount_with_currency_is_kept(self) -> None:
        text = "A fee of 5000 DKK or 5000 Kr per month."
        assert scrub_pii(text).scrubbed_text == text

    def test_amount_followed_by_capitalised_word_is_kept(self) -> None:
        text = "The fee is 5000 Danish kroner, payable in 2026 Quarterly."
        result = scrub_pii(text)
        assert result.scrubbed_text == text
        assert result.count == 0

    def test_year_followed_by_sentence_is_kept(self) -> None:
        text = "Signed in 2026 The parties agree to the terms."
        assert scrub_pii(text).scrubbed_text == text

    def test_year_before_month_is_kept(self) -> None:
        text = "Work starts in 2026 March.\n2026 March is the deadline."
        assert scrub_pii(text).scrubbed_text == text

    def test_iso_dates_are_kept(self) -> None:
        text = "Delivery by 2026-06-30."
        assert scrub_pii(text).scrubbed_text == text

    def test_empty_text(self) -> None:
        result = scrub_pii("")
        assert result.scrubbed_text == ""
        assert result.count == 0
        assert result.artifacts == []


class TestArtifacts:
    def test_records_artifacts_in_category_order(self) -> None:
        result = PiiScrubber().scrub("Mail bo@firm.dk, CPR 010190-1234.")
        assert result.scrubbed_text == "Mail [EMAIL_1], CPR [CPR_1]."
        assert result.artifacts == [
            Artifact(type="CPR", original="010190-1234", replacement="[CPR_1]"),
            Artifact(type="EMAIL", original="bo@firm.dk", replacement="[EMAIL_1]"),
        ]
        assert result.count == 2

    def test_numbering_restarts_per_call(self) -> None:
        scrubber = PiiScrubber()
        scrubber.scrub("a@test.com b@test.com")
        assert scrubber.scrub("c@test.com").scrubbed_text == "[EMAIL_1]"
