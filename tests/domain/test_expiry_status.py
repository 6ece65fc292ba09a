"""Tests for expiry state, kind and status value objects."""

from __future__ import annotations

from datetime import date

import pytest

from ihic.domain.value_objects import ExpiryKind, ExpiryState, ExpiryStatus


class TestExpiryState:
    """Tests for ExpiryState enum."""

    def test_alerting_states(self) -> None:
        """Only expired and near-expiry states raise alerts."""
        assert ExpiryState.EXPIRED.requires_alert is True
        assert ExpiryState.NEAR_EXPIRY.requires_alert is True
        assert ExpiryState.VALID.requires_alert is False
        assert ExpiryState.NOT_APPLICABLE.requires_alert is False
        assert ExpiryState.INVALID.requires_alert is False

    def test_css_classes(self) -> None:
        """Near expiry shares the expired styling."""
        assert ExpiryState.EXPIRED.css_class == "expired"
        assert ExpiryState.NEAR_EXPIRY.css_class == "expired"
        assert ExpiryState.VALID.css_class == "valid"
        assert ExpiryState.NOT_APPLICABLE.css_class == "na-value"
        assert ExpiryState.INVALID.css_class == "invalid-value"

    def test_state_string_representation(self) -> None:
        """States should have lowercase string representation."""
        assert str(ExpiryState.NEAR_EXPIRY) == "near_expiry"
        assert str(ExpiryState.NOT_APPLICABLE) == "not_applicable"
        assert ExpiryState.EXPIRED.value == "expired"


class TestExpiryKind:
    """Tests for ExpiryKind enum."""

    def test_item_alert_text(self) -> None:
        """Item alerts use the item wording."""
        assert ExpiryKind.ITEM.alert_text(expired=True) == "Item Expired. Contact PIC"
        assert ExpiryKind.ITEM.alert_text(expired=False) == "Nearly Expired. Contact PIC"

    def test_certificate_alert_text(self) -> None:
        """Certificate alerts use the certificate wording."""
        assert ExpiryKind.CERTIFICATE.alert_text(expired=True) == "Certificate Expired. Contact PIC"
        assert (
            ExpiryKind.CERTIFICATE.alert_text(expired=False)
            == "Certificate Nearly Expired. Contact PIC"
        )

    def test_display_name(self) -> None:
        """Kinds have human-readable names."""
        assert ExpiryKind.ITEM.display_name == "Item"
        assert ExpiryKind.CERTIFICATE.display_name == "Certificate"


class TestExpiryStatus:
    """Tests for ExpiryStatus value object."""

    def test_expired_text(self) -> None:
        """Expired statuses read '(Expired)'."""
        status = ExpiryStatus.dated(ExpiryState.EXPIRED, date(2025, 5, 22), 0)
        assert status.text == "(Expired)"
        assert status.is_expired is True
        assert status.requires_alert is True

    def test_near_expiry_text(self) -> None:
        """Near-expiry statuses show the days remaining."""
        status = ExpiryStatus.dated(ExpiryState.NEAR_EXPIRY, date(2025, 5, 22), 3)
        assert status.text == "(Expires in 3 days)"
        assert status.is_expired is False
        assert status.alert_text(ExpiryKind.ITEM) == "Nearly Expired. Contact PIC"

    def test_single_day_text(self) -> None:
        """One day remaining uses the singular."""
        status = ExpiryStatus.dated(ExpiryState.NEAR_EXPIRY, date(2025, 5, 22), 1)
        assert status.text == "(Expires in 1 day)"

    def test_valid_has_no_alert(self) -> None:
        """Valid statuses show days remaining and no alert."""
        status = ExpiryStatus.dated(ExpiryState.VALID, date(2025, 6, 30), 39)
        assert status.text == "(Expires in 39 days)"
        assert status.css_class == "valid"
        assert status.alert_text(ExpiryKind.CERTIFICATE) is None

    def test_not_applicable(self) -> None:
        """Not-applicable statuses carry no date and no text."""
        status = ExpiryStatus.not_applicable()
        assert status.text == ""
        assert status.expiry_date is None
        assert status.days_remaining is None
        assert status.css_class == "na-value"

    def test_invalid_keeps_raw(self) -> None:
        """Invalid statuses keep the original text."""
        status = ExpiryStatus.invalid("31/02/2025")
        assert status.raw == "31/02/2025"
        assert status.text == "(Unrecognised date)"
        assert status.requires_alert is False

    def test_status_is_frozen(self) -> None:
        """Statuses should be immutable."""
        status = ExpiryStatus.not_applicable()
        with pytest.raises(AttributeError):
            status.days_remaining = 3  # type: ignore[misc]
