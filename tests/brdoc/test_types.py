"""Unit tests for document validation type definitions."""

import pytest

from brdoc.types import (
    DecisionStatus,
    DocumentKind,
    HealthCardVariant,
    InvalidDocumentError,
    RejectionReason,
    ValidationResult,
)


class TestDocumentKind:
    """Test DocumentKind enum."""

    def test_enum_values(self):
        """Test enum has the expected string values."""
        assert DocumentKind.CPF.value == "cpf"
        assert DocumentKind.CREDIT_CARD.value == "credit_card"
        assert DocumentKind.GS1_BARCODE.value == "gs1_barcode"
        assert len(DocumentKind) == 10

    def test_from_value(self):
        """Test resolution from strings and members."""
        assert DocumentKind.from_value("renavam") == DocumentKind.RENAVAM
        assert DocumentKind.from_value(" Health_Card ") == DocumentKind.HEALTH_CARD
        assert DocumentKind.from_value(DocumentKind.RG) is DocumentKind.RG

    def test_from_value_unknown(self):
        """Test unknown strings raise ValueError listing the known kinds."""
        with pytest.raises(ValueError, match="expected one of: cpf"):
            DocumentKind.from_value("ie")


class TestHealthCardVariant:
    """Test HealthCardVariant enum."""

    def test_enum_values(self):
        """Test enum has correct values."""
        assert HealthCardVariant.DEFINITIVE.value == "definitive"
        assert HealthCardVariant.PROVISIONAL.value == "provisional"


class TestValidationResult:
    """Test ValidationResult dataclass."""

    def test_pass_result(self):
        """Test a passing result."""
        result = ValidationResult(
            decision=DecisionStatus.PASS,
            kind=DocumentKind.CPF,
            number="085.668.830-47",
        )
        assert result.is_pass() is True
        assert result.is_reject() is False
        assert result.digits == []
        assert result.rejection_reason is None

    def test_reject_result(self):
        """Test a rejected result with reason."""
        reason = RejectionReason(
            code="DOC-E004",
            constant="CHECK_DIGIT_MISMATCH",
            message="Invalid CPF",
        )
        result = ValidationResult(
            decision=DecisionStatus.REJECT,
            kind=DocumentKind.CPF,
            number="085.668.830-48",
            rejection_reason=reason,
        )
        assert result.is_reject() is True
        assert result.rejection_reason.severity == "ERROR"


class TestInvalidDocumentError:
    """Test InvalidDocumentError exception."""

    def test_attributes(self):
        """Test the error keeps kind, number and message."""
        error = InvalidDocumentError(DocumentKind.PIS, "123", "Invalid PIS number")
        assert error.kind == DocumentKind.PIS
        assert error.number == "123"
        assert error.message == "Invalid PIS number"
        assert str(error) == "Invalid PIS number"
        assert isinstance(error, ValueError)
