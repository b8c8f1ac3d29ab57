"""Type definitions for document validation.

This module defines the document kinds handled by the package and the
structures returned by :class:`brdoc.processor.DocumentProcessor`.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class DocumentKind(Enum):
    """Document types with a check-digit validator."""

    CPF = "cpf"  # Cadastro de Pessoas Físicas (tax ID, person)
    CNPJ = "cnpj"  # Cadastro Nacional da Pessoa Jurídica (tax ID, entity)
    CREDIT_CARD = "credit_card"
    VOTER_REGISTRATION = "voter_registration"  # Título de Eleitor
    DRIVER_LICENSE = "driver_license"  # CNH
    RENAVAM = "renavam"  # vehicle registration
    RG = "rg"  # identity registry
    HEALTH_CARD = "health_card"  # Cartão Nacional de Saúde (CNS)
    GS1_BARCODE = "gs1_barcode"
    PIS = "pis"  # PIS/PASEP/NIT

    @classmethod
    def from_value(cls, value: Union[str, "DocumentKind"]) -> "DocumentKind":
        """Resolve a kind from its enum member or string value.

        Raises:
            ValueError: If the string does not name a known kind.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as e:
            known = ", ".join(kind.value for kind in cls)
            raise ValueError(
                f"Unknown document kind: {value!r} (expected one of: {known})"
            ) from e


class HealthCardVariant(Enum):
    """Health card numbering families, selected by the leading digit."""

    DEFINITIVE = "definitive"  # leading 1 or 2
    PROVISIONAL = "provisional"  # leading 7, 8 or 9


class DecisionStatus(Enum):
    """Decision status for a validation result."""

    PASS = "pass"
    REJECT = "reject"


@dataclass
class RejectionReason:
    """Structured rejection reason with error code and context.

    Attributes:
        code: Error code (e.g., "DOC-E004")
        constant: String constant for programmatic checking (e.g., "CHECK_DIGIT_MISMATCH")
        message: Human-readable explanation
        severity: Error severity level ("ERROR" or "WARNING")
    """

    code: str
    constant: str
    message: str
    severity: str = "ERROR"


@dataclass
class ValidationResult:
    """Outcome of validating one candidate number.

    Attributes:
        decision: Final decision (PASS or REJECT)
        kind: Document kind the candidate was checked against
        number: Candidate text exactly as received
        digits: Extracted digits (empty when output.include_digits is off)
        rejection_reason: Structured rejection reason if REJECT
        processing_time_ms: Validation time in milliseconds
    """

    decision: DecisionStatus
    kind: DocumentKind
    number: str
    digits: List[int] = field(default_factory=list)
    rejection_reason: Optional[RejectionReason] = None
    processing_time_ms: float = 0.0

    def is_pass(self) -> bool:
        """Check if decision is PASS."""
        return self.decision == DecisionStatus.PASS

    def is_reject(self) -> bool:
        """Check if decision is REJECT."""
        return self.decision == DecisionStatus.REJECT


class InvalidDocumentError(ValueError):
    """Raised when parsing a candidate that fails its check-digit validation.

    Attributes:
        kind: Document kind that rejected the candidate
        number: Candidate text exactly as received
    """

    def __init__(self, kind: DocumentKind, number: str, message: str):
        super().__init__(message)
        self.kind = kind
        self.number = number
        self.message = message
