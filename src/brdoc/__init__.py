"""Check-digit validation for Brazilian document numbers.

Validates CPF, CNPJ, payment cards, voter registrations, driver licenses
(CNH), vehicle registrations (RENAVAM), identity cards (RG), health cards
(CNS), GS1 barcodes and PIS/PASEP/NIT numbers by recomputing their check
digits.

Core Components:
    - digits: Digit extraction and left padding
    - checksum: Weighted-sum engine and modulo-11 transforms
    - documents: One validator class per document type
    - processor: Staged validation with structured results
    - config_loader: Configuration loading with Pydantic validation

Example:
    >>> from brdoc import Cpf, DocumentProcessor
    >>> Cpf.is_valid("085.668.830-47")
    True
    >>> result = DocumentProcessor().process("health_card", "184184462180018")
    >>> result.is_pass()
    True
"""

from .checksum import (
    calculate_check_digit,
    calculate_check_digit_mod11,
    eleven_minus_mod11,
    gs1_complement,
    mod_11,
    times_ten_mod11,
)
from .config_loader import (
    Config,
    DocumentsConfig,
    HealthCardConfig,
    LoggingConfig,
    OutputConfig,
    ValidationModuleConfig,
    get_default_config,
    load_config,
)
from .digits import extract_digits, pad_left
from .documents import (
    DOCUMENT_TYPES,
    Cnpj,
    Cpf,
    CreditCard,
    Document,
    DriverLicense,
    Gs1Barcode,
    HealthCard,
    HealthCardType,
    Pis,
    Renavam,
    Rg,
    VoterRegistration,
    get_document_type,
    is_valid_document,
    parse_document,
)
from .processor import DocumentProcessor
from .types import (
    DecisionStatus,
    DocumentKind,
    HealthCardVariant,
    InvalidDocumentError,
    RejectionReason,
    ValidationResult,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "DocumentKind",
    "DecisionStatus",
    "HealthCardVariant",
    "RejectionReason",
    "ValidationResult",
    "InvalidDocumentError",
    # Configuration
    "Config",
    "ValidationModuleConfig",
    "DocumentsConfig",
    "HealthCardConfig",
    "OutputConfig",
    "LoggingConfig",
    "load_config",
    "get_default_config",
    # Digits and checksums
    "extract_digits",
    "pad_left",
    "calculate_check_digit",
    "calculate_check_digit_mod11",
    "mod_11",
    "eleven_minus_mod11",
    "times_ten_mod11",
    "gs1_complement",
    # Documents
    "Document",
    "Cpf",
    "Cnpj",
    "CreditCard",
    "VoterRegistration",
    "DriverLicense",
    "Renavam",
    "Rg",
    "HealthCard",
    "HealthCardType",
    "Gs1Barcode",
    "Pis",
    "DOCUMENT_TYPES",
    "get_document_type",
    "is_valid_document",
    "parse_document",
    # Processing
    "DocumentProcessor",
]
