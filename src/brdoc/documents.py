"""Check-digit validators for Brazilian document numbers.

Each document type is a frozen dataclass wrapping the caller's text exactly
as received. Validity is never cached: :meth:`Document.validate` recomputes
it from the text on every call, and :meth:`Document.is_valid` does the same
without building an instance.

All validators follow the same shape:

1. Extract the digits the format needs (see :func:`brdoc.digits.extract_digits`)
2. Reject candidates with too few digits
3. Split body and check digits per the format's layout
4. Recompute the check digits (see :mod:`brdoc.checksum`) and compare

Example:
    >>> Cpf.is_valid("085.668.830-47")
    True
    >>> Cnpj("14.572.457/0001-86").validate()
    False
    >>> is_valid_document("credit_card", "5312 8338 4531 6765")
    True
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, List, Optional, Type, Union

from .checksum import (
    calculate_check_digit,
    calculate_check_digit_mod11,
    eleven_minus_mod11,
    gs1_complement,
    identity,
    mod_11,
    times_ten_mod11,
)
from .digits import extract_digits, pad_left
from .types import DocumentKind, HealthCardVariant, InvalidDocumentError

# Multiplier tables, one entry per body digit
CPF_MULTIPLIERS = (10, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_MULTIPLIERS_DV1 = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
CNPJ_MULTIPLIERS_DV2 = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
VOTER_MULTIPLIERS_DV1 = (2, 3, 4, 5, 6, 7, 8, 9)
VOTER_MULTIPLIERS_DV2 = (7, 8, 9)
CNH_MULTIPLIERS_DV1 = (9, 8, 7, 6, 5, 4, 3, 2, 1)
CNH_MULTIPLIERS_DV2 = (1, 2, 3, 4, 5, 6, 7, 8, 9)
RENAVAM_MULTIPLIERS = (3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
RG_MULTIPLIERS = (2, 3, 4, 5, 6, 7, 8, 9)
CNS_DEFINITIVE_MULTIPLIERS = (15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5)
CNS_PROVISIONAL_MULTIPLIERS = (15, 14, 13, 12, 11, 10, 9, 8, 7, 6, 5, 4, 3, 2, 1)
GS1_MULTIPLIERS = tuple(3 if position % 2 == 0 else 1 for position in range(17))
PIS_MULTIPLIERS = (3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

CNS_DEFINITIVE_PREFIXES = (1, 2)
CNS_PROVISIONAL_PREFIXES = (7, 8, 9)


@dataclass(frozen=True)
class Document(ABC):
    """Base class for a candidate document number.

    Subclasses set the class attributes below and implement ``is_valid``.

    Attributes:
        number: Candidate text exactly as received (never normalized).
        kind: Document kind tag.
        max_digits: Digits read from the text, or None to read all of them.
        min_digits: Fewest digits a candidate needs to be checked at all.
        error_message: Fixed message raised by :meth:`parse` on rejection.
    """

    number: str

    kind: ClassVar[DocumentKind]
    max_digits: ClassVar[Optional[int]]
    min_digits: ClassVar[int]
    error_message: ClassVar[str]

    @staticmethod
    @abstractmethod
    def is_valid(number: str) -> bool:
        """Return True if the check digits of ``number`` are correct."""

    def validate(self) -> bool:
        """Validate the wrapped number."""
        return self.is_valid(self.number)

    @classmethod
    def extract(cls, number: str) -> List[int]:
        """Extract the digits this format reads from ``number``."""
        budget = cls.max_digits if cls.max_digits is not None else len(number)
        return extract_digits(number, budget)

    @classmethod
    def parse(cls, number: str) -> "Document":
        """Wrap ``number`` if it is valid.

        Raises:
            InvalidDocumentError: If the check digits do not match.
        """
        if cls.is_valid(number):
            return cls(number)
        raise InvalidDocumentError(cls.kind, number, cls.error_message)


@dataclass(frozen=True)
class Cpf(Document):
    """Cadastro de Pessoas Físicas, the individual taxpayer ID."""

    kind: ClassVar[DocumentKind] = DocumentKind.CPF
    max_digits: ClassVar[Optional[int]] = 11
    min_digits: ClassVar[int] = 11
    error_message: ClassVar[str] = "Invalid CPF"

    @staticmethod
    def is_valid(number: str) -> bool:
        """Validate both CPF check digits.

        dv1 covers digits 0-8 and dv2 the window shifted by one (digits 1-9,
        which includes dv1), both with multipliers 10..2.
        """
        digits = extract_digits(number, 11)
        if len(digits) < 11:
            return False

        first = calculate_check_digit(digits[0:9], CPF_MULTIPLIERS, times_ten_mod11)
        second = calculate_check_digit(digits[1:10], CPF_MULTIPLIERS, times_ten_mod11)
        return (first, second) == (digits[9], digits[10])


@dataclass(frozen=True)
class Cnpj(Document):
    """Cadastro Nacional da Pessoa Jurídica, the company taxpayer ID."""

    kind: ClassVar[DocumentKind] = DocumentKind.CNPJ
    max_digits: ClassVar[Optional[int]] = 14
    min_digits: ClassVar[int] = 14
    error_message: ClassVar[str] = "Invalid CNPJ"

    @staticmethod
    def is_valid(number: str) -> bool:
        digits = extract_digits(number, 14)
        if len(digits) < 14:
            return False

        first = calculate_check_digit(digits[0:12], CNPJ_MULTIPLIERS_DV1, times_ten_mod11)
        second = calculate_check_digit(digits[0:13], CNPJ_MULTIPLIERS_DV2, times_ten_mod11)
        return (first, second) == (digits[12], digits[13])


@dataclass(frozen=True)
class CreditCard(Document):
    """Payment card number, checked with the Luhn algorithm."""

    kind: ClassVar[DocumentKind] = DocumentKind.CREDIT_CARD
    max_digits: ClassVar[Optional[int]] = None
    min_digits: ClassVar[int] = 1
    error_message: ClassVar[str] = "Invalid payment card"

    @staticmethod
    def is_valid(number: str) -> bool:
        """Luhn check over every digit of ``number``.

        Walking from the rightmost digit, every second digit is doubled and
        the digits of the product are added (``d // 5 + 2 * d % 10``).
        """
        digits = extract_digits(number, len(number))
        if not digits:
            return False

        total = 0
        for position, digit in enumerate(reversed(digits)):
            if position % 2 == 0:
                total += digit
            else:
                total += digit // 5 + (2 * digit) % 10
        return total % 10 == 0


@dataclass(frozen=True)
class VoterRegistration(Document):
    """Título de Eleitor.

    Layout: 8-digit sequence, 2-digit state code, then two check digits. dv1
    covers the sequence; dv2 covers the state code plus dv1.
    """

    kind: ClassVar[DocumentKind] = DocumentKind.VOTER_REGISTRATION
    max_digits: ClassVar[Optional[int]] = 12
    min_digits: ClassVar[int] = 12
    error_message: ClassVar[str] = "Invalid voter registration number"

    @staticmethod
    def is_valid(number: str) -> bool:
        digits = extract_digits(number, 12)
        if len(digits) < 12:
            return False

        first = calculate_check_digit_mod11(digits[0:8], VOTER_MULTIPLIERS_DV1)
        second = calculate_check_digit_mod11(digits[8:11], VOTER_MULTIPLIERS_DV2)
        return (first, second) == (digits[10], digits[11])


@dataclass(frozen=True)
class DriverLicense(Document):
    """Carteira Nacional de Habilitação (CNH)."""

    kind: ClassVar[DocumentKind] = DocumentKind.DRIVER_LICENSE
    max_digits: ClassVar[Optional[int]] = 11
    min_digits: ClassVar[int] = 11
    error_message: ClassVar[str] = "Invalid driver license"

    @staticmethod
    def is_valid(number: str) -> bool:
        """Validate the two CNH check digits.

        Both passes read the same nine body digits. When the first sum leaves
        remainder 10, the second check digit is lowered by 2 (wrapping around
        modulo 11) before values above 9 are mapped to 0.
        """
        digits = extract_digits(number, 11)
        if len(digits) < 11:
            return False

        body = digits[0:9]
        first_sum = calculate_check_digit(body, CNH_MULTIPLIERS_DV1, identity)
        delta = 2 if first_sum % 11 == 10 else 0
        first = mod_11(first_sum)

        second = calculate_check_digit(body, CNH_MULTIPLIERS_DV2, identity) % 11 - delta
        if second < 0:
            second += 11
        if second > 9:
            second = 0

        return (first, second) == (digits[9], digits[10])


@dataclass(frozen=True)
class Renavam(Document):
    """Registro Nacional de Veículos Automotores.

    Older RENAVAM numbers were issued with 9 digits; they are left-padded to
    the current 11-digit layout before checking.
    """

    kind: ClassVar[DocumentKind] = DocumentKind.RENAVAM
    max_digits: ClassVar[Optional[int]] = 11
    min_digits: ClassVar[int] = 2
    error_message: ClassVar[str] = "Invalid RENAVAM number"

    @staticmethod
    def is_valid(number: str) -> bool:
        digits = extract_digits(number, 11)
        if len(digits) < 2:
            return False

        pad_left(digits, 11)
        body, check = digits[:10], digits[10]
        return calculate_check_digit(body, RENAVAM_MULTIPLIERS, eleven_minus_mod11) == check


@dataclass(frozen=True)
class Rg(Document):
    """Registro Geral (identity card), in the 8 + 1 digit layout."""

    kind: ClassVar[DocumentKind] = DocumentKind.RG
    max_digits: ClassVar[Optional[int]] = 9
    min_digits: ClassVar[int] = 9
    error_message: ClassVar[str] = (
        "Could not validate the identity number. Check your state's legislation"
    )

    @staticmethod
    def is_valid(number: str) -> bool:
        digits = extract_digits(number, 9)
        if len(digits) < 9:
            return False

        return calculate_check_digit(digits[0:8], RG_MULTIPLIERS, eleven_minus_mod11) == digits[8]


@dataclass(frozen=True)
class HealthCard(Document):
    """Cartão Nacional de Saúde (CNS).

    Two numbering families share the 15-digit format:

    - Definitive numbers (leading 1 or 2) end in a 4-digit suffix derived
      from the first 11 digits.
    - Provisional numbers (leading 7, 8 or 9) are valid when the weighted sum
      of all 15 digits is a multiple of 11.

    Any other leading digit is invalid.
    """

    kind: ClassVar[DocumentKind] = DocumentKind.HEALTH_CARD
    max_digits: ClassVar[Optional[int]] = 15
    min_digits: ClassVar[int] = 15
    error_message: ClassVar[str] = "Invalid health card"

    @staticmethod
    def variant_of(number: str) -> Optional[HealthCardVariant]:
        """Numbering family selected by the leading digit, or None."""
        leading = extract_digits(number, 1)
        if not leading:
            return None
        if leading[0] in CNS_DEFINITIVE_PREFIXES:
            return HealthCardVariant.DEFINITIVE
        if leading[0] in CNS_PROVISIONAL_PREFIXES:
            return HealthCardVariant.PROVISIONAL
        return None

    @staticmethod
    def is_valid(number: str) -> bool:
        variant = HealthCard.variant_of(number)
        if variant is HealthCardVariant.DEFINITIVE:
            return _is_valid_definitive_cns(extract_digits(number, 15))
        if variant is HealthCardVariant.PROVISIONAL:
            return _is_valid_provisional_cns(extract_digits(number, 15))
        return False


def _is_valid_definitive_cns(digits: List[int]) -> bool:
    if len(digits) < 15:
        return False

    total = calculate_check_digit(digits[0:11], CNS_DEFINITIVE_MULTIPLIERS, identity)
    value = 11 - total % 11
    borrow = 0
    if value == 11:
        value = 0
    elif value == 10:
        # 10 cannot be written as one digit: bump the sum and carry a 1
        total += 2
        value = 11 - total % 11
        borrow = 1

    return digits[11:15] == [0, 0, borrow, value]


def _is_valid_provisional_cns(digits: List[int]) -> bool:
    pad_left(digits, 15)
    remainder = calculate_check_digit(
        digits, CNS_PROVISIONAL_MULTIPLIERS, lambda total: total % 11
    )
    return remainder == 0


@dataclass(frozen=True)
class Gs1Barcode(Document):
    """GS1 retail barcode (EAN-8, UPC-A, EAN-13, GTIN-14, SSCC-18).

    Every length is left-padded to the 18-digit SSCC layout, so the same
    alternating 3,1 weights apply to all of them.
    """

    kind: ClassVar[DocumentKind] = DocumentKind.GS1_BARCODE
    max_digits: ClassVar[Optional[int]] = 18
    min_digits: ClassVar[int] = 2
    error_message: ClassVar[str] = "Could not validate the barcode check digit"

    @staticmethod
    def is_valid(number: str) -> bool:
        digits = extract_digits(number, 18)
        if len(digits) < 2:
            return False

        pad_left(digits, 18)
        body, check = digits[:17], digits[17]
        return calculate_check_digit(body, GS1_MULTIPLIERS, gs1_complement) == check


@dataclass(frozen=True)
class Pis(Document):
    """PIS/PASEP/NIT social integration number."""

    kind: ClassVar[DocumentKind] = DocumentKind.PIS
    max_digits: ClassVar[Optional[int]] = 11
    min_digits: ClassVar[int] = 11
    error_message: ClassVar[str] = "Invalid PIS number"

    @staticmethod
    def is_valid(number: str) -> bool:
        digits = extract_digits(number, 11)
        if len(digits) < 11:
            return False

        body, check = digits[:10], digits[10]
        return calculate_check_digit(body, PIS_MULTIPLIERS, eleven_minus_mod11) == check


@dataclass(frozen=True)
class HealthCardType:
    """A health card that is either definitive or a provisional PIS alias.

    Provisional cards are validated with the PIS algorithm.

    Example:
        >>> HealthCardType.definitive("184184462180018").validate()
        True
        >>> HealthCardType.provisional("608.37951.54-6").variant
        <HealthCardVariant.PROVISIONAL: 'provisional'>
    """

    card: Union[HealthCard, Pis]

    @classmethod
    def definitive(cls, number: str) -> "HealthCardType":
        return cls(HealthCard(number))

    @classmethod
    def provisional(cls, number: str) -> "HealthCardType":
        return cls(Pis(number))

    @property
    def variant(self) -> HealthCardVariant:
        if isinstance(self.card, Pis):
            return HealthCardVariant.PROVISIONAL
        return HealthCardVariant.DEFINITIVE

    @property
    def number(self) -> str:
        return self.card.number

    def validate(self) -> bool:
        return self.card.validate()


DOCUMENT_TYPES: Dict[DocumentKind, Type[Document]] = {
    document_type.kind: document_type
    for document_type in (
        Cpf,
        Cnpj,
        CreditCard,
        VoterRegistration,
        DriverLicense,
        Renavam,
        Rg,
        HealthCard,
        Gs1Barcode,
        Pis,
    )
}


def get_document_type(kind: Union[str, DocumentKind]) -> Type[Document]:
    """Look up the document class for ``kind``.

    Raises:
        ValueError: If ``kind`` is not a known document kind.
    """
    return DOCUMENT_TYPES[DocumentKind.from_value(kind)]


def is_valid_document(kind: Union[str, DocumentKind], number: str) -> bool:
    """Validate ``number`` as a document of the given kind."""
    return get_document_type(kind).is_valid(number)


def parse_document(kind: Union[str, DocumentKind], number: str) -> Document:
    """Wrap ``number`` in its document class if valid.

    Raises:
        ValueError: If ``kind`` is unknown.
        InvalidDocumentError: If the check digits do not match.
    """
    return get_document_type(kind).parse(number)
