"""Document processor with staged validation.

This module wraps the check-digit validators in a small pipeline that
returns structured results instead of plain booleans:
    1. KIND CHECK: the document kind is enabled in configuration
    2. LENGTH CHECK: the candidate holds enough digits for its layout
    3. VARIANT CHECK: provisional health cards are accepted
    4. CHECK DIGIT VALIDATION: the format's checksum matches

Example:
    >>> from brdoc.processor import DocumentProcessor
    >>> processor = DocumentProcessor()
    >>> result = processor.process("cpf", "085.668.830-47")
    >>> result.is_pass()
    True
"""

import logging
import time
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from .config_loader import Config, get_default_config, load_config
from .documents import HealthCard, get_document_type
from .types import (
    DecisionStatus,
    DocumentKind,
    HealthCardVariant,
    RejectionReason,
    ValidationResult,
)

logger = logging.getLogger(__name__)


class DocumentProcessor:
    """Validates candidate numbers against configured document kinds.

    Args:
        config_path: Optional path to config YAML file. If None, uses default config.
        config: Already loaded configuration; takes precedence over config_path.

    Attributes:
        config: Full configuration object
        enabled_kinds: Enabled document kinds, in configured order
    """

    def __init__(
        self, config_path: Optional[Path] = None, config: Optional[Config] = None
    ):
        if config is not None:
            self.config = config
        elif config_path is None:
            self.config = get_default_config()
        else:
            self.config = load_config(config_path)

        self.enabled_kinds: List[DocumentKind] = list(
            self.config.validation.documents.enabled
        )
        logger.debug(
            "Initialized processor with kinds: %s",
            ", ".join(kind.value for kind in self.enabled_kinds),
        )

    def process(
        self, kind: Union[str, DocumentKind], number: str
    ) -> ValidationResult:
        """Validate ``number`` as a document of the given kind.

        Args:
            kind: Document kind, as enum member or string value.
            number: Candidate text in any format.

        Returns:
            ValidationResult with PASS or REJECT and the rejection reason.

        Raises:
            ValueError: If ``kind`` is not a known document kind.
        """
        start_time = time.time()
        kind = DocumentKind.from_value(kind)
        document_type = get_document_type(kind)
        digits = document_type.extract(number)

        reason = self._check(kind, number, digits)
        decision = DecisionStatus.PASS if reason is None else DecisionStatus.REJECT
        if reason is None:
            logger.debug("%s accepted: %r", kind.value, number)
        else:
            logger.debug("%s rejected (%s): %r", kind.value, reason.constant, number)

        return ValidationResult(
            decision=decision,
            kind=kind,
            number=number,
            digits=digits if self.config.validation.output.include_digits else [],
            rejection_reason=reason,
            processing_time_ms=(time.time() - start_time) * 1000,
        )

    def process_batch(
        self, items: Iterable[Tuple[Union[str, DocumentKind], str]]
    ) -> List[ValidationResult]:
        """Validate several ``(kind, number)`` pairs in order."""
        results = [self.process(kind, number) for kind, number in items]
        rejected = sum(1 for result in results if result.is_reject())
        logger.info(
            "Processed %d documents: %d passed, %d rejected",
            len(results),
            len(results) - rejected,
            rejected,
        )
        return results

    def identify(self, number: str) -> List[DocumentKind]:
        """List the enabled kinds whose check digits ``number`` satisfies.

        Formats overlap (an 11-digit number may pass as CPF and as PIS), so
        more than one kind can match.
        """
        return [
            kind for kind in self.enabled_kinds if self.process(kind, number).is_pass()
        ]

    def _check(
        self, kind: DocumentKind, number: str, digits: List[int]
    ) -> Optional[RejectionReason]:
        document_type = get_document_type(kind)

        # Stage 1: Kind enabled
        if kind not in self.enabled_kinds:
            return RejectionReason(
                code="DOC-E001",
                constant="KIND_DISABLED",
                message=f"Document kind '{kind.value}' is disabled in configuration",
            )

        # Stage 2: Enough digits for the layout
        if len(digits) < document_type.min_digits:
            # Provisional health cards are padded, so only the leading digit matters
            provisional = (
                kind == DocumentKind.HEALTH_CARD
                and HealthCard.variant_of(number) == HealthCardVariant.PROVISIONAL
            )
            if not provisional:
                return RejectionReason(
                    code="DOC-E002",
                    constant="INSUFFICIENT_DIGITS",
                    message=(
                        f"Expected at least {document_type.min_digits} digits, "
                        f"got {len(digits)}"
                    ),
                )

        # Stage 3: Provisional health cards
        if (
            kind == DocumentKind.HEALTH_CARD
            and not self.config.validation.health_card.accept_provisional
            and HealthCard.variant_of(number) == HealthCardVariant.PROVISIONAL
        ):
            return RejectionReason(
                code="DOC-E003",
                constant="PROVISIONAL_NOT_ACCEPTED",
                message="Provisional health card numbers are not accepted",
                severity="WARNING",
            )

        # Stage 4: Check digits
        if not document_type.is_valid(number):
            return RejectionReason(
                code="DOC-E004",
                constant="CHECK_DIGIT_MISMATCH",
                message=document_type.error_message,
            )

        return None
