from __future__ import annotations

from typing import TYPE_CHECKING

from abstract_validation_base import (
    BaseValidator,
    CompositeValidator,
    ValidationResult,
    ValidatorPipelineBuilder,
)

from ryandata_zipcodes.core.zip_normalizer import get_zip_normalizer

if TYPE_CHECKING:
    from ryandata_zipcodes.service import ZipcodeService


class ZipcodeFormatValidator(BaseValidator[str]):
    """Validates ZIP code format (five leading digits).

    This is a fast format validator that doesn't require
    a dataset lookup - it only checks the format is correct.
    """

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "zip_format"

    def validate(self, code: str) -> ValidationResult:
        """Validate the ZIP code format.

        Args:
            code: Raw ZIP code string.

        Returns:
            ValidationResult with any format errors.
        """
        result = ValidationResult(is_valid=True)
        _, error = validate_zip5(code)
        if error:
            result.add_error("zip_code", error, code)
        return result


class ZipcodeExistsValidator(BaseValidator[str]):
    """Validates that a well-formed ZIP code exists in the dataset.

    Malformed input is left to ZipcodeFormatValidator and passes here,
    so a bad code is reported once.
    """

    def __init__(self, service: ZipcodeService) -> None:
        """Initialize ZIP code existence validator.

        Args:
            service: Service used for the lookup.
        """
        self._service = service

    @property
    def name(self) -> str:
        """Name of this validator."""
        return "zip_exists"

    def validate(self, code: str) -> ValidationResult:
        """Validate that the ZIP code exists.

        Args:
            code: Raw ZIP code string.

        Returns:
            ValidationResult with an error if the code is unknown.
        """
        result = ValidationResult(is_valid=True)

        zip5, error = validate_zip5(code)
        if error or zip5 is None:
            return result

        if not self._service.is_real(zip5):
            result.add_error("zip_code", f"Unknown US ZIP code: {zip5}", code)

        return result


def create_default_validators(service: ZipcodeService) -> CompositeValidator[str]:
    """Create the default ZIP code validation pipeline.

    Args:
        service: Service used for existence lookups.

    Returns:
        CompositeValidator running the format check, then the lookup.
    """
    builder: ValidatorPipelineBuilder[str] = ValidatorPipelineBuilder("zipcode_validation")
    builder.add(ZipcodeFormatValidator())
    builder.add(ZipcodeExistsValidator(service))
    return builder.build()


def validate_zip5(code: str | None) -> tuple[str | None, str | None]:
    """Validate a ZIP code.

    Delegates to ZipCodeNormalizer.validate() for consistent validation.

    Args:
        code: The ZIP code string to validate.

    Returns:
        Tuple of (cleaned_value, error_message).
        cleaned_value is None if invalid.
        error_message is None if valid.
    """
    return get_zip_normalizer().validate(code)
