"""Non-raising ZIP code validators.

Validators report problems as a ValidationResult instead of raising, which
suits bulk checks where every bad input should be collected.
"""

from __future__ import annotations

from abstract_validation_base import BaseValidator, CompositeValidator

from ryandata_zipcodes.validation.validators import (
    ZipcodeExistsValidator,
    ZipcodeFormatValidator,
    create_default_validators,
    validate_zip5,
)

__all__ = [
    "BaseValidator",
    "CompositeValidator",
    "ZipcodeExistsValidator",
    "ZipcodeFormatValidator",
    "create_default_validators",
    "validate_zip5",
]
