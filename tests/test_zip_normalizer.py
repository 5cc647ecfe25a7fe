import pytest

from ryandata_zipcodes import (
    InvalidCharacters,
    InvalidFormat,
    ZipcodeError,
    normalize_and_validate,
)
from ryandata_zipcodes.core.zip_normalizer import ZipCodeNormalizer, get_zip_normalizer


class TestNormalizeAndValidate:
    """Test the raising normalization entry point."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("06902", "06902"),
            ("06902-1234", "06902"),
            ("06902 1234", "06902"),
            ("  77429  ", "77429"),
            ("\t77429-0001\n", "77429"),
            ("123456789", "12345"),
            ("12345abc", "12345"),
        ],
    )
    def test_accepts_leading_five_digits(self, raw: str, expected: str) -> None:
        """The first five trimmed characters are returned when all digits."""
        assert normalize_and_validate(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "1234", " 1234 ", "12-3", "\t\n"])
    def test_too_short_is_invalid_format(self, raw: str) -> None:
        """Fewer than five characters after trimming raises InvalidFormat."""
        with pytest.raises(InvalidFormat):
            normalize_and_validate(raw)

    @pytest.mark.parametrize("raw", ["1234a", "abcde", "12 34-5678", "1-234", "0690x-1234"])
    def test_non_digit_is_invalid_characters(self, raw: str) -> None:
        """A non-digit among the first five characters raises InvalidCharacters."""
        with pytest.raises(InvalidCharacters):
            normalize_and_validate(raw)

    def test_non_ascii_digits_rejected(self) -> None:
        """Unicode digits such as superscripts are not ZIP code digits."""
        with pytest.raises(InvalidCharacters):
            normalize_and_validate("1234²")
        with pytest.raises(InvalidCharacters):
            normalize_and_validate("١٢٣٤٥")

    @pytest.mark.parametrize("raw", [None, 6902, 77429.0, b"77429"])
    def test_non_string_is_invalid_format(self, raw: object) -> None:
        """Non-string input raises InvalidFormat."""
        with pytest.raises(InvalidFormat):
            normalize_and_validate(raw)


class TestZipcodeErrors:
    """Test error types and context."""

    def test_error_types(self) -> None:
        """Errors expose a machine-readable type."""
        with pytest.raises(InvalidFormat) as fmt:
            normalize_and_validate("123")
        assert fmt.value.type == "invalid_format"

        with pytest.raises(InvalidCharacters) as chars:
            normalize_and_validate("12a45")
        assert chars.value.type == "invalid_characters"

    def test_errors_share_base_class(self) -> None:
        """Both errors are ZipcodeError and ValueError subclasses."""
        for raw in ("123", "12a45"):
            with pytest.raises(ZipcodeError):
                normalize_and_validate(raw)
            with pytest.raises(ValueError):
                normalize_and_validate(raw)

    def test_error_context(self) -> None:
        """Errors carry the package name and the original input."""
        with pytest.raises(InvalidCharacters) as exc_info:
            normalize_and_validate(" 12a45-0000 ")
        err = exc_info.value
        assert err.context is not None
        assert err.context["package"] == "ryandata_zipcodes"
        assert err.value == " 12a45-0000 "

    def test_error_messages(self) -> None:
        """Messages describe the accepted formats."""
        with pytest.raises(InvalidFormat) as exc_info:
            normalize_and_validate("1")
        assert "#####-####" in str(exc_info.value)

        with pytest.raises(InvalidCharacters) as exc_info2:
            normalize_and_validate("abcde")
        assert "digits" in str(exc_info2.value)


class TestZipCodeNormalizer:
    """Test the non-raising normalizer API."""

    def test_validate_valid(self) -> None:
        normalizer = ZipCodeNormalizer()
        assert normalizer.validate("06902-1234") == ("06902", None)

    def test_validate_invalid(self) -> None:
        normalizer = ZipCodeNormalizer()
        cleaned, error = normalizer.validate("06x02")
        assert cleaned is None
        assert error is not None
        assert "Invalid characters" in error

    def test_is_well_formed(self) -> None:
        normalizer = ZipCodeNormalizer()
        assert normalizer.is_well_formed("00000")
        assert not normalizer.is_well_formed("0000")

    def test_default_normalizer_is_shared(self) -> None:
        assert get_zip_normalizer() is get_zip_normalizer()
        assert get_zip_normalizer().length == 5
