"""Unit tests for domain errors."""

from shelfmark.domain import errors


class TestFieldValidationError:
    """Tests for the FieldValidationError domain error."""

    @staticmethod
    def test_attributes() -> None:
        """The error exposes field, rule and message."""
        error = errors.FieldValidationError("first_name", "required", "is required")
        assert error.field == "first_name"
        assert error.rule == "required"
        assert error.message == "is required"

    @staticmethod
    def test_error_message() -> None:
        """str() prefixes the message with the field name."""
        error = errors.FieldValidationError("first_name", "required", "is required")
        assert str(error) == "first_name: is required"

    @staticmethod
    def test_equality_is_by_value() -> None:
        """Two errors describing the same violation compare equal."""
        one = errors.FieldValidationError("family_name", "max_length", "too long")
        two = errors.FieldValidationError("family_name", "max_length", "too long")
        assert one == two
        assert hash(one) == hash(two)
        assert one != errors.FieldValidationError("first_name", "max_length", "too long")


class TestAuthorValidationError:
    """Tests for the AuthorValidationError domain error."""

    @staticmethod
    def test_attributes_and_message() -> None:
        """The error keeps the mapping and lists every violation."""
        field_errors = {
            "first_name": errors.FieldValidationError(
                "first_name", "required", "first_name is required"
            ),
            "date_of_death": errors.FieldValidationError(
                "date_of_death", "date", "bad date"
            ),
        }
        error = errors.AuthorValidationError(field_errors)
        assert error.errors == field_errors
        assert isinstance(error, errors.DomainError)
        assert str(error) == (
            "Invalid author record: first_name: first_name is required; "
            "date_of_death: bad date"
        )
