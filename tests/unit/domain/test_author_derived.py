"""Unit tests for the derived `name` and `lifespan` values of AuthorRecord."""

from datetime import date, datetime, timedelta, timezone

import pytest

from shelfmark.domain.author import AuthorRecord, full_name, lifespan

# pylint: disable=too-few-public-methods


class TestName:
    """Tests for AuthorRecord.name / full_name()."""

    @staticmethod
    def test_full_name_is_family_comma_first() -> None:
        """Both names present gives "family, first"."""
        author = AuthorRecord()
        author.first_name = "John"
        author.family_name = "Doe"
        author.date_of_birth = date(1990, 1, 1)
        author.date_of_death = date(2020, 1, 1)
        assert author.name == "Doe, John"

    @staticmethod
    @pytest.mark.parametrize(
        "first_name, family_name",
        [("", "Doe"), ("John", ""), (None, "Doe"), ("John", None), (None, None)],
    )
    def test_missing_name_part_gives_empty_string(first_name, family_name) -> None:
        """Either part missing or empty degrades to ""."""
        author = AuthorRecord(
            first_name=first_name,
            family_name=family_name,
            date_of_birth=date(1990, 1, 1),
            date_of_death=date(2020, 1, 1),
        )
        assert author.name == ""

    @staticmethod
    def test_name_does_not_require_a_valid_record() -> None:
        """An over-long name still renders; name never validates."""
        author = AuthorRecord(first_name="a" * 101, family_name="Doe")
        assert not author.validate().is_valid
        assert author.name == f"Doe, {'a' * 101}"

    @staticmethod
    def test_name_is_recomputed_on_every_access() -> None:
        """Mutating a field changes the next read."""
        author = AuthorRecord(first_name="John", family_name="Doe")
        assert author.name == "Doe, John"
        author.first_name = "Jane"
        assert author.name == "Doe, Jane"
        author.family_name = ""
        assert author.name == ""

    @staticmethod
    def test_property_and_function_agree() -> None:
        """The property delegates to the pure function."""
        author = AuthorRecord(first_name="Jane", family_name="Smith")
        assert author.name == full_name(author) == "Smith, Jane"


class TestLifespan:
    """Tests for AuthorRecord.lifespan / lifespan()."""

    @staticmethod
    @pytest.mark.parametrize(
        "born, died, expected",
        [
            (date(1990, 1, 9), date(2020, 12, 27), "1990 - 2020"),
            (date(1990, 1, 9), None, "1990 - "),
            (None, date(2020, 12, 27), " - 2020"),
            (None, None, " - "),
        ],
    )
    def test_lifespan_forms(born, died, expected) -> None:
        """All four presence combinations render exactly."""
        author = AuthorRecord(
            first_name="John",
            family_name="Doe",
            date_of_birth=born,
            date_of_death=died,
        )
        assert author.lifespan == expected
        assert lifespan(author) == expected

    @staticmethod
    def test_iso_strings_contribute_their_year() -> None:
        """Dates given as ISO strings are read the same way."""
        author = AuthorRecord(date_of_birth="1990-01-09", date_of_death="2020-12-27")
        assert author.lifespan == "1990 - 2020"

    @staticmethod
    def test_year_is_four_digits() -> None:
        """Early years are zero-padded."""
        author = AuthorRecord(date_of_birth=date(800, 1, 1))
        assert author.lifespan == "0800 - "

    @staticmethod
    def test_datetime_year_follows_its_own_timezone() -> None:
        """The year comes from the value as given, without conversion."""
        new_year_in_tokyo = datetime(
            2021, 1, 1, 3, 0, tzinfo=timezone(timedelta(hours=9))
        )
        author = AuthorRecord(date_of_death=new_year_in_tokyo)
        assert author.lifespan == " - 2021"

    @staticmethod
    def test_invalid_date_contributes_an_empty_token() -> None:
        """lifespan never raises, even on a record that fails validation."""
        author = AuthorRecord(date_of_birth="2020-27-12", date_of_death=date(2020, 1, 1))
        assert author.lifespan == " - 2020"
