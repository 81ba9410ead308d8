"""Unit tests for RandomGenerator."""

import random
import secrets
import string

import pytest

from kitchen_oci.providers.oci.utilities.random_generator import RandomGenerator


@pytest.mark.unit
class TestRandomPassword:
    """Character-class composition of generated passwords."""

    @pytest.mark.parametrize("specials", [["#", "_", "-"], ["@", "-", "(", ")", "."]])
    def test_password_has_five_of_each_class(self, generator, specials):
        password = generator.random_password(specials)

        assert len(password) == 20
        assert sum(c in specials for c in password) == 5
        assert sum(c in string.ascii_lowercase for c in password) == 5
        assert sum(c in string.ascii_uppercase for c in password) == 5
        assert sum(c in string.digits for c in password) == 5

    def test_empty_special_set_yields_fifteen_characters(self, generator):
        password = generator.random_password([])

        assert len(password) == 15
        assert password.isalnum()

    def test_same_seed_same_password(self):
        first = RandomGenerator(random.Random(7)).random_password(["#"])
        second = RandomGenerator(random.Random(7)).random_password(["#"])

        assert first == second


@pytest.mark.unit
class TestRandomStrings:
    """Lowercase strings and digit strings."""

    def test_random_string(self, generator):
        value = generator.random_string(12)

        assert len(value) == 12
        assert all(c in string.ascii_lowercase for c in value)

    def test_random_number(self, generator):
        value = generator.random_number(10)

        assert len(value) == 10
        assert value.isdigit()

    @pytest.mark.parametrize("length", [0, -3])
    def test_non_positive_length_is_empty(self, generator, length):
        assert generator.random_string(length) == ""
        assert generator.random_number(length) == ""

    def test_default_source_is_system_random(self):
        assert isinstance(RandomGenerator()._rng, secrets.SystemRandom)
