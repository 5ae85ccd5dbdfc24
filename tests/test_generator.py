from datetime import UTC, timedelta

from faker import Faker
import pytest
from scipy.stats import binomtest

from beatseed.info.model import UserRecord
from beatseed.info.util import get_current_time
from beatseed.seed.generator import GeneratorProfile, UserRecordGenerator, email_local_part


IDENTITY_FIELDS = ["first_name", "last_name", "email", "username", "password", "phone", "avatar"]
ADDRESS_FIELDS = ["street", "city", "state", "zip_code", "country"]


@pytest.fixture
def generator():
    return UserRecordGenerator(seed=1234)


def test_every_field_populated(generator):
    for _ in range(50):
        user = generator.generate()
        assert isinstance(user, UserRecord)
        for name in IDENTITY_FIELDS:
            value = getattr(user, name)
            assert isinstance(value, str) and value.strip(), name
        for name in ADDRESS_FIELDS:
            value = getattr(user.address, name)
            assert isinstance(value, str) and value.strip(), name
        assert user.bio
        assert isinstance(user.is_active, bool)
        assert user.id is None


def test_email_derived_from_names(generator):
    for _ in range(50):
        user = generator.generate()
        local, domain = user.email.split("@")
        assert local == email_local_part(user.first_name, user.last_name)
        assert domain
        assert user.email == user.email.lower()


def test_username_is_lowercase(generator):
    for _ in range(50):
        user = generator.generate()
        assert user.username == user.username.lower()


def test_password_length():
    generator = UserRecordGenerator(seed=5, profile=GeneratorProfile(password_length=20))
    assert len(generator.generate().password) == 20
    assert len(UserRecordGenerator(seed=5).generate().password) == 12


def test_age_range(generator):
    now = get_current_time()
    for _ in range(200):
        user = generator.generate()
        assert user.date_of_birth.tzinfo is not None
        age_days = (now - user.date_of_birth).days
        assert 18 * 365 <= age_days <= 81 * 366


def test_created_within_two_years(generator):
    for _ in range(200):
        before = get_current_time()
        user = generator.generate()
        assert user.created_at.utcoffset() == timedelta(0)
        assert user.created_at <= get_current_time()
        assert user.created_at >= before - timedelta(days=2 * 366)


def test_active_rate_near_ninety_percent():
    """
    Statistical property: `is_active` is true about 90% of the time.
    """
    generator = UserRecordGenerator(seed=99)
    sample = 2000
    active = sum(generator.generate().is_active for _ in range(sample))
    assert binomtest(active, sample, 0.9).pvalue > 0.001
    assert 0.85 < active / sample < 0.95


@pytest.mark.parametrize("probability,expected", [(0.0, False), (1.0, True)])
def test_active_probability_is_configurable(probability, expected):
    generator = UserRecordGenerator(seed=3, profile=GeneratorProfile(active_probability=probability))
    assert all(generator.generate().is_active is expected for _ in range(30))


def test_seeded_generators_repeat_names():
    first = UserRecordGenerator(seed=42).generate_many(10)
    second = UserRecordGenerator(seed=42).generate_many(10)
    assert [(u.first_name, u.last_name, u.email, u.username) for u in first] == [
        (u.first_name, u.last_name, u.email, u.username) for u in second
    ]


def test_injected_faker_is_used():
    fake = Faker("en_US")
    generator = UserRecordGenerator(faker=fake)
    assert generator.faker is fake
    fake.seed_instance(8)
    expected = Faker("en_US")
    expected.seed_instance(8)
    assert generator.generate().first_name == expected.first_name()


def test_generate_many_counts(generator):
    assert len(generator.generate_many(0)) == 0
    assert len(generator.generate_many(7)) == 7
    with pytest.raises(ValueError):
        generator.generate_many(-1)


def test_email_local_part_folds_names():
    assert email_local_part("José", "O'Neil") == "jose.oneil"
    assert email_local_part("Anne-Marie", "Smith") == "annemarie.smith"
    assert email_local_part("", "") == "user"


@pytest.mark.parametrize("kwargs", [
    {"active_probability": 1.5},
    {"min_age": 30, "max_age": 20},
    {"created_within_years": 0},
    {"password_length": 3},
])
def test_profile_rejects_invalid(kwargs):
    with pytest.raises(ValueError):
        GeneratorProfile(**kwargs)


def test_timestamps_are_utc(generator):
    user = generator.generate()
    assert user.created_at.tzinfo is not None
    assert user.created_at.astimezone(UTC) == user.created_at


def test_multi_locale_faker():
    generator = UserRecordGenerator(faker=Faker(["en_US", "fr_FR"]), seed=1)
    users = generator.generate_many(20)
    assert all(isinstance(user.is_active, bool) for user in users)
    assert all(user.email == user.email.lower() for user in users)
    assert all(user.address.state for user in users)
