from dataclasses import dataclass
import re
from typing import List, Optional
import unicodedata

from faker import Faker

from beatseed.info.model import Address, UserRecord
from beatseed.info.util import get_current_time, to_utc_aware, years_ago


_NON_ALNUM = re.compile(r"[^a-z0-9]+")


@dataclass(frozen=True)
class GeneratorProfile:
    """
    Value distributions for generated users.

    These are sample-data choices rather than business rules.

    Attributes:
        active_probability (float): Chance that `is_active` is true, applied
            in whole percent.
        min_age (int): Youngest age at generation time.
        max_age (int): Oldest age at generation time.
        created_within_years (int): `created_at` falls within this many
            years before now.
        password_length (int): Length of the placeholder password.
    """
    active_probability: float = 0.9
    min_age: int = 18
    max_age: int = 80
    created_within_years: int = 2
    password_length: int = 12

    def __post_init__(self):
        if not 0.0 <= self.active_probability <= 1.0:
            raise ValueError("active_probability must be within [0, 1]")
        if self.min_age < 0 or self.max_age < self.min_age:
            raise ValueError("age range must satisfy 0 <= min_age <= max_age")
        if self.created_within_years <= 0:
            raise ValueError("created_within_years must be positive")
        # faker needs room for one char of each required class
        if self.password_length < 4:
            raise ValueError("password_length must be at least 4")


def email_local_part(first_name: str, last_name: str) -> str:
    """
    Builds the `first.last` mailbox name from a person's names.

    Accents are folded to ASCII and anything that is not a letter or digit
    is dropped, so "José O'Neil" becomes "jose.oneil".
    """
    parts = []
    for name in (first_name, last_name):
        folded = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
        part = _NON_ALNUM.sub("", folded.lower())
        if part:
            parts.append(part)
    return ".".join(parts) or "user"


class UserRecordGenerator:
    """
    Produces independent, fully populated fake users.

    The random-data provider is injectable: pass a configured `Faker`, or a
    `seed` to get repeatable output.
    """

    def __init__(
        self,
        faker: Optional[Faker] = None,
        profile: Optional[GeneratorProfile] = None,
        seed: Optional[int] = None,
    ):
        self.faker = faker or Faker()
        self.profile = profile or GeneratorProfile()
        if seed is not None:
            self.faker.seed_instance(seed)

    def generate_address(self) -> Address:
        fake = self.faker
        return Address(
            street=fake.street_address(),
            city=fake.city(),
            state=fake.state(),
            zip_code=fake.postcode(),
            country=fake.country(),
        )

    def generate(self) -> UserRecord:
        fake = self.faker
        profile = self.profile
        now = get_current_time()

        first_name = fake.first_name()
        last_name = fake.last_name()
        email = f"{email_local_part(first_name, last_name)}@{fake.free_email_domain()}"

        return UserRecord(
            first_name=first_name,
            last_name=last_name,
            email=email,
            username=fake.user_name(),
            password=fake.password(length=profile.password_length),
            date_of_birth=to_utc_aware(
                fake.date_of_birth(minimum_age=profile.min_age, maximum_age=profile.max_age)
            ),
            phone=fake.phone_number(),
            address=self.generate_address(),
            bio=fake.paragraph(),
            avatar=fake.image_url(),
            created_at=fake.date_time_between(
                start_date=years_ago(profile.created_within_years, now),
                end_date=now,
                tzinfo=now.tzinfo,
            ),
            is_active=fake.pybool(truth_probability=round(profile.active_probability * 100)),
        )

    def generate_many(self, count: int) -> List[UserRecord]:
        if count < 0:
            raise ValueError("count must not be negative")
        return [self.generate() for _ in range(count)]
