from abc import ABC
from datetime import datetime
from typing import Annotated, ClassVar, List, Type, TypeVar

from bson import ObjectId
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from beatseed.info.db_driver import Index
from beatseed.info.util import to_utc_aware


ModelGen = TypeVar("ModelGen", bound="Model")

StrLower = Annotated[str, AfterValidator(str.lower)]
NonEmptyStr = Annotated[str, Field(min_length=1)]


class Model(ABC, BaseModel):
    """
    Base class for documents written to MongoDB.

    Field names are snake_case in Python and camelCase in the stored
    document. `id` maps to `_id` and is left to the driver when unset.
    """

    id: ObjectId | None = Field(
        description="Document id, assigned by the driver on insert.",
        alias="_id",
        default=None,
    )

    model_config = ConfigDict(
        alias_generator=to_camel,
        arbitrary_types_allowed=True,
        populate_by_name=True,
        protected_namespaces=(),
    )

    @classmethod
    def from_doc(cls: Type[ModelGen], doc: dict) -> ModelGen:
        """
        Creates a model instance from a MongoDB document.

        Args:
            doc (dict): The MongoDB document.

        Returns:
            An instance of the model populated with the document data.
        """
        return cls.model_validate(doc)

    def dump_doc(self) -> dict:
        """
        Serializes the model to a MongoDB-compatible dictionary.

        It uses `by_alias=True` so the stored field names are camelCase (and
        `_id`), and excludes fields with `None` values.

        Returns:
            dict: The model as a dictionary.
        """
        return self.model_dump(by_alias=True, exclude_none=True)


class Address(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    street: NonEmptyStr
    city: NonEmptyStr
    state: NonEmptyStr
    zip_code: NonEmptyStr
    country: NonEmptyStr


class UserRecord(Model):
    """
    A synthetic user as stored in the users collection.

    `email` and `username` are always lowercase. Uniqueness of both is
    enforced by the collection indexes, not by the model.
    """

    indexes: ClassVar[List[Index]] = [
        Index("email", unique=True),
        Index("username", unique=True),
    ]

    first_name: NonEmptyStr
    last_name: NonEmptyStr
    email: Annotated[StrLower, Field(min_length=3)]
    username: Annotated[StrLower, Field(min_length=1)]
    password: NonEmptyStr
    date_of_birth: datetime
    phone: NonEmptyStr
    address: Address
    bio: NonEmptyStr
    avatar: NonEmptyStr
    created_at: datetime
    is_active: bool = True

    @field_validator("date_of_birth", "created_at", mode="after")
    @classmethod
    def normalize_time(cls, value: datetime) -> datetime:
        return to_utc_aware(value)
