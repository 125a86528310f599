from datetime import datetime
from typing import Optional

from pydantic import computed_field

from filmrating.schemas import CamelModel, utcnow
from filmrating.validation import (
    INTEGER,
    STRING,
    FieldSpec,
    Matches,
    Max,
    MaxLength,
    Min,
    MinLength,
    partial,
)

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 200
MAX_COUNTRY_LENGTH = 100
MIN_FOUNDED_YEAR = 1800
MAX_WEBSITE_LENGTH = 200
MAX_BIO_LENGTH = 2000
WEBSITE_PATTERN = r"^https?://.+"


def max_founded_year() -> int:
    return utcnow().year


PRODUCER_CREATE_SCHEMA = (
    FieldSpec("name", STRING, trim=True, constraints=(MinLength(MIN_NAME_LENGTH), MaxLength(MAX_NAME_LENGTH))),
    FieldSpec("country", STRING, required=False, constraints=(MaxLength(MAX_COUNTRY_LENGTH),)),
    FieldSpec("foundedYear", INTEGER, required=False, constraints=(Min(MIN_FOUNDED_YEAR), Max(max_founded_year))),
    FieldSpec(
        "website",
        STRING,
        required=False,
        constraints=(
            MaxLength(MAX_WEBSITE_LENGTH),
            Matches(WEBSITE_PATTERN, message="Website must be a valid URL"),
        ),
    ),
    FieldSpec("bio", STRING, required=False, constraints=(MaxLength(MAX_BIO_LENGTH),)),
)

PRODUCER_UPDATE_SCHEMA = partial(PRODUCER_CREATE_SCHEMA)


class ProducerCreate(CamelModel):
    name: str
    country: Optional[str] = None
    founded_year: Optional[int] = None
    website: Optional[str] = None
    bio: Optional[str] = None


class ProducerUpdate(CamelModel):
    name: Optional[str] = None
    country: Optional[str] = None
    founded_year: Optional[int] = None
    website: Optional[str] = None
    bio: Optional[str] = None


class ProducerOut(CamelModel):
    id: str
    name: str
    country: Optional[str] = None
    founded_year: Optional[int] = None
    website: Optional[str] = None
    bio: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class ProducerInfo(CamelModel):
    """Short producer card used where only a label is needed."""

    id: str
    name: str
    country: Optional[str] = None

    @computed_field(alias="displayName")
    @property
    def display_name(self) -> str:
        if self.country:
            return f"{self.name} ({self.country})"
        return self.name
