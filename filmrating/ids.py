import re

from bson import ObjectId

from filmrating.errors import ValidationException

_OBJECT_ID_RE = re.compile(r"^[0-9a-f]{24}$")


def is_valid_id(candidate) -> bool:
    """True iff ``candidate`` is a 24 character lowercase hex ObjectId string."""
    return isinstance(candidate, str) and _OBJECT_ID_RE.fullmatch(candidate) is not None


def require_valid_id(entity: str, candidate) -> None:
    if not is_valid_id(candidate):
        raise ValidationException(f"{entity} id {candidate} is invalid")


def get_objectid(id_str: str) -> ObjectId:
    return ObjectId(id_str)
