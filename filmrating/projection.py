from typing import Iterable, List, Type, TypeVar

from bson import ObjectId
from pydantic import BaseModel

M = TypeVar("M", bound=BaseModel)


def project(model: Type[M], doc: dict) -> M:
    """Build ``model`` from a stored document, keeping only the model's fields.

    ``_id`` becomes ``id`` and ObjectIds are stringified. Derived fields are
    computed by the model itself. The document is not modified.
    """
    data = {}
    for name in model.model_fields:
        value = doc.get("_id") if name == "id" else doc.get(name)
        if isinstance(value, ObjectId):
            value = str(value)
        if value is not None:
            data[name] = value
    return model.model_validate(data)


def project_all(model: Type[M], docs: Iterable[dict]) -> List[M]:
    return [project(model, d) for d in docs]
