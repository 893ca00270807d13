from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField


class Entity(BaseModel):
    """Base entity class with a storage-assigned integer identifier.

    Entities are immutable: a change produces a new instance, so an assigned
    ``id`` can never be rewritten in place.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int | None = PydanticField(
        default=None,
        description="Identifier assigned by the storage layer; None until persisted",
    )

    @property
    def is_persisted(self) -> bool:
        return self.id is not None
