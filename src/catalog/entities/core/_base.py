from pydantic import BaseModel, ConfigDict
from pydantic import Field as PydanticField
from pydantic.alias_generators import to_camel
from sqlmodel import Field, SQLModel


class Entity(BaseModel):
    """Base entity class with a store-assigned integer identifier.

    Serialised with camelCase keys; either spelling is accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int | None = PydanticField(
        default=None,
        description="Identifier assigned by the store; unset before creation",
    )


class EntityTable(SQLModel, table=False):
    """Base table class with an autoincrement integer primary key."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Identifier assigned by the store",
    )
