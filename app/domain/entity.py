from typing import Any

from pydantic import AliasChoices, BaseModel, Field


NULL_MARKER = "null"


def _render_text(value: str | None) -> str:
    """Single-quotes a text field, escaping backslashes and quotes."""
    if value is None:
        return NULL_MARKER
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def _render_entity(entity_id: int | None, full_name: str | None, email: str | None) -> str:
    """Builds the diagnostic rendering shared by entities and snapshots.

    Args:
        entity_id (int | None): The identifier, or None when unset.
        full_name (str | None): The customer's display name.
        email (str | None): The customer's contact address.

    Returns:
        str: e.g. Entity{id=7, fullName='Ada Lovelace', email='ada@example.com'}
    """
    rendered_id = NULL_MARKER if entity_id is None else str(entity_id)
    return (
        f"Entity{{id={rendered_id}, "
        f"fullName={_render_text(full_name)}, "
        f"email={_render_text(email)}}}"
    )


class EntityDomain(BaseModel):
    """The pure domain representation of a Customer record.

    A mutable record handed between the CRUD layers. It never validates its
    own values: format, uniqueness and identifier assignment belong to the
    collaborators that build and store it.

    Attributes:
        id (int | None): Identifier assigned by the external store, None until persisted.
        full_name (str | None): The customer's display name (external name: fullName).
        email (str | None): The customer's contact address.
    """
    # 1. Database Identity
    id: int | None = None

    # 2. Core Data
    full_name: str | None = Field(
        None,
        validation_alias=AliasChoices("full_name", "fullName"),
        serialization_alias="fullName",
        description="The customer's display name",
    )
    email: str | None = Field(None, description="The customer's contact address")

    model_config = {
        "from_attributes": True, # Allows building from stored rows
        "json_schema_extra": {
            "example": {
                "id": 7,
                "fullName": "Ada Lovelace",
                "email": "ada@example.com"
            }
        }
    }

    def __init__(
        self,
        full_name: str | None = None,
        email: str | None = None,
        /,
        **data: Any,
    ) -> None:
        # Positional form mirrors Entity(fullName, email); an explicit keyword wins.
        if full_name is not None and not {"full_name", "fullName"} & data.keys():
            data["full_name"] = full_name
        if email is not None:
            data.setdefault("email", email)
        super().__init__(**data)

    def get_id(self) -> int | None:
        return self.id

    def set_id(self, value: int | None) -> None:
        self.id = value

    def get_full_name(self) -> str | None:
        return self.full_name

    def set_full_name(self, value: str | None) -> None:
        self.full_name = value

    def get_email(self) -> str | None:
        return self.email

    def set_email(self, value: str | None) -> None:
        self.email = value

    def describe(self) -> str:
        """Renders the current field values for logs.

        Unset values appear as a bare null marker and text values are
        single-quoted, so two entities render alike only when every field
        matches. Not a serialization format; use EntityCodec for that.

        Returns:
            str: The diagnostic rendering.
        """
        return _render_entity(self.id, self.full_name, self.email)

    def snapshot(self) -> "EntitySnapshot":
        """Captures the current values as an immutable EntitySnapshot."""
        return EntitySnapshot.model_construct(
            id=self.id, full_name=self.full_name, email=self.email
        )

    def __str__(self) -> str:
        return self.describe()


class EntitySnapshot(BaseModel):
    """Frozen copy of an EntityDomain, safe to share between collaborators."""

    id: int | None = None
    full_name: str | None = None
    email: str | None = None

    model_config = {"frozen": True}

    def thaw(self) -> EntityDomain:
        """Returns a new, independent mutable entity with the same values."""
        return EntityDomain.model_construct(
            id=self.id, full_name=self.full_name, email=self.email
        )

    def describe(self) -> str:
        return _render_entity(self.id, self.full_name, self.email)

    def __str__(self) -> str:
        return self.describe()
