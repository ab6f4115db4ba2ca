import logging
from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, ValidationError

from app.core.exceptions import EntityPayloadError

# Layer 3: Domain Entities
from app.domain.entity import EntityDomain


logger = logging.getLogger(__name__)


class EntityPayload(BaseModel):
    """Strict inbound shape of a customer record.

    Bools, numeric strings and floats are rejected for id; name and email
    must be text. Unknown keys are ignored.
    """
    id: int | None = None
    full_name: str | None = Field(
        None, validation_alias=AliasChoices("full_name", "fullName")
    )
    email: str | None = None

    model_config = {
        "strict": True,
        "extra": "ignore",
        "from_attributes": True, # Stored rows are read by attribute
    }

    def to_domain(self) -> EntityDomain:
        """Builds the mutable domain entity from the checked values."""
        return EntityDomain(id=self.id, full_name=self.full_name, email=self.email)


class EntityCodec:
    """Maps customer entities to and from their external representations.

    The wire contract uses the field names id, fullName and email. Decoding is
    strict about types so that malformed input is rejected here, at the
    boundary, while EntityDomain itself stays permissive.
    """

    # --- 1. Encoding ---
    @staticmethod
    def to_payload(entity: EntityDomain) -> dict[str, Any]:
        """Builds the JSON-compatible payload for an entity.

        Args:
            entity (EntityDomain): The entity to encode.

        Returns:
            dict[str, Any]: Keys id, fullName and email; unset values are None.
        """
        return entity.model_dump(by_alias=True)

    @staticmethod
    def to_json(entity: EntityDomain) -> str:
        """Encodes an entity as JSON text using the wire field names."""
        return entity.model_dump_json(by_alias=True)

    # --- 2. Decoding ---
    @staticmethod
    def from_payload(data: Mapping[str, Any]) -> EntityDomain:
        """Decodes a payload mapping into a new entity.

        Missing keys leave the field unset and unknown keys are ignored.
        Both fullName and full_name are accepted for the name.

        Args:
            data (Mapping[str, Any]): The decoded payload.

        Returns:
            EntityDomain: The decoded entity.

        Raises:
            EntityPayloadError: If the payload is not a mapping or a field has the wrong type.
        """
        if not isinstance(data, Mapping):
            logger.warning(f"Rejected entity payload of type {type(data).__name__}")
            raise EntityPayloadError(
                f"Entity payload must be a mapping, got {type(data).__name__}"
            )

        try:
            entity = EntityPayload.model_validate(dict(data)).to_domain()
        except ValidationError as e:
            logger.warning(f"Rejected entity payload: {e.error_count()} error(s)")
            raise EntityPayloadError(f"Invalid entity payload: {e}") from e

        logger.debug(f"Decoded payload into {entity.describe()}")
        return entity

    @staticmethod
    def from_json(text: str | bytes) -> EntityDomain:
        """Decodes JSON text into a new entity.

        Raises:
            EntityPayloadError: If the text is not a JSON object or a field has the wrong type.
        """
        try:
            entity = EntityPayload.model_validate_json(text).to_domain()
        except ValidationError as e:
            logger.warning(f"Rejected entity JSON: {e.error_count()} error(s)")
            raise EntityPayloadError(f"Invalid entity JSON: {e}") from e

        logger.debug(f"Decoded JSON into {entity.describe()}")
        return entity

    # --- 3. Stored rows ---
    @staticmethod
    def from_row(row: Any) -> EntityDomain:
        """Maps a stored row (any object with id, full_name, email attributes).

        Attributes missing from the row leave the field unset. Values are
        checked with the same strict rules as wire payloads.

        Args:
            row (Any): The row object returned by the persistence collaborator.

        Returns:
            EntityDomain: The loaded entity.

        Raises:
            EntityPayloadError: If an attribute holds a value of the wrong type.
        """
        try:
            entity = EntityPayload.model_validate(row, from_attributes=True).to_domain()
        except ValidationError as e:
            logger.warning(f"Rejected stored row {type(row).__name__}: {e.error_count()} error(s)")
            raise EntityPayloadError(f"Invalid stored row: {e}") from e

        logger.debug(f"Loaded row into {entity.describe()}")
        return entity
