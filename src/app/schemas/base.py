"""Base schema configuration for all Pydantic models.

All models serialize to camelCase and accept either camelCase or snake_case
on input.

Usage:
    - APIRequest: For incoming API request bodies
    - APIResponse: For outgoing API response bodies
    - StoredDocument: For documents written to and read from the store
    - DownstreamResponse: For responses received from external services
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Private base schema with common configuration.

    Do not use directly - inherit from one of the public subclasses.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        validate_assignment=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Base class for incoming API request schemas.

    Unknown properties sent by clients are ignored.
    """

    model_config = ConfigDict(
        extra="ignore",
    )


class APIResponse(_BaseSchema):
    """Base class for outgoing API response schemas.

    Only explicitly declared properties are returned.
    """

    model_config = ConfigDict(
        extra="forbid",
    )


class StoredDocument(_BaseSchema):
    """Base class for documents kept in the document store.

    Ignores unknown keys so documents written by older versions still load.
    """

    model_config = ConfigDict(
        extra="ignore",
    )


class DownstreamResponse(_BaseSchema):
    """Base class for responses received from external services.

    Upstream services may add new properties; they are ignored.
    """

    model_config = ConfigDict(
        extra="ignore",
    )
