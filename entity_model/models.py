"""Concrete metadata carrying entities.

Both models are creation dated entities with a string identifier and a free
form JSON ``metadata`` container.
"""

from __future__ import annotations

from pydantic import Field

from .mixins import EntityWithCreationDate, MetadataMixin


class Action(MetadataMixin, EntityWithCreationDate):
    """Something that was done, with JSON metadata describing it.

    Attributes:
        id: String identifier.
        creation_date: When the action happened.
        name: Name of the action.
        metadata: JSON object with action details.

    Example:
        >>> action = Action(id="a-1", name="user.login", metadata={"ip": "10.0.0.1"})
        >>> action.get_metadata_value("ip")
        '10.0.0.1'
    """

    id: str | None = Field(default=None, description="String identifier")
    name: str | None = Field(default=None, description="Name of the action")


class State(MetadataMixin, EntityWithCreationDate):
    """A named state an object was in, with a message and JSON metadata.

    Attributes:
        id: String identifier.
        creation_date: When the state was entered.
        name: Name of the state.
        message: Human readable description of the state.
        metadata: JSON object with state details.
    """

    id: str | None = Field(default=None, description="String identifier")
    name: str | None = Field(default=None, description="Name of the state")
    message: str | None = Field(default=None, description="Human readable description of the state")
