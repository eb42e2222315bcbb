"""Grid record models.

Field names on the wire are camelCase (``firstName``), matching the record
definition of the client-side ``Ext.data.JsonReader``. Python attributes are
snake_case; both spellings are accepted on input.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class GridModel(BaseModel):
    """Base model with camelCase wire aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class GridRow(GridModel):
    """One id-less row of the simplified grid example."""

    first_name: str
    last_name: str


class Employee(GridModel):
    """Dummy record that corresponds with one row in the grid panel.

    ``id`` defaults to ``-1`` so a client can submit new records without one;
    the server assigns the real id on create.
    """

    id: int = -1
    first_name: str
    last_name: str
