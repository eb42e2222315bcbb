"""Pydantic request models for the remoting endpoint."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class RemoteCallRequest(BaseModel):
    """Body of a remote call: positional arguments in the method's order."""

    args: list[Any] = Field(default_factory=list)
