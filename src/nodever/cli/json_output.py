"""JSON output for commands with machine-parseable output.

Schemas are pydantic models; commands build a model, dump it with
model_dump(mode="json") and hand the dict to emit_json(), which writes to
stdout through machine_output().
"""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict

from nodever.cli.output import machine_output


class RemoteVersionEntry(BaseModel):
    """One row of `nodever ls --json`.

    Attributes:
        version: Version identifier without leading "v"
        status: "active", "installed" or "available"
    """

    model_config = ConfigDict(strict=True)

    version: str
    status: str


class ListRemoteResponse(BaseModel):
    """JSON response schema for `nodever ls --json`."""

    model_config = ConfigDict(strict=True)

    mirror: str
    active: str | None
    versions: list[RemoteVersionEntry]


def emit_json(data: dict[str, Any]) -> None:
    """Write data as indented JSON to stdout."""
    machine_output(json.dumps(data, indent=2))
