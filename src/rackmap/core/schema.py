"""Pydantic schemas for static topology files."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from rackmap.core.topology import normalize_rack


class RackAssignment(BaseModel):
    """A single host to rack assignment (list format)."""

    name: str
    rack: str


class TopologySchema(BaseModel):
    """
    Schema for a static topology file.

    The racks dictionary uses the host name as the key, so a host can
    only be assigned to one rack per file.
    """

    racks: dict[str, str] = Field(default_factory=dict)

    @field_validator("racks", mode="before")
    @classmethod
    def normalize_assignments(cls, v: Any) -> dict[str, str]:
        """Convert list format to dict format."""
        if v is None:
            return {}
        if isinstance(v, list):
            # List format: [{"name": "host1", "rack": "/rack1"}]
            # Convert to: {"host1": "/rack1"}
            assignments = [RackAssignment.model_validate(item) for item in v]
            return {a.name: a.rack for a in assignments}
        return v

    @field_validator("racks")
    @classmethod
    def validate_racks(cls, v: dict[str, str]) -> dict[str, str]:
        """Reject empty host names and normalize rack identifiers."""
        result = {}
        for name, rack in v.items():
            if not name.strip():
                raise ValueError("Host name must not be empty")
            result[name] = normalize_rack(rack)
        return result
