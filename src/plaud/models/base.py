"""
Shared base for Plaud data-transfer objects.
"""

from pydantic import BaseModel, ConfigDict


class PlaudModel(BaseModel):
    """Base class for JSON shapes exchanged with the Plaud API.

    Fields are declared with their wire names as aliases; both the alias and
    the Python name are accepted on input. Unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def to_wire(self) -> dict:
        """Dump using wire names, leaving out unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class OpenPlaudModel(PlaudModel):
    """A DTO whose full key set is not fixed; unknown keys are kept."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")
