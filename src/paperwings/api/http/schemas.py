"""Request bodies shared by the entity routers."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UpdateRequest(BaseModel):
    """Body of ``PUT /update``: which row to change and the attributes to set.

    Every field is optional at the schema level so that an incomplete body is
    answered with the API's own 400 envelope.
    """

    model_config = ConfigDict(populate_by_name=True)

    id_field: str | None = Field(default=None, alias="idField")
    id: int | str | None = None
    update_data: dict[str, Any] | None = Field(default=None, alias="updateData")

    @property
    def is_complete(self) -> bool:
        return bool(self.id_field) and self.id not in (None, "") and bool(self.update_data)
