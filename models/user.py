"""Login payload sent to the form service."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class User(BaseModel):
    """Student identity used to create the account and fetch the form."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    roll_number: str = Field(min_length=1)
    name: str = Field(min_length=1)

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
