"""Parser settings."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class ParserSettings(BaseModel):
    """Options controlling how unrecognized fields are handled during a parse."""
    conversion_errors: Literal["record", "raise"] = "record"  # record: keep raw node + issue
    unknown_extensions: Literal["preserve", "reject"] = "preserve"
    freeze_registries: bool = True  # freeze both registries when a parse begins

    model_config = ConfigDict(extra="forbid", frozen=True)
