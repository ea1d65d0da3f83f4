from typing import Optional

from pydantic import BaseModel, ConfigDict


class Resource(BaseModel):
    """Permissive model for any entity returned by the API.

    Unknown fields are kept as extra attributes, so any object can be read
    with attribute access even without a dedicated model.
    """

    model_config = ConfigDict(
        validate_by_name=True,
        validate_by_alias=True,
        extra="allow",
    )
    id: Optional[str] = None
    object: Optional[str] = None
