from typing import Optional

from pydantic import BaseModel, ConfigDict


class BaseSchema(BaseModel):
    """Request/response schema for entities keyed by ``id_key``; readable from ORM rows."""
    model_config = ConfigDict(from_attributes=True, str_strip_whitespace=True)

    id_key: Optional[int] = None
