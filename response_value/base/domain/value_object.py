# (c) Nelen & Schuurmans

from pydantic import BaseModel
from pydantic import ConfigDict

__all__ = ["ValueObject"]


class ValueObject(BaseModel):
    model_config = ConfigDict(frozen=True)
