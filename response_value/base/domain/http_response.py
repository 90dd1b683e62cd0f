# (c) Nelen & Schuurmans

from abc import ABC
from abc import abstractmethod
from typing import Any
from typing import Optional

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from .status import coerce_status
from .types import Headers

__all__ = ["HttpResponseInterface", "HttpResponse"]


class HttpResponseInterface(ABC):
    """What an emitter needs to turn an object into an actual HTTP response."""

    @abstractmethod
    def get_headers(self) -> Headers:
        ...

    @abstractmethod
    def get_status(self) -> int:
        ...

    @abstractmethod
    def get_data(self) -> Any:
        ...

    @abstractmethod
    def to_serializable(self) -> Any:
        ...


class HttpResponse(BaseModel, HttpResponseInterface):
    """Response data, status code and headers, mutable until it is emitted.

    The status is always stored as a non-negative integer: whatever is passed
    to the constructor, to set_status or assigned to the status attribute is
    cast to an integer and made absolute. Data and headers are stored as given.
    Header names are case-sensitive.
    """

    model_config = ConfigDict(validate_assignment=True)

    data: Any = None
    status: int = 200
    headers: Headers = Field(default_factory=dict)

    def __init__(
        self,
        data: Any = None,
        status: Any = 200,
        headers: Optional[Headers] = None,
    ):
        super().__init__(
            data=data, status=status, headers={} if headers is None else headers
        )

    @field_validator("status", mode="before")
    def normalize_status(cls, v):
        return coerce_status(v)

    @field_validator("headers", mode="before")
    def headers_default(cls, v):
        return {} if v is None else v

    def get_headers(self) -> Headers:
        return self.headers

    def set_headers(self, headers: Headers) -> None:
        self.headers = headers

    def set_header(self, key: str, value: Any, replace: bool = True) -> None:
        """Set a single header.

        With replace=False an existing value is kept and the new one is appended
        to it, comma-separated. A header that maps to None counts as missing.
        """
        existing = self.headers.get(key)
        if replace or existing is None:
            self.headers[key] = value
        else:
            self.headers[key] = f"{existing}, {value}"

    def get_status(self) -> int:
        return self.status

    def set_status(self, code: Any) -> None:
        self.status = code  # normalized by the validator

    def get_data(self) -> Any:
        return self.data

    def set_data(self, data: Any) -> None:
        self.data = data

    def to_serializable(self) -> Any:
        """Return the data to be JSON-encoded.

        This is get_data() here; subclasses override it to emit a different
        representation while get_data() keeps returning the stored payload.
        """
        return self.get_data()
