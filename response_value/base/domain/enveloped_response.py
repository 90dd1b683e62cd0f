# (c) Nelen & Schuurmans

from typing import Any

from .http_response import HttpResponse
from .types import Headers
from .types import Json
from .value_object import ValueObject

__all__ = ["Envelope", "EnvelopedResponse"]


class Envelope(ValueObject):
    body: Any
    status: int
    headers: Headers


class EnvelopedResponse(HttpResponse):
    """A response that carries its status and headers inside the body.

    For clients that cannot read the status line or response headers.
    """

    def to_serializable(self) -> Json:
        return Envelope(
            body=self.get_data(),
            status=self.get_status(),
            headers=dict(self.get_headers()),
        ).model_dump()
