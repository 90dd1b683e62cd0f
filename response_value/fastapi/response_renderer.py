# (c) Nelen & Schuurmans

import logging
from typing import Type

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.responses import Response

from response_value import HttpResponseInterface

logger = logging.getLogger(__name__)

__all__ = ["render_response"]


def render_response(
    response: HttpResponseInterface, response_class: Type[Response] = JSONResponse
) -> Response:
    """Emit a response object as a starlette Response.

    The body is taken from to_serializable(). Header values are converted to
    strings; no other wire-level validation is done.
    """
    content = jsonable_encoder(response.to_serializable())
    headers = {key: str(value) for (key, value) in response.get_headers().items()}
    logger.debug(
        f"rendering {response.__class__.__name__} with status {response.get_status()}"
    )
    return response_class(
        content=content, status_code=response.get_status(), headers=headers
    )
