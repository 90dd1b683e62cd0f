import json
import logging
from datetime import date
from http import HTTPStatus

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from starlette.responses import PlainTextResponse

from response_value import EnvelopedResponse
from response_value import HttpResponse
from response_value.fastapi import render_response


@pytest.fixture
def response():
    return HttpResponse({"title": "Dune"}, 201, {"Location": "/books/1"})


def test_render(response):
    actual = render_response(response)

    assert actual.status_code == HTTPStatus.CREATED
    assert json.loads(actual.body) == {"title": "Dune"}
    assert actual.headers["Location"] == "/books/1"
    assert actual.headers["content-type"] == "application/json"


def test_render_appended_header(response):
    response.set_header("Vary", "Accept")
    response.set_header("Vary", "Origin", replace=False)

    actual = render_response(response)

    assert actual.headers["Vary"] == "Accept, Origin"


def test_render_stringifies_header_values(response):
    response.set_header("X-Total-Count", 15)

    actual = render_response(response)

    assert actual.headers["X-Total-Count"] == "15"


def test_render_encodes_data(response):
    response.set_data({"published": date(1965, 8, 1)})

    actual = render_response(response)

    assert json.loads(actual.body) == {"published": "1965-08-01"}


def test_render_enveloped():
    actual = render_response(EnvelopedResponse("foo", 404))

    assert actual.status_code == HTTPStatus.NOT_FOUND
    assert json.loads(actual.body) == {"body": "foo", "status": 404, "headers": {}}


def test_render_response_class():
    actual = render_response(HttpResponse("foo"), response_class=PlainTextResponse)

    assert actual.body == b"foo"
    assert actual.headers["content-type"].startswith("text/plain")


def test_render_logs(response, caplog):
    caplog.set_level(logging.DEBUG)

    render_response(response)

    assert caplog.record_tuples == [
        (
            "response_value.fastapi.response_renderer",
            logging.DEBUG,
            "rendering HttpResponse with status 201",
        )
    ]


def test_in_fastapi_app():
    app = FastAPI()

    @app.get("/books/{id}")
    def get_book(id: int):
        response = HttpResponse({"id": id})
        response.set_status(-200)
        response.set_header("Cache-Control", "no-cache")
        response.set_header("Cache-Control", "no-store", replace=False)
        return render_response(response)

    actual = TestClient(app).get("/books/3")

    assert actual.status_code == 200
    assert actual.json() == {"id": 3}
    assert actual.headers["cache-control"] == "no-cache, no-store"
