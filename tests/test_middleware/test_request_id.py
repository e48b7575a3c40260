import re

from appserver.middleware.request_id import pick_request_id
from .fixtures import *


def test_request_id_is_generated(client):
    response = client.get("/health")

    assert re.fullmatch(r"[0-9a-f]{32}", response.headers["x-request-id"])


def test_request_ids_are_unique(client):
    first = client.get("/health").headers["x-request-id"]
    second = client.get("/health").headers["x-request-id"]

    assert first != second


def test_incoming_request_id_is_reused(client):
    response = client.get("/health", headers={"X-Request-ID": "req-42"})

    assert response.headers["x-request-id"] == "req-42"


def test_malformed_request_id_is_replaced():
    assert pick_request_id("with space") != "with space"
    assert pick_request_id("x" * 129) != "x" * 129
    assert pick_request_id("") != ""
    assert pick_request_id(None)
