import json
from typing import Any

import pytest
import requests

from lexicology.config.settings import ApiConfig, ServerConfig


def make_response(status: int = 200, body: Any = None, raw: bytes | None = None) -> requests.Response:
    resp = requests.Response()
    resp.status_code = status
    resp._content = raw if raw is not None else json.dumps(body).encode("utf-8")
    resp.encoding = "utf-8"
    resp.url = "http://test.invalid/"
    return resp


class FakeSession:
    """Stands in for requests.Session; replays one response or raises."""

    def __init__(self, response: requests.Response | None = None, exc: Exception | None = None):
        self.response = response
        self.exc = exc
        self.calls: list[tuple[str, str, dict]] = []

    def _reply(self, method: str, url: str, **kwargs):
        self.calls.append((method, url, kwargs))
        if self.exc is not None:
            raise self.exc
        return self.response

    def get(self, url, **kwargs):
        return self._reply("GET", url, **kwargs)

    def post(self, url, **kwargs):
        return self._reply("POST", url, **kwargs)


@pytest.fixture
def api_config():
    return ApiConfig(base_url="https://mw.test/json", api_key="secret", timeout=3)


@pytest.fixture
def server_config():
    return ServerConfig(base_url="http://words.test/api/", timeout=2)


@pytest.fixture
def serendipity_payload():
    return [
        {
            "meta": {"id": "serendipity", "uuid": "1c6e...", "stems": ["serendipity"]},
            "hwi": {"hw": "ser*en*dip*i*ty", "prs": [{"mw": "ˌser-ən-ˈdi-pə-tē"}]},
            "fl": "noun",
            "def": [
                {
                    "sseq": [
                        [
                            [
                                "sense",
                                {
                                    "sn": "1",
                                    "dt": [
                                        ["text", "{bc}the faculty or phenomenon of finding valuable or agreeable things not sought for"],
                                        ["vis", [{"t": "a happy {it}serendipity{/it}"}]],
                                    ],
                                },
                            ]
                        ],
                        [
                            ["sense", {"sn": "2", "dt": [["vis", [{"t": "no text here"}]]]}],
                            ["sense", {"dt": [["text", "{bc}an instance of {d_link|serendipity|serendipity}"]]}],
                        ],
                        [["pseq", [["sense", {"sn": "3", "dt": [["text", "hidden"]]}]]]],
                    ]
                }
            ],
            "shortdef": ["the faculty or phenomenon of finding valuable or agreeable things not sought for"],
            "et": [["text", "{it}Serendip{/it}, former name of Sri Lanka"]],
            "cxs": [{"cxl": "see also", "cxtis": [{"cxt": "luck"}]}, {"cxl": "compare"}],
        }
    ]
