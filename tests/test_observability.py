import json
import logging

import httpx

from marvelapi.adapters.dispatcher import HttpxDispatcher
from marvelapi.core.domain.wire import RequestDescriptor
from marvelapi.observability import JSONFormatter, setup_logging


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord(
        "marvelapi.adapters.dispatcher", logging.WARNING, __file__, 1,
        "Marvel API answered HTTP %s", (429,), None,
    )
    record.status_code = 429

    payload = json.loads(JSONFormatter().format(record))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "marvelapi.adapters.dispatcher"
    assert payload["message"] == "Marvel API answered HTTP 429"
    assert payload["status_code"] == 429


def test_setup_logging_attaches_handler_to_package_logger():
    logger = logging.getLogger("marvelapi")
    handler = setup_logging("debug", fmt="json")
    try:
        assert handler in logger.handlers
        assert isinstance(handler.formatter, JSONFormatter)
        assert logger.level == logging.DEBUG
    finally:
        logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


async def test_dispatch_logs_never_contain_keys(caplog, credentials):
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"code": 200}))

    with caplog.at_level(logging.DEBUG, logger="marvelapi"):
        async with httpx.AsyncClient(base_url="https://gateway.test", transport=transport) as http:
            await HttpxDispatcher(http).send(RequestDescriptor("/stories", {"limit": "5"}), credentials)

    ours = "\n".join(r.getMessage() for r in caplog.records if r.name.startswith("marvelapi"))
    assert "/stories" in ours
    assert credentials.private_key not in ours
    assert credentials.public_key not in ours
