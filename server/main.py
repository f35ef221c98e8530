"""FastAPI web server exposing NMEA field queries over HTTP.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Clients POST the raw receiver output (one or more NMEA sentences) and get
back one typed field per request::

    curl --data-binary @capture.nmea http://<host>:8000/info/RMC/1

The decoder configuration is read from the ``GPSINFO_*`` environment
variables once, at application startup.
"""

import dataclasses
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import FastAPI, HTTPException, Path, Request, Response

from gpsinfo import AddressIdentifier, DecoderConfig, InfoQuery, validate_checksum
from server.formatters import (
    format_checksum_message,
    format_info_message,
    format_schema_message,
)

logger = logging.getLogger(__name__)

_JSON = "application/json"


def _parse_kind(kind: str) -> AddressIdentifier:
    try:
        return AddressIdentifier.from_code(kind)
    except ValueError as exc:
        logger.info("Rejected unknown sentence kind %r", kind)
        raise HTTPException(status_code=404, detail=f"Unknown sentence kind {kind!r}") from exc


def _query_for(request: Request, checksum: bool | None) -> InfoQuery:
    query: InfoQuery = request.app.state.query
    if checksum is None or checksum == query.config.checksum_control:
        return query
    return InfoQuery(dataclasses.replace(query.config, checksum_control=checksum))


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    config = DecoderConfig.from_env()
    logger.info(
        "Decoding %s, checksum control %s",
        ",".join(sorted(kind.value for kind in config.enabled_kinds)),
        "on" if config.checksum_control else "off",
    )
    application.state.query = InfoQuery(config)
    yield


app = FastAPI(lifespan=_lifespan)


@app.post("/info/{kind}/{index}")
async def info_endpoint(
    request: Request,
    kind: str,
    index: Annotated[int, Path(ge=1)],
    checksum: bool | None = None,
) -> Response:
    """Decode field ``index`` of the first ``kind`` sentence in the request body.

    Decoding failures are not HTTP errors: they come back with
    ``data_type="error"`` and the failing stage in ``error``.

    Args:
        request: The incoming request; its body is the raw byte stream.
        kind: Sentence kind, with or without talker ID ("RMC", "GPRMC").
        index: 1-based field position after the address.
        checksum: Overrides the configured checksum control for this request.
    """
    address = _parse_kind(kind)
    stream = await request.body()
    info = _query_for(request, checksum).get_info(stream, address, index)
    return Response(format_info_message(address, index, info), media_type=_JSON)


@app.post("/checksum")
async def checksum_endpoint(request: Request) -> Response:
    """Check the checksum of the first sentence in the request body."""
    status = validate_checksum(await request.body())
    return Response(format_checksum_message(status), media_type=_JSON)


@app.get("/schema/{kind}")
async def schema_endpoint(request: Request, kind: str) -> Response:
    """List the field types of an enabled sentence kind."""
    address = _parse_kind(kind)
    query: InfoQuery = request.app.state.query
    table = query.registry.get_table(address)
    if table is None:
        logger.info("Rejected disabled sentence kind %s", address.value)
        raise HTTPException(status_code=404, detail=f"{address.value} is not enabled")
    return Response(format_schema_message(address, table), media_type=_JSON)
