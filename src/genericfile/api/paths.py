"""Paths API endpoints.

Parses raw path strings from query parameters and returns their
description, validity, children and relations as JSON.
"""

import logging

from aiohttp import web

from genericfile.core.exceptions import GenericFileError, InvalidPathError
from genericfile.core.info import PathInfo, describe_relation
from genericfile.core.path import GenericFilePath

logger = logging.getLogger(__name__)


def create_paths_routes() -> list[web.RouteDef]:
    return [
        web.get("/api/paths", get_path),
        web.get("/api/paths/validate", validate_path),
        web.get("/api/paths/child", get_child),
        web.get("/api/paths/relative", get_relative),
    ]


async def get_path(request: web.Request) -> web.Response:
    raw = request.query.get("path", "")
    try:
        path = GenericFilePath.parse(raw)
    except InvalidPathError as e:
        return _error_response(e, raw)

    return web.json_response(PathInfo.from_path(path).to_dict())


async def validate_path(request: web.Request) -> web.Response:
    raw = request.query.get("path", "")
    try:
        GenericFilePath.parse(raw)
    except InvalidPathError:
        logger.debug(f"Rejected path: {raw!r}")
        return web.json_response({"path": raw, "valid": False})

    return web.json_response({"path": raw, "valid": True})


async def get_child(request: web.Request) -> web.Response:
    raw = request.query.get("path", "")
    segment = request.query.get("segment", "")
    try:
        child = GenericFilePath.parse(raw).child(segment)
    except GenericFileError as e:
        return _error_response(e, raw)

    return web.json_response(PathInfo.from_path(child).to_dict())


async def get_relative(request: web.Request) -> web.Response:
    raw = request.query.get("path", "")
    raw_base = request.query.get("base", "")
    try:
        path = GenericFilePath.parse(raw)
        base = GenericFilePath.parse(raw_base)
    except InvalidPathError as e:
        return _error_response(e, e.path)

    return web.json_response(describe_relation(path, base))


def _error_response(error: GenericFileError, raw: str) -> web.Response:
    logger.info(f"Bad request for path {raw!r}: {error}")
    return web.json_response({"error": str(error), "path": raw}, status=400)
