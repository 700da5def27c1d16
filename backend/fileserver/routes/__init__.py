from __future__ import annotations
from typing import Any, Callable, NamedTuple
from fastapi import APIRouter
from . import files, meta


class Route(NamedTuple):
    method: str
    path: str
    endpoint: Callable[..., Any]
    options: dict[str, Any]


ROUTES: list[Route] = [
    Route(
        "GET",
        "/get_my_file",
        files.get_my_file,
        {
            "summary": "Download a file from the server",
            "tags": ["File Operations"],
            "responses": files.RESPONSES,
        },
    ),
    Route("GET", "/", meta.root, {"summary": "API Information", "tags": ["File Operations"]}),
    Route("GET", "/health", meta.health_check, {"summary": "Health Check", "tags": ["File Operations"]}),
]


def build_router(routes: list[Route] = ROUTES) -> APIRouter:
    router = APIRouter()
    for route in routes:
        router.add_api_route(route.path, route.endpoint, methods=[route.method], **route.options)
    return router
