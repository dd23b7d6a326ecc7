"""HTTP endpoints for route, statistics and neighborhood queries."""

from __future__ import annotations

import re
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from ..config import RouteConfig
from ..domain.errors import ValidationError
from ..domain.models import PersonId
from ..services import RouteService

router = APIRouter()


def get_route_service(request: Request) -> RouteService:
    return request.app.state.container.resolve(RouteService)


def get_route_config(request: Request) -> RouteConfig:
    return request.app.state.container.config.route


_INTEGER = re.compile(r"-?[0-9]+")


def _parse_int(field_name: str, raw: str) -> int:
    if _INTEGER.fullmatch(raw) is None:
        raise ValidationError(
            f"{field_name} must be an integer, got {raw!r}",
            field_name=field_name,
            value=raw,
        )
    return int(raw)


@router.get("/route/{id1}/{id2}")
def find_route(
    id1: str, id2: str, service: RouteService = Depends(get_route_service)
) -> Any:
    """Find the shortest chain of relations between two persons."""
    start = PersonId(_parse_int("id1", id1))
    end = PersonId(_parse_int("id2", id2))

    result = service.find_route_between_people(start, end)

    if not result.path_exists:
        return JSONResponse(
            status_code=404,
            content={
                "message": "No connection found between the two people",
                **result.to_dict(),
            },
        )
    return result.to_dict()


@router.get("/graph/stats")
def graph_stats(service: RouteService = Depends(get_route_service)) -> Any:
    """Return size and density metrics of the relationship graph."""
    return service.graph_statistics().to_dict()


@router.get("/{person_id}/connections/{degrees}")
def connections(
    person_id: str,
    degrees: str,
    service: RouteService = Depends(get_route_service),
    route_config: RouteConfig = Depends(get_route_config),
) -> Any:
    """List persons within ``degrees`` hops of a person."""
    pid = PersonId(_parse_int("id", person_id))
    max_degrees = _parse_int("degrees", degrees)

    low, high = route_config.min_degrees, route_config.max_degrees
    if not low <= max_degrees <= high:
        raise ValidationError(
            f"degrees must be between {low} and {high}, got {max_degrees}",
            field_name="degrees",
            value=max_degrees,
        )

    found = service.connections_within_degrees(pid, max_degrees)
    return {
        "personId": pid,
        "maxDegrees": max_degrees,
        "connections": [c.to_dict() for c in found],
    }
