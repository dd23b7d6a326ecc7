"""Services layer - Application orchestration.

Available services:
- GraphBuilder: Builds the relationship graph from storage
- RouteService: Route, neighborhood and statistics queries
"""

from .graph_builder import GraphBuilder
from .route_service import RouteService

__all__ = ["GraphBuilder", "RouteService"]
