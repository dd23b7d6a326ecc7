"""Dependency injection container.

This module provides a simple DI container without external frameworks.
It allows registering and resolving dependencies for the application.

Design principles:
1. No magic - explicit registration and resolution
2. Testable - easy to swap implementations
3. Lazy loading - adapters instantiated on first use
4. Thread-safe - for web server contexts
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config
from .domain.errors import ConfigurationError


@dataclass
class Container:
    """Dependency injection container.

    Usage:
        # Production
        container = Container.create_default()
        service = container.resolve(RouteService)

        # Testing
        container = Container()
        container.register(RelationStorePort, lambda: FakeStore())
        store = container.resolve(RelationStorePort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _singletons: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _singleton_types: set[type[Any]] = field(default_factory=set, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Register a factory for a port type.

        Args:
            port_type: The type (usually a Protocol) to register.
            factory: A callable that creates instances of the type.
            singleton: If True, only one instance is created.
        """
        with self._lock:
            self._factories[port_type] = factory
            if singleton:
                self._singleton_types.add(port_type)
            else:
                self._singleton_types.discard(port_type)
            self._singletons.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Resolve an instance of a port type.

        Raises:
            KeyError: If the type is not registered.
        """
        with self._lock:
            if port_type not in self._factories:
                raise KeyError(f"Type not registered: {port_type}")

            if port_type in self._singleton_types:
                if port_type not in self._singletons:
                    self._singletons[port_type] = self._factories[port_type]()
                return self._singletons[port_type]

            return self._factories[port_type]()

    def is_registered(self, port_type: type[Any]) -> bool:
        return port_type in self._factories

    def clear_all(self) -> None:
        """Clear all registrations and singletons."""
        with self._lock:
            self._factories.clear()
            self._singletons.clear()
            self._singleton_types.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.

        Raises:
            ConfigurationError: If the configured backend or algorithm is unknown.
        """
        from .adapters.graph import BFSPathFinder, BidirectionalBFSPathFinder
        from .adapters.store import (
            CSVRelationStore,
            SQLitePersonHydrator,
            SQLiteRelationStore,
        )
        from .ports.graph import PathFinderPort
        from .ports.store import PersonHydratorPort, RelationStorePort
        from .services import GraphBuilder, RouteService

        config = config or get_config()
        container = cls(config=config)

        # Storage
        def create_relation_store() -> RelationStorePort:
            backend = config.store.backend
            if backend == "sqlite":
                return SQLiteRelationStore(config.store.database_path)
            if backend == "csv":
                return CSVRelationStore(config.store)
            raise ConfigurationError(
                f"Unknown store backend: {backend!r}",
                setting_name="KINROUTE_STORE_BACKEND",
                expected_type="sqlite | csv",
            )

        container.register(RelationStorePort, create_relation_store)
        container.register(
            PersonHydratorPort,
            lambda: SQLitePersonHydrator(config.store.database_path),
        )

        # Path finding
        def create_path_finder() -> PathFinderPort:
            algorithm = config.route.algorithm
            if algorithm == "bfs":
                return BFSPathFinder()
            if algorithm == "bidirectional":
                return BidirectionalBFSPathFinder()
            raise ConfigurationError(
                f"Unknown route algorithm: {algorithm!r}",
                setting_name="KINROUTE_ROUTE_ALGORITHM",
                expected_type="bfs | bidirectional",
            )

        container.register(PathFinderPort, create_path_finder)

        # Services
        container.register(
            GraphBuilder,
            lambda: GraphBuilder(store=container.resolve(RelationStorePort)),
        )

        def create_route_service() -> RouteService:
            return RouteService(
                graph_builder=container.resolve(GraphBuilder),
                path_finder=container.resolve(PathFinderPort),
                hydrator=container.resolve(PersonHydratorPort),
                store=container.resolve(RelationStorePort),
                hydration_workers=config.route.hydration_workers,
            )

        container.register(RouteService, create_route_service)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container."""
    global _default_container
    if _default_container is None:
        with _container_lock:
            if _default_container is None:
                _default_container = Container.create_default()
    return _default_container


def reset_container() -> None:
    """Reset the default container.

    Call this in tests to ensure a fresh container.
    """
    global _default_container
    with _container_lock:
        if _default_container is not None:
            _default_container.clear_all()
        _default_container = None
