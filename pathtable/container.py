"""Wiring of ports to adapters.

The container binds each port type to a factory for the adapter that
implements it. `create_default` reads the configuration to pick the
graph repository, so the CLI and tests share one place where the
application is assembled.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config
from .domain.errors import ConfigurationError


@dataclass
class _Binding:
    """Factory for one port, plus its cached instance when shared."""

    factory: Callable[[], Any]
    shared: bool
    instance: Any = None
    built: bool = False


@dataclass
class Container:
    """Registry mapping port types to the adapters that implement them.

    Usage:
        container = Container.create_default()
        service = container.resolve(PathTableService)

        # Swap an adapter, e.g. in tests
        container.register(GraphRepositoryPort, lambda: FakeRepository())

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _bindings: Dict[type[Any], _Binding] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(
        self,
        port_type: type[Any],
        factory: Callable[[], Any],
        singleton: bool = True,
    ) -> None:
        """Bind ``port_type`` to ``factory``, replacing any earlier binding.

        With ``singleton`` the factory runs once, on first resolve.
        """
        with self._lock:
            self._bindings[port_type] = _Binding(factory=factory, shared=singleton)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return an instance for ``port_type``.

        Raises:
            KeyError: If nothing is bound to ``port_type``.
        """
        with self._lock:
            binding = self._bindings.get(port_type)
            if binding is None:
                raise KeyError(f"Type not registered: {port_type}")
            if not binding.shared:
                return binding.factory()
            if not binding.built:
                binding.instance = binding.factory()
                binding.built = True
            return binding.instance

    def clear_all(self) -> None:
        """Drop every binding and cached instance."""
        with self._lock:
            self._bindings.clear()

    @classmethod
    def create_default(cls, config: Optional[AppConfig] = None) -> Container:
        """Create a container with default production bindings.

        The graph repository is chosen by ``config.graph.source_format``.

        Args:
            config: Optional configuration override.

        Returns:
            A configured Container instance.

        Raises:
            ConfigurationError: If the source format is unknown.
        """
        from .adapters.graph import CSVGraphRepository, TextGraphRepository
        from .adapters.rendering import PlainTextTableRenderer
        from .ports.graph import GraphRepositoryPort
        from .ports.rendering import TableRendererPort
        from .services import PathTableService

        config = config or get_config()
        container = cls(config=config)

        # Graph repository based on config
        def create_graph_repository() -> GraphRepositoryPort:
            source_format = config.graph.source_format
            if source_format == "text":
                return TextGraphRepository(config.graph)
            elif source_format == "csv":
                return CSVGraphRepository(config.graph)
            raise ConfigurationError(
                f"Unknown graph source format: {source_format!r}",
                setting_name="graph.source_format",
                expected_type="text | csv",
            )

        container.register(GraphRepositoryPort, create_graph_repository)

        # Rendering
        container.register(TableRendererPort, lambda: PlainTextTableRenderer())

        # Main service
        def create_path_table_service() -> PathTableService:
            return PathTableService(
                graph_repository=container.resolve(GraphRepositoryPort),
                renderer=container.resolve(TableRendererPort),
                engine_config=config.engine,
            )

        container.register(PathTableService, create_path_table_service)

        return container


# Global default container (lazy initialized)
_default_container: Optional[Container] = None
_container_lock = threading.Lock()


def get_container() -> Container:
    """Get the default application container.

    Returns:
        The default Container instance (creates one if needed).
    """
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
