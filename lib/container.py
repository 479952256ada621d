# =============================================================================
# lib/container.py - Dependency Injection Container
# =============================================================================
# A small service container used by the composition root.
#
# Bindings are declared on a ServiceCollection, each with a lifetime:
# - SINGLETON: one instance for the container (process) lifetime
# - SCOPED:    one instance per scope (one scope per HTTP request)
# - TRANSIENT: a new instance on every resolution
#
# ServiceCollection.build() validates the whole binding graph up front, so a
# missing binding, a circular binding or a singleton capturing a scoped
# service stops the application at startup instead of on the first request.
#
# Usage:
#   services = ServiceCollection()
#   services.add_singleton(ProductStore, instance=ProductStore.seeded())
#   services.add_scoped(ProductRepository, InMemoryProductRepository)
#   container = services.build()
#
#   with container.create_scope() as scope:
#       repository = scope.resolve(ProductRepository)
# =============================================================================

from __future__ import annotations

import inspect
import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, TypeVar, get_type_hints

from lib.utils import ApplicationError, type_name

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Lifetime(str, Enum):
    """How long a resolved instance is reused."""
    SINGLETON = "singleton"
    SCOPED = "scoped"
    TRANSIENT = "transient"


# =============================================================================
# Errors
# =============================================================================

class DependencyResolutionError(ApplicationError):
    """Base error for invalid bindings and failed resolutions."""

    def __init__(self, message: str, code: str = "DEPENDENCY_RESOLUTION_ERROR", **kwargs):
        super().__init__(message, code=code, **kwargs)


class MissingBindingError(DependencyResolutionError):
    """Raised when a required service type has no binding."""

    def __init__(self, service_type: Any, required_by: Any = None):
        message = f"No binding registered for {type_name(service_type)}"
        if required_by is not None:
            message += f" (required by {type_name(required_by)})"
        super().__init__(
            message,
            code="MISSING_BINDING",
            suggestion=f"Register {type_name(service_type)} on the ServiceCollection before calling build()",
            details={
                "service_type": type_name(service_type),
                "required_by": type_name(required_by) if required_by is not None else None,
            },
        )
        self.service_type = service_type
        self.required_by = required_by


class CircularDependencyError(DependencyResolutionError):
    """Raised when the binding graph contains a cycle."""

    def __init__(self, path: list[Any]):
        chain = " -> ".join(type_name(item) for item in path)
        super().__init__(
            f"Circular dependency detected: {chain}",
            code="CIRCULAR_DEPENDENCY",
            suggestion="Break the cycle by moving shared logic into a third service",
            details={"path": [type_name(item) for item in path]},
        )
        self.path = path


class LifetimeMismatchError(DependencyResolutionError):
    """Raised when a singleton would capture a scoped service."""

    def __init__(self, service_type: Any, dependency_type: Any):
        super().__init__(
            f"Singleton {type_name(service_type)} depends on scoped {type_name(dependency_type)}",
            code="LIFETIME_MISMATCH",
            suggestion="Register the consumer as scoped, or the dependency as singleton",
            details={
                "service_type": type_name(service_type),
                "dependency_type": type_name(dependency_type),
            },
        )


class ScopeRequiredError(DependencyResolutionError):
    """Raised when a scoped service is resolved outside of a scope."""

    def __init__(self, service_type: Any):
        super().__init__(
            f"{type_name(service_type)} is scoped and must be resolved from a scope",
            code="SCOPE_REQUIRED",
            suggestion="Use container.create_scope() and resolve from the scope",
        )


class ScopeClosedError(DependencyResolutionError):
    """Raised when resolving from a scope that has already been closed."""

    def __init__(self):
        super().__init__("Cannot resolve from a closed scope", code="SCOPE_CLOSED")


# =============================================================================
# Descriptors
# =============================================================================

@dataclass
class Dependency:
    """A constructor/factory parameter the container has to supply."""
    name: str
    service_type: Any
    optional: bool = False


@dataclass
class ServiceDescriptor:
    """One binding: service type -> factory (or instance) with a lifetime."""
    service_type: Any
    lifetime: Lifetime
    factory: Callable[..., Any] | None = None
    instance: Any = None
    dependencies: list[Dependency] = field(default_factory=list)


def _inspect_dependencies(factory: Callable[..., Any]) -> list[Dependency]:
    """
    Read the parameters a class constructor or factory function needs.

    Parameters are matched by their type annotation. A parameter with a
    default value is optional: it is injected when its type is bound and
    left to its default otherwise.
    """
    target = factory.__init__ if inspect.isclass(factory) else factory
    if target is object.__init__:
        return []

    hints = get_type_hints(target)
    dependencies = []

    for name, parameter in inspect.signature(factory).parameters.items():
        if parameter.kind in (parameter.VAR_POSITIONAL, parameter.VAR_KEYWORD):
            continue

        optional = parameter.default is not parameter.empty
        if name not in hints:
            if optional:
                continue
            raise DependencyResolutionError(
                f"Parameter '{name}' of {type_name(factory)} has no type annotation",
                code="UNANNOTATED_PARAMETER",
                suggestion="Annotate every constructor parameter with the service type to inject",
            )

        dependencies.append(Dependency(name=name, service_type=hints[name], optional=optional))

    return dependencies


# =============================================================================
# ServiceCollection
# =============================================================================

class ServiceCollection:
    """
    Mutable set of bindings, turned into a validated Container by build().

    Registering the same service type twice replaces the earlier binding.
    """

    def __init__(self):
        self._descriptors: dict[Any, ServiceDescriptor] = {}

    def __contains__(self, service_type: Any) -> bool:
        return service_type in self._descriptors

    def __len__(self) -> int:
        return len(self._descriptors)

    def add_singleton(
        self,
        service_type: Any,
        implementation: Callable[..., Any] | None = None,
        *,
        instance: Any = None,
    ) -> "ServiceCollection":
        """Bind a service for the lifetime of the container."""
        if instance is not None:
            self._descriptors[service_type] = ServiceDescriptor(
                service_type=service_type,
                lifetime=Lifetime.SINGLETON,
                instance=instance,
            )
            return self
        return self._add(service_type, implementation, Lifetime.SINGLETON)

    def add_scoped(
        self,
        service_type: Any,
        implementation: Callable[..., Any] | None = None,
    ) -> "ServiceCollection":
        """Bind a service shared within one scope (one request)."""
        return self._add(service_type, implementation, Lifetime.SCOPED)

    def add_transient(
        self,
        service_type: Any,
        implementation: Callable[..., Any] | None = None,
    ) -> "ServiceCollection":
        """Bind a service rebuilt on every resolution."""
        return self._add(service_type, implementation, Lifetime.TRANSIENT)

    def _add(
        self,
        service_type: Any,
        implementation: Callable[..., Any] | None,
        lifetime: Lifetime,
    ) -> "ServiceCollection":
        factory = implementation or service_type

        if inspect.isclass(factory) and inspect.isabstract(factory):
            raise DependencyResolutionError(
                f"Cannot bind {type_name(service_type)} to abstract {type_name(factory)}",
                code="ABSTRACT_IMPLEMENTATION",
                suggestion="Pass a concrete implementation class or a factory function",
            )

        self._descriptors[service_type] = ServiceDescriptor(
            service_type=service_type,
            lifetime=lifetime,
            factory=factory,
            dependencies=_inspect_dependencies(factory),
        )
        logger.debug(f"Bound {type_name(service_type)} -> {type_name(factory)} ({lifetime.value})")
        return self

    def build(self) -> "Container":
        """
        Validate every binding and return a Container.

        Raises:
            MissingBindingError: A required dependency is not bound
            CircularDependencyError: The binding graph contains a cycle
            LifetimeMismatchError: A singleton needs a scoped service
        """
        descriptors = dict(self._descriptors)
        _validate(descriptors)
        logger.info(f"Service container built with {len(descriptors)} bindings")
        return Container(descriptors)


def _validate(descriptors: dict[Any, ServiceDescriptor]) -> None:
    """Depth-first walk of the binding graph."""
    needs_scope: dict[Any, bool] = {}
    path: list[Any] = []

    def visit(service_type: Any) -> bool:
        if service_type in needs_scope:
            return needs_scope[service_type]
        if service_type in path:
            raise CircularDependencyError(path[path.index(service_type):] + [service_type])

        descriptor = descriptors[service_type]
        scoped = descriptor.lifetime is Lifetime.SCOPED

        path.append(service_type)
        for dependency in descriptor.dependencies:
            if dependency.service_type not in descriptors:
                if dependency.optional:
                    continue
                raise MissingBindingError(dependency.service_type, required_by=service_type)

            dependency_needs_scope = visit(dependency.service_type)
            if descriptor.lifetime is Lifetime.SINGLETON and dependency_needs_scope:
                raise LifetimeMismatchError(service_type, dependency.service_type)
            if descriptor.lifetime is Lifetime.TRANSIENT and dependency_needs_scope:
                scoped = True
        path.pop()

        needs_scope[service_type] = scoped
        return scoped

    for service_type in descriptors:
        visit(service_type)


# =============================================================================
# Container & Scope
# =============================================================================

class Container:
    """
    Validated, immutable set of bindings.

    Singletons are cached here; scoped instances live on a Scope.
    """

    def __init__(self, descriptors: dict[Any, ServiceDescriptor]):
        self._descriptors = descriptors
        self._singletons: dict[Any, Any] = {
            service_type: descriptor.instance
            for service_type, descriptor in descriptors.items()
            if descriptor.factory is None
        }
        # Re-entrant: building one singleton may resolve another
        self._lock = threading.RLock()

    def __contains__(self, service_type: Any) -> bool:
        return service_type in self._descriptors

    def lifetime_of(self, service_type: Any) -> Lifetime:
        """Return the lifetime a service type is bound with."""
        return self._descriptor(service_type).lifetime

    def create_scope(self) -> "Scope":
        """Start a new scope; use one per logical request."""
        return Scope(self)

    def resolve(self, service_type: type[T]) -> T:
        """
        Resolve a singleton or transient service from the root.

        Raises:
            ScopeRequiredError: If the service (or a dependency) is scoped
        """
        return self._resolve(self._descriptor(service_type), scope=None)

    def _descriptor(self, service_type: Any) -> ServiceDescriptor:
        try:
            return self._descriptors[service_type]
        except KeyError:
            raise MissingBindingError(service_type) from None

    def _resolve(self, descriptor: ServiceDescriptor, scope: "Scope | None") -> Any:
        if descriptor.lifetime is Lifetime.SINGLETON:
            return self._get_singleton(descriptor)
        if descriptor.lifetime is Lifetime.SCOPED:
            if scope is None:
                raise ScopeRequiredError(descriptor.service_type)
            return scope._get_scoped(descriptor)
        return self._construct(descriptor, scope)

    def _get_singleton(self, descriptor: ServiceDescriptor) -> Any:
        with self._lock:
            if descriptor.service_type not in self._singletons:
                self._singletons[descriptor.service_type] = self._construct(descriptor, scope=None)
            return self._singletons[descriptor.service_type]

    def _construct(self, descriptor: ServiceDescriptor, scope: "Scope | None") -> Any:
        kwargs = {}
        for dependency in descriptor.dependencies:
            if dependency.service_type not in self._descriptors:
                # Optional and unbound: the parameter default applies
                continue
            kwargs[dependency.name] = self._resolve(self._descriptors[dependency.service_type], scope)

        logger.debug(
            f"Constructing {type_name(descriptor.factory)} for {type_name(descriptor.service_type)} "
            f"({descriptor.lifetime.value})"
        )
        return descriptor.factory(**kwargs)


class Scope:
    """
    Resolution scope: scoped services are built once per scope.

    Used as a context manager; a closed scope drops its instances and
    refuses further resolutions.
    """

    def __init__(self, container: Container):
        self._container = container
        self._instances: dict[Any, Any] = {}
        self._closed = False

    def __enter__(self) -> "Scope":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def resolve(self, service_type: type[T]) -> T:
        """Resolve a service of any lifetime within this scope."""
        if self._closed:
            raise ScopeClosedError()
        return self._container._resolve(self._container._descriptor(service_type), scope=self)

    def close(self) -> None:
        self._instances.clear()
        self._closed = True

    def _get_scoped(self, descriptor: ServiceDescriptor) -> Any:
        if descriptor.service_type not in self._instances:
            self._instances[descriptor.service_type] = self._container._construct(descriptor, scope=self)
        return self._instances[descriptor.service_type]
