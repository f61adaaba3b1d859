"""
Dependency wiring for FastAPI.

The container holds the two long-lived collaborators every request needs:
the token validator and the authorization gate built on top of it.
Per-request services are built from an AccessGrant in api/services.
"""

from typing import TYPE_CHECKING

# Imported lazily at runtime; the gate pulls in every repository module
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.access.gate import AuthorizationGate


class ServiceContainer:
    """
    Lazily built singletons for the token validator and the gate.

    Tests either call reset_container() or override get_gate through
    app.dependency_overrides.
    """

    def __init__(self) -> None:
        self._auth_service: "IAuthService | None" = None
        self._gate: "AuthorizationGate | None" = None

    @property
    def auth(self) -> "IAuthService":
        if self._auth_service is None:
            from modules.auth.service import get_auth_service
            self._auth_service = get_auth_service()
        return self._auth_service

    @property
    def gate(self) -> "AuthorizationGate":
        """The only holder of the service-role client factory."""
        if self._gate is None:
            from modules.access.gate import AuthorizationGate
            self._gate = AuthorizationGate(auth=self.auth)
        return self._gate

    def reset(self) -> None:
        self._auth_service = None
        self._gate = None


_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Drop the container; the next get_container() builds a fresh one."""
    global _container
    _container = None


# Route-level dependencies


def get_auth_service() -> "IAuthService":
    return get_container().auth


def get_gate() -> "AuthorizationGate":
    """FastAPI dependency for the authorization gate."""
    return get_container().gate
