"""HTTP adapters - Remote authentication service clients."""

from .auth_service import HttpRegistrationEndpoint

__all__ = ["HttpRegistrationEndpoint"]
