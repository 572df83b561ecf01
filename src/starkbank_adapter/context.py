"""
Caller context: the credentials and API location a request is made with
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .config_loader import ENVIRONMENT_URLS, ClientConfig, ConfigLoader
from .errors import AuthorizationError


@dataclass(frozen=True)
class CallerContext:
    """Credentials plus the environment (or explicit base URL) they belong to"""
    credentials: Dict[str, Any] = field(default_factory=dict)
    environment: str = 'sandbox'
    base_url: Optional[str] = None

    @property
    def url(self) -> str:
        if self.base_url:
            return self.base_url if self.base_url.endswith('/') else self.base_url + '/'
        return ENVIRONMENT_URLS[self.environment]

    @classmethod
    def from_config(cls, config: ClientConfig) -> 'CallerContext':
        return cls(
            credentials=ConfigLoader.resolve_credentials(config),
            environment=config.environment,
            base_url=config.base_url or None,
        )


def require_context(context: Optional[CallerContext]) -> CallerContext:
    """
    Check that a usable caller context was supplied

    Raises:
        AuthorizationError: If the context is missing or carries no credentials
    """
    if context is None:
        raise AuthorizationError("No caller context given")
    if not context.credentials or not context.credentials.get('type'):
        raise AuthorizationError("Caller context has no credentials")
    if not context.base_url and context.environment not in ENVIRONMENT_URLS:
        raise AuthorizationError(f"Unknown environment: {context.environment}")
    return context
