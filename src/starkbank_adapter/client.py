"""
StarkBankClient: composes transport, Rest core and a default caller context
"""

import logging
from pathlib import Path
from types import ModuleType
from typing import Any, Iterator, List, Optional, Tuple

from .config_loader import ClientConfig, ConfigLoader
from .context import CallerContext
from .http_client import HTTPClient
from .resources import QUERYABLE
from .rest import Rest

logger = logging.getLogger(__name__)


def configure_logging(level: Any = logging.INFO) -> None:
    """Set the level of every logger in the package namespace"""
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(__package__).setLevel(level)


class ResourceEndpoint:
    """Binds a resource module to a Rest instance and a default caller context"""

    def __init__(self, module: ModuleType, rest: Rest, default_context: Optional[CallerContext]):
        self.module = module
        self.rest = rest
        self.default_context = default_context

    @property
    def name(self) -> str:
        return self.module.resource.name

    def get(self, id: str, context: Optional[CallerContext] = None) -> Any:
        return self.module.get(self.rest, id, context or self.default_context)

    def query(self, context: Optional[CallerContext] = None, **filters) -> Iterator[Any]:
        return self.module.query(self.rest, context or self.default_context, **filters)

    def page(self, context: Optional[CallerContext] = None, **filters) -> Tuple[List[Any], Optional[str]]:
        return self.module.page(self.rest, context or self.default_context, **filters)


class StarkBankClient:
    """
    Entry point for applications

    Every resource is reachable as an attribute, e.g.
    ``client.boleto_log.query(after="2020-04-03", limit=10)``. Calls use the
    client's default context unless a ``context`` argument is given.
    """

    def __init__(self, context: Optional[CallerContext] = None,
                 http_client: Optional[HTTPClient] = None):
        self.context = context
        self.http_client = http_client or HTTPClient()
        self.rest = Rest(self.http_client)
        self.endpoints = {
            attribute: ResourceEndpoint(module, self.rest, context)
            for attribute, module in QUERYABLE.items()
        }

    def __getattr__(self, attribute: str) -> ResourceEndpoint:
        endpoints = self.__dict__.get('endpoints', {})
        if attribute in endpoints:
            return endpoints[attribute]
        raise AttributeError(f"{type(self).__name__} has no resource '{attribute}'")

    @classmethod
    def from_config(cls, config_path: Path, log_level: Optional[str] = None) -> 'StarkBankClient':
        """
        Build a client from a TOML or YAML configuration file

        Args:
            config_path: Path to the configuration file
            log_level: Package logging level, overriding the '[logging]' section

        Raises:
            ConfigurationError: If the file is invalid
            EnvironmentError: If a referenced environment variable is missing
        """
        config = ConfigLoader.load_config(Path(config_path))
        ConfigLoader.validate_environment_variables(config)
        return cls.from_client_config(config, log_level=log_level)

    @classmethod
    def from_client_config(cls, config: ClientConfig,
                           log_level: Optional[str] = None) -> 'StarkBankClient':
        level = log_level or config.logging.get('level')
        if level:
            configure_logging(level)

        http_client = HTTPClient(
            max_retries=config.retries.get('max_attempts', 3),
            backoff_factor=config.retries.get('backoff_factor', 2.0),
            requests_per_second=config.rate_limits.get('requests_per_second', 5.0),
            timeout=config.http.get('timeout_seconds', 15.0)
        )
        context = CallerContext.from_config(config)
        logger.info(f"Initialised Stark Bank client for {context.url}")
        return cls(context=context, http_client=http_client)

    def close(self) -> None:
        self.http_client.close_connection()

    def __enter__(self) -> 'StarkBankClient':
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
