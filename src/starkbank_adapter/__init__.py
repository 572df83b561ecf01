"""
Stark Bank resource adapter
Provides typed resources, cursor based paging and lazy enumeration over the
Stark Bank REST API
"""

from .errors import (
    StarkBankError,
    ValidationError,
    SchemaError,
    NotFound,
    AuthorizationError,
    TransportError,
)
from .config_loader import ConfigLoader, ClientConfig, ConfigurationError, EnvironmentError
from .context import CallerContext
from .http_client import HTTPClient, APIRequest, APIResponse
from .resource import Resource, ResourceDescriptor, get_descriptor, registered_names
from .rest import Rest
from .resources import (
    Boleto,
    BoletoLog,
    BrcodePayment,
    BrcodePaymentLog,
    Deposit,
    DepositLog,
    DictKey,
    UtilityPayment,
    UtilityPaymentLog,
)
from .client import StarkBankClient, configure_logging

__version__ = "0.1.0"
__all__ = [
    'StarkBankError',
    'ValidationError',
    'SchemaError',
    'NotFound',
    'AuthorizationError',
    'TransportError',
    'ConfigLoader',
    'ClientConfig',
    'ConfigurationError',
    'EnvironmentError',
    'CallerContext',
    'HTTPClient',
    'APIRequest',
    'APIResponse',
    'Resource',
    'ResourceDescriptor',
    'get_descriptor',
    'registered_names',
    'Rest',
    'Boleto',
    'BoletoLog',
    'BrcodePayment',
    'BrcodePaymentLog',
    'Deposit',
    'DepositLog',
    'DictKey',
    'UtilityPayment',
    'UtilityPaymentLog',
    'StarkBankClient',
    'configure_logging',
]
