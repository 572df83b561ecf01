"""
Resource modules of the Stark Bank API

Importing this package registers every resource descriptor.
"""

from . import boleto, brcode_payment, deposit, utility_payment
from . import boleto_log, brcode_payment_log, deposit_log, dict_key, utility_payment_log
from .boleto import Boleto
from .boleto_log import BoletoLog
from .brcode_payment import BrcodePayment
from .brcode_payment_log import BrcodePaymentLog
from .deposit import Deposit
from .deposit_log import DepositLog
from .dict_key import DictKey
from .utility_payment import UtilityPayment
from .utility_payment_log import UtilityPaymentLog

# Modules exposing get, query and page
QUERYABLE = {
    'boleto_log': boleto_log,
    'brcode_payment_log': brcode_payment_log,
    'deposit_log': deposit_log,
    'dict_key': dict_key,
    'utility_payment_log': utility_payment_log,
}

__all__ = [
    'Boleto',
    'BoletoLog',
    'BrcodePayment',
    'BrcodePaymentLog',
    'Deposit',
    'DepositLog',
    'DictKey',
    'UtilityPayment',
    'UtilityPaymentLog',
    'QUERYABLE',
]
