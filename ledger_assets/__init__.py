"""
ledger-assets: checked fixed-point token quantities.

Quantity is a scaled signed amount bound to a currency symbol with overflow-checked
arithmetic. OwnedQuantity is a Quantity qualified by the identity of its owner.
"""

import logging

__version__ = "0.1.0"

# Без настройки хостом события пакета никуда не выводятся
logging.getLogger(__name__).addHandler(logging.NullHandler())
