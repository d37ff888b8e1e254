"""Per-resource convenience methods layered on the dispatcher."""

from .accounts import AccountsMixin
from .fees import FeesMixin
from .orders import OrdersMixin
from .products import CANDLE_GRANULARITIES, ProductsMixin
from .profiles import ProfilesMixin
from .users import UsersMixin
from .wallets import WalletsMixin

__all__ = [
    "AccountsMixin",
    "CANDLE_GRANULARITIES",
    "FeesMixin",
    "OrdersMixin",
    "ProductsMixin",
    "ProfilesMixin",
    "UsersMixin",
    "WalletsMixin",
]
