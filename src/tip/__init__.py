"""STRK tip action: descriptors, preview pages and unsigned transfer calls."""

from .amounts import FixedPointAmount, parse_amount, to_fixed_point
from .errors import EncodingTimeout, InvalidAmount, TipError, UpstreamEncodingFailure
from .transactions import TransactionPreparer, prepare_transaction

__all__ = [
    "EncodingTimeout",
    "FixedPointAmount",
    "InvalidAmount",
    "TipError",
    "TransactionPreparer",
    "UpstreamEncodingFailure",
    "parse_amount",
    "prepare_transaction",
    "to_fixed_point",
]
