"""Transaction preparation for STRK tips.

Builds the unsigned ``transfer`` call sending a tip to the donation wallet.
The call is serialized to JSON text and handed back to the client, which
signs and submits it. Nothing here signs or talks to the network.
"""

import asyncio
from typing import Optional

from src.config import config
from src.logging_utils import get_logger
from src.models import TransferCall

from .amounts import to_fixed_point
from .contract import TokenContract, parse_address
from .errors import EncodingTimeout
from .strk_abi import abi

logger = get_logger(__name__)

TRANSFER_ENTRYPOINT = "transfer"


class TransactionPreparer:
    """Prepares token transfers to a fixed recipient.

    Recipient, token contract and decimals default to the process
    configuration, read at call time.
    """

    def __init__(
        self,
        recipient: Optional[str] = None,
        contract_address: Optional[str] = None,
        decimals: Optional[int] = None,
    ):
        self._recipient = recipient
        self._contract_address = contract_address
        self._decimals = decimals

    @property
    def recipient(self) -> str:
        return self._recipient or config.donation_destination_wallet

    @property
    def contract_address(self) -> str:
        return self._contract_address or config.strk_contract_address

    @property
    def decimals(self) -> int:
        return self._decimals if self._decimals is not None else config.token_decimals

    def build_call(self, amount: Optional[str]) -> TransferCall:
        """Build the transfer call for a tip of ``amount`` display units.

        Raises:
            InvalidAmount: If the amount is missing, malformed or negative.
            UpstreamEncodingFailure: If the call can not be encoded.
        """
        fixed_amount = to_fixed_point(amount, self.decimals)

        contract = TokenContract(self.contract_address, abi)
        call = contract.populate(
            TRANSFER_ENTRYPOINT,
            {
                "recipient": parse_address(self.recipient, "recipient"),
                "amount": {"low": fixed_amount.low, "high": fixed_amount.high},
            },
        )

        return TransferCall(
            contractAddress=f"0x{call.to_addr:064x}",
            entrypoint=TRANSFER_ENTRYPOINT,
            calldata=[str(felt) for felt in call.calldata],
        )

    def prepare(self, amount: Optional[str]) -> str:
        """Build the transfer call and serialize it to JSON text."""
        transfer_call = self.build_call(amount)
        logger.info(f"Prepared transfer of {amount} to {self.recipient}")
        return transfer_call.model_dump_json()


# Global preparer instance
transaction_preparer = TransactionPreparer()


async def prepare_transaction(
    amount: Optional[str],
    timeout: Optional[float] = None,
    preparer: Optional[TransactionPreparer] = None,
) -> str:
    """Prepare a serialized transfer call without blocking the event loop.

    Args:
        amount: Tip amount in display units.
        timeout: Seconds to wait before giving up. Defaults to
            ``config.prepare_timeout_seconds``.
        preparer: Preparer to use, the global one by default.

    Raises:
        InvalidAmount: If the amount is rejected.
        UpstreamEncodingFailure: If encoding fails.
        EncodingTimeout: If encoding does not finish within ``timeout``.
    """
    preparer = preparer or transaction_preparer
    timeout = timeout if timeout is not None else config.prepare_timeout_seconds

    try:
        return await asyncio.wait_for(asyncio.to_thread(preparer.prepare, amount), timeout)
    except asyncio.TimeoutError:
        raise EncodingTimeout(f"Preparing the transfer took longer than {timeout}s") from None
