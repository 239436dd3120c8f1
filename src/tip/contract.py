"""ABI driven encoding of Starknet contract calls.

``TokenContract.populate`` mirrors what wallet SDKs do client side: the ABI is
parsed by ``starknet_py``, whose payload serializer orders the named arguments
and flattens them into felts. The result is an unsigned ``starknet_py`` Call.
"""

from typing import Any, Union

from starknet_py.abi.v2 import AbiParser
from starknet_py.hash.selector import get_selector_from_name
from starknet_py.net.client_models import Call
from starknet_py.serialization.errors import InvalidTypeException, InvalidValueException
from starknet_py.serialization.factory import serializer_for_payload

from src.logging_utils import get_logger

from .errors import UpstreamEncodingFailure

logger = get_logger(__name__)


def parse_address(address: Union[int, str], name: str = "address") -> int:
    """Convert an int or 0x-prefixed hex address to an int.

    Range checks are left to the serializer.

    Raises:
        UpstreamEncodingFailure: If the address is not an integer.
    """
    if isinstance(address, int) and not isinstance(address, bool):
        return address
    try:
        return int(address, 16)
    except (TypeError, ValueError):
        raise UpstreamEncodingFailure(f"{name} is not a valid address: {address!r}") from None


class TokenContract:
    """A deployed contract known by its address and ABI."""

    def __init__(self, address: Union[int, str], abi: list[dict]):
        self.address = parse_address(address, "contract address")
        self.functions = AbiParser(abi).parse().functions

    def populate(self, entrypoint: str, arguments: dict[str, Any]) -> Call:
        """Build an unsigned call to ``entrypoint`` with named arguments.

        Args:
            entrypoint: Function name declared in the ABI.
            arguments: Mapping of input name to value.

        Returns:
            Call with the entrypoint selector and flattened calldata.

        Raises:
            UpstreamEncodingFailure: If the entrypoint is unknown or the
                serializer rejects the arguments.
        """
        function = self.functions.get(entrypoint)
        if function is None:
            raise UpstreamEncodingFailure(f"Unknown entrypoint: {entrypoint}")

        try:
            calldata = serializer_for_payload(function.inputs).serialize(arguments)
        except (InvalidTypeException, InvalidValueException) as e:
            raise UpstreamEncodingFailure(f"Can not encode {entrypoint} call: {e}") from e

        logger.debug(f"Encoded {entrypoint} call with {len(calldata)} calldata felts")
        return Call(
            to_addr=self.address,
            selector=get_selector_from_name(entrypoint),
            calldata=calldata,
        )
