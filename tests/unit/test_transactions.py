"""Unit tests for transfer call preparation."""

import asyncio
import json
import time
from unittest.mock import patch

import pytest

from src.config import config
from src.tip.errors import EncodingTimeout, InvalidAmount, UpstreamEncodingFailure
from src.tip.transactions import TransactionPreparer, prepare_transaction


@pytest.mark.unit
class TestTransactionPreparer:
    """Test the unsigned transfer call for the donation wallet."""

    def test_prepare_ten_strk(self):
        transaction = TransactionPreparer().prepare("10")
        call = json.loads(transaction)

        assert call["entrypoint"] == "transfer"
        assert call["contractAddress"] == config.strk_contract_address
        assert call["calldata"] == [
            str(int(config.donation_destination_wallet, 16)),
            str(10 * 10**18),
            "0",
        ]

    def test_contract_address_is_zero_padded(self):
        preparer = TransactionPreparer(contract_address="0x1")
        call = preparer.build_call("1")
        assert call.contractAddress == "0x" + "0" * 63 + "1"

    def test_uses_configured_recipient(self):
        with patch("src.config.config.donation_destination_wallet", "0xabc"):
            call = TransactionPreparer().build_call("1")
        assert call.calldata[0] == str(0xABC)

    @pytest.mark.parametrize("amount", ["", "abc", "-5", None])
    def test_invalid_amounts_build_no_call(self, amount):
        preparer = TransactionPreparer()
        with patch("src.tip.transactions.TokenContract") as contract_cls:
            with pytest.raises(InvalidAmount):
                preparer.prepare(amount)
        contract_cls.assert_not_called()

    def test_invalid_contract_address(self):
        with pytest.raises(UpstreamEncodingFailure):
            TransactionPreparer(contract_address="not-an-address").prepare("10")


@pytest.mark.unit
class TestPrepareTransaction:
    """Test the async wrapper and its timeout."""

    @pytest.mark.asyncio
    async def test_returns_serialized_call(self):
        transaction = await prepare_transaction("0.5")
        assert json.loads(transaction)["calldata"][1] == str(5 * 10**17)

    @pytest.mark.asyncio
    async def test_propagates_invalid_amount(self):
        with pytest.raises(InvalidAmount):
            await prepare_transaction("abc")

    @pytest.mark.asyncio
    async def test_times_out(self):
        preparer = TransactionPreparer()

        def slow_prepare(amount):
            time.sleep(0.2)
            return "{}"

        with patch.object(preparer, "prepare", side_effect=slow_prepare):
            with pytest.raises(EncodingTimeout):
                await prepare_transaction("10", timeout=0.01, preparer=preparer)

        # Let the worker thread finish before the loop closes
        await asyncio.sleep(0.25)
