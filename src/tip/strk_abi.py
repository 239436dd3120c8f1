"""ERC-20 interface of the STRK token contract (Cairo 1 ABI subset)."""

CONTRACT_ADDRESS = "core::starknet::contract_address::ContractAddress"
U256 = "core::integer::u256"
BOOL = "core::bool"

abi = [
    {
        "type": "struct",
        "name": U256,
        "members": [
            {"name": "low", "type": "core::integer::u128"},
            {"name": "high", "type": "core::integer::u128"},
        ],
    },
    {
        "type": "function",
        "name": "transfer",
        "inputs": [
            {"name": "recipient", "type": CONTRACT_ADDRESS},
            {"name": "amount", "type": U256},
        ],
        "outputs": [{"type": BOOL}],
        "state_mutability": "external",
    },
    {
        "type": "function",
        "name": "transfer_from",
        "inputs": [
            {"name": "sender", "type": CONTRACT_ADDRESS},
            {"name": "recipient", "type": CONTRACT_ADDRESS},
            {"name": "amount", "type": U256},
        ],
        "outputs": [{"type": BOOL}],
        "state_mutability": "external",
    },
    {
        "type": "function",
        "name": "approve",
        "inputs": [
            {"name": "spender", "type": CONTRACT_ADDRESS},
            {"name": "amount", "type": U256},
        ],
        "outputs": [{"type": BOOL}],
        "state_mutability": "external",
    },
    {
        "type": "function",
        "name": "balance_of",
        "inputs": [{"name": "account", "type": CONTRACT_ADDRESS}],
        "outputs": [{"type": U256}],
        "state_mutability": "view",
    },
]
