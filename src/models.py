"""Shared data models for the tip action service.

Field names follow the wire format expected by Starknet action clients,
which is why some of them are camelCase.
"""

from typing import Optional

from pydantic import BaseModel, Field


class ActionParameter(BaseModel):
    """Input a client must collect before following an action href."""

    name: str = Field(description="Placeholder name used in the href template")
    label: str = Field(description="Prompt shown to the user")


class TipOption(BaseModel):
    """One tip button: a preset amount or the custom-amount template."""

    label: str = Field(description="Button label (e.g. '10 STRK')")
    href: str = Field(description="Action URL, POSTed by the client to get a transaction")
    parameters: Optional[list[ActionParameter]] = Field(
        default=None, description="Inputs required by a templated href"
    )


class ActionLinks(BaseModel):
    """Ordered list of actions offered by a descriptor."""

    actions: list[TipOption] = Field(default_factory=list)


class ActionDescriptor(BaseModel):
    """JSON contract returned to wallet and social integrations."""

    title: str
    icon: str = Field(description="Image URL")
    description: str
    links: ActionLinks
    isStarknet: bool = True


class TransferCall(BaseModel):
    """Unsigned token-transfer call for a client to sign and submit."""

    contractAddress: str = Field(description="Token contract, 0x-prefixed hex")
    entrypoint: str = Field(description="Contract function name")
    calldata: list[str] = Field(description="Flattened arguments as decimal strings")


class TransactionResponse(BaseModel):
    """Response of POST /api/tip."""

    transaction: str = Field(description="JSON-serialized TransferCall")


class ErrorResponse(BaseModel):
    """Error body for rejected tip requests."""

    error: str = Field(description="Error type (e.g. 'InvalidAmount')")
    detail: str
