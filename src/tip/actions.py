"""Action descriptors for the tip endpoints."""

from src.config import config
from src.models import ActionDescriptor, ActionLinks, ActionParameter, TipOption

TIP_PATH = "/api/tip"
BASE_TITLE = "Buy Me a Coffee"
# Literal placeholder, substituted by the client with the user's input.
CUSTOM_AMOUNT_HREF = f"{TIP_PATH}?amount={{amount}}"


def base_descriptor() -> ActionDescriptor:
    """Descriptor offering every preset amount plus a custom amount."""
    symbol = config.token_symbol
    actions = [
        TipOption(
            label=f"{amount} {symbol}",
            href=f"{TIP_PATH}?amount={amount}",
        )
        for amount in config.preset_amounts
    ]
    actions.append(
        TipOption(
            label="Custom Amount",
            href=CUSTOM_AMOUNT_HREF,
            parameters=[
                ActionParameter(name="amount", label=f"Enter a custom {symbol} amount"),
            ],
        )
    )

    return ActionDescriptor(
        title=BASE_TITLE,
        icon=config.image_url,
        description=(
            f"Support me by buying me a coffee using {symbol}. "
            "Choose an amount or enter a custom amount."
        ),
        links=ActionLinks(actions=actions),
    )


def amount_descriptor(amount: str) -> ActionDescriptor:
    """Descriptor with a single action tipping ``amount``.

    The amount is used as given; it is validated only when the client POSTs.
    """
    symbol = config.token_symbol
    return ActionDescriptor(
        title=f"Tip {amount} {symbol}",
        icon=config.image_url,
        description=f"Tip {amount} {symbol} to support.",
        links=ActionLinks(
            actions=[TipOption(label=BASE_TITLE, href=f"{TIP_PATH}?amount={amount}")]
        ),
    )
