"""HTML preview pages for social unfurling.

Social scrapers read the Open Graph / Twitter Card meta tags; browsers are
sent on to the unfurler after a short delay.
"""

from pathlib import Path
from typing import Iterable, Optional
from urllib.parse import quote

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.config import config
from src.models import TipOption

_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

REDIRECT_DELAY_MS = 5000

_env = Environment(
    loader=FileSystemLoader(str(_TEMPLATES_DIR)),
    autoescape=select_autoescape(["html", "xml"]),
)


def redirect_target(amount: Optional[str] = None) -> str:
    """URL the unfurler should render: the tip action, scoped to ``amount``."""
    base_url = config.tip_base_url.rstrip("/")
    if amount:
        return f"{base_url}/{quote(amount, safe='')}"
    return base_url


def unfurler_link(target: str) -> str:
    return f"{config.unfurler_url}?url={quote(target, safe='')}"


def build_page(
    title: str,
    description: str,
    image_url: str,
    amount: Optional[str] = None,
    actions: Iterable[TipOption] = (),
) -> str:
    """Render the preview page.

    Every value is escaped by the template, so callers may pass request data.

    Args:
        title: Page and card title.
        description: Card description.
        image_url: Card image.
        amount: Tip amount the page is scoped to, if any.
        actions: Actions listed in the page body.

    Returns:
        Complete HTML document.
    """
    target = redirect_target(amount)
    template = _env.get_template("tip_page.html")
    return template.render(
        title=title,
        description=description,
        image_url=image_url,
        target=target,
        unfurler_link=unfurler_link(target),
        twitter_handle=config.twitter_handle,
        redirect_delay_ms=REDIRECT_DELAY_MS,
        actions=list(actions),
    )
