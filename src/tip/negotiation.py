"""Choose between the HTML preview page and the JSON action descriptor."""

from typing import Optional

TWITTER_BOT_MARKER = "twitterbot"


def wants_html(accept: Optional[str], user_agent: Optional[str]) -> bool:
    """Return True when the request should get the HTML preview page.

    Browsers ask for ``text/html``. Twitter's card scraper does not, so it is
    recognized by its user agent instead.
    """
    if accept and "text/html" in accept:
        return True
    if user_agent and TWITTER_BOT_MARKER in user_agent.lower():
        return True
    return False
