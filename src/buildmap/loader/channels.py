import logging
from enum import Enum

from src.buildmap.config import ScrapeConfig


class Channel(str, Enum):

    SEMI_ANNUAL_ENTERPRISE = "semi-annual-enterprise-channel"
    SEMI_ANNUAL_ENTERPRISE_PREVIEW = "semi-annual-enterprise-channel-preview"
    MONTHLY_ENTERPRISE = "monthly-enterprise-channel"
    ALL = "All"

    def __str__(self):
        return self.value


DEFAULT_CHANNEL = Channel.SEMI_ANNUAL_ENTERPRISE
CHANNEL_CHOICES = [channel.value for channel in Channel]


def resolve_channel_urls(channel: str, config: ScrapeConfig) -> list[str]:
    """
    Map a channel selector to the update history pages that describe it.

    "All" covers every channel page plus the legacy pages. An unknown selector
    is reported and resolves to no URLs at all rather than raising.
    """
    if isinstance(channel, Channel):
        channel = channel.value
    if channel == Channel.ALL.value:
        pages = [page for channel_pages in config.channel_pages.values() for page in channel_pages]
        pages.extend(config.legacy_pages)
    elif channel in config.channel_pages:
        pages = list(config.channel_pages[channel])
    else:
        logging.info("Unknown channel '%s'; expected one of %s", channel, ", ".join(CHANNEL_CHOICES))
        pages = []
    return [config.page_url(page) for page in pages]
