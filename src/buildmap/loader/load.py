"""
Scraper for Microsoft 365 Apps update history pages.

Responsibilities:
- `channels`: Maps a channel selector to its current and archived update history URLs
- `load`: Fetches each page, extracts version/build pairs, dedupes and sorts them

Main functions:
- fetch_build_records(): Full scrape for one channel selector
- parse_build_records(): Pattern-match a raw page body into BuildRecords

Page format:
- Each release is announced by a line `<p><em>Version 2308 (Build 16731.20636)</em></p>`
- The short label (2308) becomes the build number, the build suffix becomes version 16.0.16731.20636

Failure handling:
- Transport errors and non-200 responses skip the URL, the rest of the run continues
- A build suffix that is not strictly numeric skips that line only
- An unknown channel produces no URLs and therefore no records
"""
import logging
import re

import httpx

from src.buildmap.config import ScrapeConfig
from src.buildmap.loader.channels import DEFAULT_CHANNEL, resolve_channel_urls
from src.buildmap.models.build import BuildRecord, BuildVersion, InvalidVersionError

VERSION_LINE_RE = re.compile(
    r"<p><em>Version (?P<build_number>[^\s<]+) \(Build (?P<version_suffix>[^)<]*)\)</em></p>"
)


def fetch_page(client: httpx.Client, url: str) -> str | None:
    """Return the page body, or None when the page could not be retrieved with status 200."""
    try:
        response = client.get(url, follow_redirects=True)
    except httpx.HTTPError as exc:
        logging.debug("Request to %s failed: %s", url, exc)
        return None
    if response.status_code != 200:
        logging.info("Skipping %s: status code %s", url, response.status_code)
        return None
    return response.text


def parse_build_records(body: str, version_prefix: str = "16.0.") -> list[BuildRecord]:
    """Extract BuildRecords from a raw page body in document order."""
    records: list[BuildRecord] = []
    for match in VERSION_LINE_RE.finditer(body):
        build_number = match.group("build_number")
        version_text = version_prefix + match.group("version_suffix")
        try:
            version_number = BuildVersion.parse(version_text)
        except InvalidVersionError as exc:
            logging.warning("Skipping version line '%s': %s", match.group(0), exc)
            continue
        records.append(BuildRecord(version_number=version_number, build_number=build_number))
    return records


def dedupe_and_sort(records: list[BuildRecord]) -> list[BuildRecord]:
    """Sort by version ascending and keep the first record seen for each version."""
    unique: list[BuildRecord] = []
    seen: set[BuildVersion] = set()
    for record in sorted(records, key=lambda r: r.version_number):
        if record.version_number in seen:
            continue
        seen.add(record.version_number)
        unique.append(record)
    return unique


def fetch_build_records(
        client: httpx.Client,
        channel: str = DEFAULT_CHANNEL,
        config: ScrapeConfig | None = None,
) -> list[BuildRecord]:
    """Fetch every page for the channel sequentially and return unique records sorted by version."""
    config = config or ScrapeConfig()
    records: list[BuildRecord] = []
    for url in resolve_channel_urls(channel, config):
        logging.info("Calling %s", url)
        body = fetch_page(client, url)
        if body is None:
            continue
        page_records = parse_build_records(body, version_prefix=config.version_prefix)
        logging.info("Found %d versions on %s", len(page_records), url)
        records.extend(page_records)
    return dedupe_and_sort(records)
