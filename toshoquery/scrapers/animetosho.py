from typing import List, Optional, Set, Tuple

import httpx
from selectolax.parser import HTMLParser, Node

from toshoquery.config.settings import settings
from toshoquery.core.errors import UpstreamError
from toshoquery.core.models import Link, ResultEntry
from toshoquery.utils.http_client import http_client
from toshoquery.utils.logger import scraper_logger

# ===========================
# Constants
# ===========================
# Covers ".home_list_entry.home_list_entry_alt, .home_list_entry, .home_list_entry_compl_1"
ENTRY_CLASSES = {"home_list_entry", "home_list_entry_compl_1"}
TITLE_SELECTOR = ".link a"
LINK_SELECTOR = ".links a"
DOWNLOAD_LINK_CLASS = "dlink"
MAGNET_PREFIX = "magnet:"


# ===========================
# Node Helpers
# ===========================
def get_classes(node: Node) -> Set[str]:
    return set((node.attributes.get("class") or "").split())


def is_entry_node(node: Node) -> bool:
    return bool(get_classes(node) & ENTRY_CLASSES)


def is_result_link(node: Node) -> bool:
    href = node.attributes.get("href") or ""
    return DOWNLOAD_LINK_CLASS in get_classes(node) or href.startswith(MAGNET_PREFIX)


# ===========================
# Entry Extraction
# ===========================
def extract_title(entry: Node) -> str:
    return "".join(node.text() for node in entry.css(TITLE_SELECTOR)).strip()


def extract_links(entry: Node) -> List[Link]:
    links = []
    for node in entry.css(LINK_SELECTOR):
        if not is_result_link(node):
            continue

        href = node.attributes.get("href")
        links.append(Link(
            href=href,
            text=node.text().strip(),
            is_magnet=bool(href and href.startswith(MAGNET_PREFIX))
        ))
    return links


def scrape(html: str) -> List[ResultEntry]:
    parser = HTMLParser(html)
    results = []

    # Single-selector traversal keeps document order and visits each container once
    for node in parser.css("[class]"):
        if not is_entry_node(node):
            continue

        title = extract_title(node)
        links = extract_links(node)

        if title and links:
            results.append(ResultEntry(title=title, links=links))

    scraper_logger.debug(f"Scraped {len(results)} entries")
    return results


# ===========================
# Upstream Fetch
# ===========================
async def fetch_search_page(url: str, user_agent: Optional[str] = None) -> Tuple[int, str]:
    scraper_logger.debug(f"Fetching: {url}")

    try:
        response = await http_client.get(url, headers={"User-Agent": user_agent or settings.USER_AGENT})
    except httpx.HTTPError as e:
        scraper_logger.error(f"Fetch failed: {type(e).__name__}")
        raise UpstreamError(str(e) or type(e).__name__) from e

    scraper_logger.debug(f"Upstream responded {response.status_code}")
    return response.status_code, response.text
