"""Fetch work pages from the archive."""
import asyncio
import logging
from typing import Optional

import requests

from ao3work.assembler import parse_work
from ao3work.config import settings
from ao3work.errors import InvalidWorkId, NetworkError
from ao3work.schemas import Work

logger = logging.getLogger(__name__)


def build_work_url(work_id: str) -> str:
    """Return the page URL of a work."""
    url = f"{settings.base_url.rstrip('/')}/works/{work_id}"
    if settings.view_adult:
        url += "?view_adult=true"
    return url


def check_page(page_text: str, work_id: str) -> str:
    """
    Reject the archive's not-found page.

    The marker is looked for in the body, whatever the HTTP status was.

    Raises:
        InvalidWorkId: if the page is the error page
    """
    if settings.not_found_marker in page_text:
        raise InvalidWorkId(work_id)
    return page_text


def fetch_work_page(work_id: str, session: Optional[requests.Session] = None) -> str:
    """
    Download the page of one work.

    Args:
        work_id: Archive work identifier
        session: Optional session to reuse

    Returns:
        Page markup

    Raises:
        InvalidWorkId: if the archive served its not-found page
        NetworkError: on transport failure or any other HTTP error status
    """
    url = build_work_url(work_id)
    http = session or requests.Session()
    logger.info(f"Fetching work {work_id}: {url}")

    try:
        response = http.get(
            url,
            headers={"User-Agent": settings.user_agent},
            timeout=settings.request_timeout,
        )
    except requests.RequestException as e:
        logger.error(f"Request for work {work_id} failed: {e}")
        raise NetworkError(e) from e

    page_text = check_page(response.text, work_id)

    try:
        response.raise_for_status()
    except requests.HTTPError as e:
        logger.error(f"Work {work_id} returned HTTP {response.status_code}")
        raise NetworkError(e) from e

    logger.info(f"Fetched work {work_id} ({len(page_text)} chars)")
    return page_text


def fetch_work(work_id: str, session: Optional[requests.Session] = None) -> Work:
    """Fetch and parse one work."""
    return parse_work(fetch_work_page(work_id, session))


async def fetch_work_page_async(work_id: str, session: Optional[requests.Session] = None) -> str:
    """Run ``fetch_work_page`` in a worker thread."""
    return await asyncio.to_thread(fetch_work_page, work_id, session)


async def fetch_work_async(work_id: str, session: Optional[requests.Session] = None) -> Work:
    """Fetch in a worker thread, then parse."""
    page_text = await fetch_work_page_async(work_id, session)
    return parse_work(page_text)
