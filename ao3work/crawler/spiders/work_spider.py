"""Spider that extracts a batch of works by id."""
from urllib.parse import urlparse

import scrapy

from ao3work.assembler import parse_work
from ao3work.config import settings
from ao3work.crawler.items import WorkItem
from ao3work.errors import NetworkError, WorkError
from ao3work.fetcher import build_work_url, check_page


class WorkSpider(scrapy.Spider):
    """
    Crawl one page per work id and yield a WorkItem for each.

    Usage:
        scrapy crawl ao3_work -a work_ids=58593067,12345 -O works.jsonl
    """

    name = "ao3_work"

    # The archive serves its not-found page with a 404
    handle_httpstatus_list = [404]

    def __init__(self, work_ids: str = "", *args, **kwargs):
        """
        Initialize spider with the works to fetch.

        Args:
            work_ids: Comma separated work identifiers
        """
        super().__init__(*args, **kwargs)
        self.allowed_domains = [urlparse(settings.base_url).hostname]
        self.work_ids = [w.strip() for w in work_ids.split(",") if w.strip()]
        self.failures = {}

    def start_requests(self):
        if not self.work_ids:
            raise ValueError("No work ids given (use -a work_ids=...)")

        self.logger.info(f"Starting crawl of {len(self.work_ids)} works")
        for work_id in self.work_ids:
            yield scrapy.Request(
                url=build_work_url(work_id),
                callback=self.parse,
                errback=self.handle_error,
                meta={'work_id': work_id},
            )

    def parse(self, response):
        """Extract the work on one page."""
        work_id = response.meta['work_id']
        self.logger.info(f"Parsing work {work_id}: {response.url}")

        try:
            page_text = check_page(response.text, work_id)
            if response.status >= 400:
                raise NetworkError(f"HTTP {response.status}")
            work = parse_work(page_text)
        except WorkError as e:
            self.logger.error(f"✗ Work {work_id} could not be extracted: {e}")
            self.failures[work_id] = str(e)
            return

        self.logger.info(f"✓ Work {work_id}: {work.title}")
        yield WorkItem(
            work_id=work_id,
            source_url=response.url,
            work=work.model_dump(mode="json"),
        )

    def handle_error(self, failure):
        """Record transport failures and keep crawling the other works."""
        work_id = failure.request.meta.get('work_id', 'unknown')
        self.logger.error(f"Request for work {work_id} failed: {failure.value}")
        self.failures[work_id] = f"Network error: {failure.value}"

    def closed(self, reason):
        """Called when spider closes."""
        self.logger.info(f"Spider closed: {reason}")
        succeeded = len(self.work_ids) - len(self.failures)
        self.logger.info(f"Extracted {succeeded}/{len(self.work_ids)} works")
        for work_id, message in self.failures.items():
            self.logger.warning(f"  - {work_id}: {message}")
