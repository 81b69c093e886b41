"""Scrapy middlewares for error handling."""
from scrapy import signals
import logging

logger = logging.getLogger(__name__)


class ErrorHandlingMiddleware:
    """Log spider errors together with the work they belong to."""

    @classmethod
    def from_crawler(cls, crawler):
        middleware = cls()
        crawler.signals.connect(middleware.spider_error, signal=signals.spider_error)
        return middleware

    def spider_error(self, failure, response, spider):
        """Handle spider errors without killing the entire crawl."""
        work_id = response.meta.get('work_id', 'unknown')
        logger.error(f"Spider error in {spider.name} for work {work_id}: {failure.value}")
        logger.error(f"URL: {response.url}")
