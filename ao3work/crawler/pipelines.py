"""Scrapy pipelines for extracted works."""
import logging

from scrapy.exceptions import DropItem

logger = logging.getLogger(__name__)


class ValidationPipeline:
    """Validate work items before they reach the feed exporters."""

    required_fields = ('work_id', 'source_url', 'work')

    def process_item(self, item, spider):
        """Drop items that are missing a required field."""
        for field in self.required_fields:
            if not item.get(field):
                raise DropItem(f"Missing required field: {field}")

        work = item['work']
        logger.info(
            f"Validation passed for work {item['work_id']}: {work.get('title')} "
            f"({len(work.get('body', []))} paragraphs)"
        )
        return item
