"""Scrapy items for extracted works."""
import scrapy


class WorkItem(scrapy.Item):
    """Item representing one extracted work."""
    work_id = scrapy.Field()
    source_url = scrapy.Field()
    work = scrapy.Field()  # JSON-compatible dump of schemas.Work
