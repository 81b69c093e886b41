# Scrapy settings for the work crawler
from ao3work.config import settings

BOT_NAME = "ao3work"

SPIDER_MODULES = ["ao3work.crawler.spiders"]
NEWSPIDER_MODULE = "ao3work.crawler.spiders"

# Obey robots.txt rules
ROBOTSTXT_OBEY = True

# Configure maximum concurrent requests
CONCURRENT_REQUESTS = settings.crawl_concurrent_requests
CONCURRENT_REQUESTS_PER_DOMAIN = settings.crawl_concurrent_requests

# Configure a delay for requests
DOWNLOAD_DELAY = settings.crawl_download_delay
RANDOMIZE_DOWNLOAD_DELAY = True

# Disable Telnet Console
TELNETCONSOLE_ENABLED = False

# Override the default request headers
DEFAULT_REQUEST_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en",
}
USER_AGENT = settings.user_agent

# Enable or disable spider middlewares
SPIDER_MIDDLEWARES = {
    "ao3work.crawler.middlewares.ErrorHandlingMiddleware": 543,
}

# Configure item pipelines
ITEM_PIPELINES = {
    "ao3work.crawler.pipelines.ValidationPipeline": 100,
}

# Enable and configure HTTP caching
HTTPCACHE_ENABLED = False

# Set settings whose default value is deprecated to a future-proof value
REQUEST_FINGERPRINTER_IMPLEMENTATION = "2.7"
TWISTED_REACTOR = "twisted.internet.asyncioreactor.AsyncioSelectorReactor"
FEED_EXPORT_ENCODING = "utf-8"

# Retry settings
RETRY_ENABLED = True
RETRY_TIMES = 3
RETRY_HTTP_CODES = [500, 502, 503, 504, 522, 524, 408, 429]

# Logging
LOG_LEVEL = settings.log_level
