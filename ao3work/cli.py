"""
CLI utility for extracting works.

Usage:
    ao3work fetch <work_id>                      # Fetch and print one work as JSON
    ao3work parse <html_file>                    # Parse a saved work page
    ao3work crawl <work_id>... --output FILE     # Crawl several works with Scrapy
"""
import argparse
import logging
import sys
from pathlib import Path

from ao3work.assembler import parse_work
from ao3work.config import settings
from ao3work.errors import WorkError
from ao3work.fetcher import fetch_work

logger = logging.getLogger(__name__)


def cmd_fetch(args):
    """Fetch a work and print it."""
    work = fetch_work(args.work_id)
    print(work.model_dump_json(indent=args.indent))


def cmd_parse(args):
    """Parse a saved work page and print it."""
    page_text = Path(args.html_file).read_text(encoding="utf-8")
    work = parse_work(page_text)
    print(work.model_dump_json(indent=args.indent))


def cmd_crawl(args):
    """Crawl several works and write them as JSON lines."""
    from scrapy.crawler import CrawlerProcess
    from scrapy.settings import Settings as ScrapySettings

    from ao3work.crawler import settings as crawler_settings
    from ao3work.crawler.spiders.work_spider import WorkSpider

    scrapy_settings = ScrapySettings()
    scrapy_settings.setmodule(crawler_settings)
    scrapy_settings.set("FEEDS", {args.output: {"format": "jsonlines", "overwrite": True}})

    process = CrawlerProcess(scrapy_settings)
    process.crawl(WorkSpider, work_ids=",".join(args.work_ids))
    process.start()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Extract metadata and text from archive work pages"
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Fetch command
    fetch_parser = subparsers.add_parser("fetch", help="Fetch and extract one work")
    fetch_parser.add_argument("work_id", help="Work identifier")
    fetch_parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    fetch_parser.set_defaults(func=cmd_fetch)

    # Parse command
    parse_parser = subparsers.add_parser("parse", help="Extract a saved work page")
    parse_parser.add_argument("html_file", help="Path to the saved HTML page")
    parse_parser.add_argument("--indent", type=int, default=2, help="JSON indentation")
    parse_parser.set_defaults(func=cmd_parse)

    # Crawl command
    crawl_parser = subparsers.add_parser("crawl", help="Crawl several works")
    crawl_parser.add_argument("work_ids", nargs="+", help="Work identifiers")
    crawl_parser.add_argument(
        "--output",
        default="works.jsonl",
        help="JSON lines file to write"
    )
    crawl_parser.set_defaults(func=cmd_crawl)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        args.func(args)
    except WorkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
