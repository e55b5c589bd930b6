"""parked_domains.crawler: fetching and the worker pool."""

from parked_domains.crawler.dispatcher import Dispatcher
from parked_domains.crawler.fetcher import Fetcher, redirect_target, should_follow
from parked_domains.crawler.models import FetchError, PageData, TooManyRedirects

__all__ = ["Dispatcher", "Fetcher", "FetchError", "PageData", "TooManyRedirects", "redirect_target", "should_follow"]
