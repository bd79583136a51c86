# -*- coding: utf-8 -*-
#
# Copyright (c) 2022~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

import sys

from .core import configure_logger, fetch_feed, get_logger
from .errors import ArgumentError, FeedServeError
from .server import create_app, serve
from .settings import load_settings


def _get_feed_url(argv: list[str]) -> str:
    if not argv:
        raise ArgumentError('missing feed url, usage: feedserve <feed-url>')
    return argv[0]

def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    configure_logger()
    logger = get_logger()

    try:
        settings = load_settings()
        logger.setLevel(settings.log_level)
        url = _get_feed_url(argv)

        logger.info('Fetching data from: %s', url)
        feed = fetch_feed(url, timeout=settings.fetch_timeout, max_body_size=settings.max_body_size)
        logger.debug('Fetched feed: %r', feed)

        serve(create_app(feed), settings.port)
    except FeedServeError as error:
        logger.error('%s: %s', type(error).__name__, error)
        return 1

    return 0

if __name__ == '__main__':
    exit(main() or 0)
