# -*- coding: utf-8 -*-
#
# Copyright (c) 2022~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

import logging
import threading
import xml.etree.ElementTree as et
from functools import cache
from typing import cast

import requests

from .errors import FetchError, ParseError
from .models import Feed, FeedChannel, FeedItem
from .settings import DEFAULT_FETCH_TIMEOUT, DEFAULT_MAX_BODY_SIZE

_CHUNK_SIZE = 64 * 1024


@cache
def get_logger() -> logging.Logger:
    return logging.getLogger('feedserve')

def _read_element_text(el: et.Element | None) -> str:
    '''
    Read the character data that belongs to the element itself.

    Text of nested elements is skipped, only the tails between them are kept.
    '''
    if el is None:
        return ''
    parts = [el.text or '']
    for child in el:
        parts.append(child.tail or '')
    return ''.join(parts)

def _element_to_FeedItem(item: et.Element) -> FeedItem:
    return FeedItem(
        title=_read_element_text(item.find('title')),
        link=_read_element_text(item.find('link')),
        description=_read_element_text(item.find('description')),
        pub_date=_read_element_text(item.find('pubDate')),
    )

def _element_to_FeedChannel(channel: et.Element | None) -> FeedChannel:
    if channel is None:
        return FeedChannel()
    return FeedChannel(
        title=_read_element_text(channel.find('title')),
        link=_read_element_text(channel.find('link')),
        description=_read_element_text(channel.find('description')),
        language=_read_element_text(channel.find('language')),
        items=tuple(_element_to_FeedItem(x) for x in channel.findall('item')),
    )

def parse_feed(data: bytes | str) -> Feed:
    '''
    Decode a RSS document into a `Feed`.

    The root element name is not checked. Unknown elements are ignored and
    missing elements leave their fields empty.

    :raises ParseError: if the document is not well-formed XML.
    '''
    try:
        root = et.fromstring(data)
    except et.ParseError as error:
        raise ParseError(f'invalid xml: {error}') from error
    return Feed(channel=_element_to_FeedChannel(root.find('channel')))

def _read_body(r: requests.Response, *, max_body_size: int) -> bytes:
    body = bytearray()
    for chunk in r.iter_content(chunk_size=_CHUNK_SIZE):
        body.extend(chunk)
        if len(body) > max_body_size:
            raise FetchError(f'response body exceeds {max_body_size} bytes')
    return bytes(body)

def fetch_feed(
    url: str,
    *,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    max_body_size: int = DEFAULT_MAX_BODY_SIZE,
    session: requests.Session | None = None,
) -> Feed:
    '''
    Fetch the feed at `url` with a single GET and decode it.

    The status code is not inspected, any body is decoded as the feed.
    `timeout` bounds the whole exchange: connect, headers and body.

    :raises FetchError: on transport failure, timeout or oversize body.
    :raises ParseError: if the body is not well-formed XML.
    '''
    logger = get_logger().getChild(url)
    http = session or requests

    opened: list[requests.Response] = []
    outcome: dict[str, bytes | Exception] = {}

    def download() -> None:
        try:
            with http.get(url, timeout=timeout, stream=True) as r:
                opened.append(r)
                logger.info('received status %s', r.status_code)
                outcome['body'] = _read_body(r, max_body_size=max_body_size)
        except Exception as error:
            outcome['error'] = error

    worker = threading.Thread(target=download, daemon=True)
    worker.start()
    worker.join(timeout)

    if worker.is_alive():
        for r in opened:
            r.close()
        logger.error('no complete response within %s seconds', timeout)
        raise FetchError(f'fetch {url!r} timed out after {timeout} seconds')

    error = outcome.get('error')
    if isinstance(error, requests.RequestException):
        logger.error('raised %s: %s', type(error).__name__, error)
        raise FetchError(f'fetch {url!r} failure with {error}') from error
    elif isinstance(error, Exception):
        raise error

    body = cast(bytes, outcome['body'])
    logger.info('read %d bytes', len(body))
    feed = parse_feed(body)
    logger.info('total found %s items', len(feed.channel.items))
    return feed


def configure_logger(level: int | str = logging.INFO) -> None:
    logging.basicConfig(
        format='%(asctime)s [%(levelname)s] - %(name)s: %(message)s',
        datefmt='%m/%d/%Y %I:%M:%S %p',
        level=logging.INFO
    )
    get_logger().setLevel(level)
