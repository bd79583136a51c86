# -*- coding: utf-8 -*-
#
# Copyright (c) 2025~2999 - Cologler <skyoflw@gmail.com>
# ----------
# Fetch a RSS feed once and serve it as JSON.
# ----------

from .core import fetch_feed, parse_feed
from .errors import (
    ArgumentError,
    ConfigError,
    FeedServeError,
    FetchError,
    ListenError,
    ParseError,
    SerializationError,
)
from .models import Feed, FeedChannel, FeedItem, FeedsMessage
from .server import create_app, serve
