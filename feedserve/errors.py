# -*- coding: utf-8 -*-
#
# Copyright (c) 2025~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------


class FeedServeError(Exception):
    pass


class ConfigError(FeedServeError):
    pass


class ArgumentError(FeedServeError):
    pass


class FetchError(FeedServeError):
    '''
    Raised when the feed cannot be retrieved.
    '''


class ParseError(FetchError):
    '''
    Raised when the retrieved body is not a well-formed XML document.
    '''


class SerializationError(FeedServeError):
    pass


class ListenError(FeedServeError):
    pass
