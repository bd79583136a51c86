# -*- coding: utf-8 -*-
#
# Copyright (c) 2025~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal

# property names follow the exported field names of the original service,
# so `pub_date` goes out as `PubDate` and `items` as `Item`.
_MODEL_CONFIG = ConfigDict(
    alias_generator=to_pascal,
    populate_by_name=True,
    frozen=True,
)


class FeedItem(BaseModel):
    model_config = _MODEL_CONFIG

    title: str = ''
    link: str = ''
    description: str = ''
    pub_date: str = ''


class FeedChannel(BaseModel):
    model_config = _MODEL_CONFIG

    title: str = ''
    link: str = ''
    description: str = ''
    language: str = ''
    items: tuple[FeedItem, ...] = Field(default=(), alias='Item')


class Feed(BaseModel):
    model_config = _MODEL_CONFIG

    channel: FeedChannel = FeedChannel()


class FeedsMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    greeting: str
    response: Feed
