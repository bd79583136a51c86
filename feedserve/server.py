# -*- coding: utf-8 -*-
#
# Copyright (c) 2022~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

import socket
from typing import Annotated, cast

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from .core import get_logger
from .errors import ListenError, SerializationError
from .models import Feed, FeedsMessage

GREETING = 'Hello there'


def _get_feed_from_request(request: Request) -> Feed:
    return cast(Feed, request.app.state.feed)

FeedDeps = Annotated[Feed, Depends(_get_feed_from_request)]


def render_feeds_message(feed: Feed) -> bytes:
    '''
    Serialize the `/feeds` payload for `feed`.

    :raises SerializationError:
    '''
    message = FeedsMessage(greeting=GREETING, response=feed)
    try:
        return message.model_dump_json(by_alias=True).encode('utf-8')
    except ValueError as error:
        raise SerializationError(str(error)) from error


router = APIRouter()


@router.get('/feeds')
def get_feeds(feed: FeedDeps) -> Response:
    try:
        content = render_feeds_message(feed)
    except SerializationError as error:
        get_logger().error('Failed to marshal JSON response: %s', error)
        return Response(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return Response(content=content, media_type='application/json')


def create_app(feed: Feed) -> FastAPI:
    app = FastAPI()
    app.state.feed = feed
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=r'https?://.*',
        allow_methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'],
        allow_headers=['*'],
        allow_credentials=False,
        expose_headers=['Link'],
        max_age=300,
    )
    app.include_router(router)
    return app


def bind_socket(port: int, host: str = '0.0.0.0') -> socket.socket:
    '''
    Create a listening socket bound to `host:port`.

    :raises ListenError:
    '''
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen()
    except OSError as error:
        sock.close()
        raise ListenError(f'unable to listen on {host}:{port}: {error}') from error
    sock.set_inheritable(True)
    return sock


def serve(app: FastAPI, port: int, host: str = '0.0.0.0') -> None:
    '''
    Serve `app` on `host:port` until the process is stopped.

    :raises ListenError: if the port cannot be bound.
    '''
    sock = bind_socket(port, host)
    config = uvicorn.Config(app, host=host, port=port)
    server = uvicorn.Server(config)
    get_logger().info('Server starting on port %s', port)
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
