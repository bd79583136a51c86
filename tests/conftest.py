# -*- coding: utf-8 -*-
#
# Copyright (c) 2025~2999 - Cologler <skyoflw@gmail.com>
# ----------
#
# ----------

import socket
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from time import sleep

import pytest

SAMPLE_RSS = '''<?xml version="1.0" encoding="utf-8"?>
<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
    <channel>
        <title>Example Feed</title>
        <link>http://example.org/</link>
        <atom:link href="http://example.org/rss.xml" rel="self" type="application/rss+xml"/>
        <description>Tom &amp; Jerry</description>
        <language>en-us</language>
        <generator>unknown element</generator>
        <item>
            <title>first</title>
            <link>http://example.org/1</link>
            <guid isPermaLink="false">urn:uuid:1</guid>
            <description><![CDATA[<p>hello</p>]]></description>
            <pubDate>Mon, 06 Sep 2021 16:45:00 +0000</pubDate>
        </item>
        <item>
            <title>second</title>
            <link>http://example.org/2</link>
            <description>second item</description>
            <pubDate>Tue, 07 Sep 2021 16:45:00 +0000</pubDate>
        </item>
        <item>
            <title>  third  </title>
        </item>
    </channel>
</rss>
'''


def get_free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(('127.0.0.1', 0))
        return sock.getsockname()[1]


class FeedServer:
    '''
    Serve fixed bodies from a local http server.

    A route added with `delay` sends its body one byte at a time, sleeping
    `delay` seconds before each byte.
    '''

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, bytes, float]] = {}
        self.requests: list[str] = []

        routes = self.routes
        requests = self.requests

        class Handler(BaseHTTPRequestHandler):
            def do_GET(self):
                requests.append(self.path)
                code, body, delay = routes.get(self.path, (404, b'', 0))
                self.send_response(code)
                self.send_header('Content-Type', 'application/rss+xml')
                self.send_header('Content-Length', str(len(body)))
                self.end_headers()
                if not delay:
                    self.wfile.write(body)
                    return
                try:
                    for i in range(len(body)):
                        sleep(delay)
                        self.wfile.write(body[i:i + 1])
                        self.wfile.flush()
                except (BrokenPipeError, ConnectionResetError):
                    pass # client gave up

            def log_message(self, format, *args):
                pass

        self._httpd = ThreadingHTTPServer(('127.0.0.1', 0), Handler)
        self._httpd.daemon_threads = True
        self._thread = threading.Thread(target=self._httpd.serve_forever, daemon=True)

    def add(self, path: str, body: str | bytes, code: int = 200, delay: float = 0) -> str:
        if isinstance(body, str):
            body = body.encode('utf-8')
        self.routes[path] = (code, body, delay)
        return self.url(path)

    def url(self, path: str) -> str:
        host, port = self._httpd.server_address[:2]
        return f'http://{host}:{port}{path}'

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._httpd.shutdown()
        self._httpd.server_close()


@pytest.fixture
def feed_server():
    server = FeedServer()
    server.start()
    try:
        yield server
    finally:
        server.stop()


@pytest.fixture
def sample_rss() -> str:
    return SAMPLE_RSS
