# File: tests/conftest.py
from __future__ import annotations

import asyncio
import datetime
import logging
import ssl
from collections.abc import AsyncIterator
from typing import Dict, List

import pytest
import pytest_asyncio
from aiohttp import web
from cryptography import x509
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.x509.oid import NameOID

from parked_domains.classifier import SignatureSet
from parked_domains.config import ScannerConfig

#: seconds the "/slow" handler sleeps before answering
SLOW_SLEEP: float = 2.0

PARKED_HTML = "<html><body>This page is provided courtesy of sedoparking.com</body></html>"


async def serve_app(
    app: web.Application, port: int, ssl_context: ssl.SSLContext | None = None
) -> AsyncIterator[str]:
    """Start *app* on *port* (HTTPS with *ssl_context*), yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port, ssl_context=ssl_context)
    await site.start()
    scheme = "https" if ssl_context else "http"
    try:
        yield f"{scheme}://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def basic_config() -> ScannerConfig:
    """
    Return a small, fast ScannerConfig for fetcher tests.
    """
    return ScannerConfig(threads=4, timeout=2.0, max_redirects=3)


@pytest.fixture()
def signatures() -> SignatureSet:
    return SignatureSet(["sedoparking.com", "buy this domain"])


@pytest.fixture()
def hits() -> Dict[str, int]:
    """Per-path request counter shared with the parking server."""
    return {}


@pytest.fixture()
def user_agents() -> List[str]:
    """User-Agent headers seen by the parking server, in arrival order."""
    return []


@pytest_asyncio.fixture
async def parking_server(unused_tcp_port: int, hits: Dict[str, int], user_agents: List[str]) -> AsyncIterator[str]:
    app = web.Application()
    port = unused_tcp_port

    @web.middleware
    async def count(request, handler):
        hits[request.path] = hits.get(request.path, 0) + 1
        user_agents.append(request.headers.get("User-Agent", ""))
        return await handler(request)

    app.middlewares.append(count)

    async def handle_root(_):
        return web.Response(text="<html><body>Welcome to our bakery</body></html>", content_type="text/html")

    async def handle_parked(_):
        return web.Response(text=PARKED_HTML, content_type="text/html")

    async def handle_for_sale_404(_):
        return web.Response(status=404, text="<h1>buy this domain</h1>", content_type="text/html")

    async def handle_hop1(_):
        return web.Response(status=302, headers={"Location": "/hop2"})

    async def handle_hop2(_):
        return web.Response(status=301, headers={"Location": f"http://localhost:{port}/parked"})

    async def handle_away(_):
        return web.Response(
            status=302,
            headers={"Location": f"http://127.0.0.1:{port}/parked"},
            text="Redirecting",
        )

    async def handle_loop(_):
        return web.Response(status=302, headers={"Location": "/loop"})

    async def handle_bad_location(_):
        return web.Response(
            status=302,
            headers={"Location": "http://[::1/x"},
            text="<h1>buy this domain</h1>",
            content_type="text/html",
        )

    async def handle_slow(_):
        await asyncio.sleep(SLOW_SLEEP)
        return web.Response(text=PARKED_HTML, content_type="text/html")

    app.router.add_get("/", handle_root)
    app.router.add_get("/parked", handle_parked)
    app.router.add_get("/for-sale-404", handle_for_sale_404)
    app.router.add_get("/hop1", handle_hop1)
    app.router.add_get("/hop2", handle_hop2)
    app.router.add_get("/away", handle_away)
    app.router.add_get("/loop", handle_loop)
    app.router.add_get("/bad-location", handle_bad_location)
    app.router.add_get("/slow", handle_slow)

    async for url in serve_app(app, port):
        yield url


@pytest.fixture(scope="session")
def self_signed_context(tmp_path_factory) -> ssl.SSLContext:
    """Server-side SSL context with a freshly generated self-signed localhost certificate."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, "localhost")])
    now = datetime.datetime.now(datetime.timezone.utc)
    cert = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - datetime.timedelta(days=1))
        .not_valid_after(now + datetime.timedelta(days=1))
        .add_extension(x509.SubjectAlternativeName([x509.DNSName("localhost")]), critical=False)
        .sign(key, hashes.SHA256())
    )

    folder = tmp_path_factory.mktemp("tls")
    cert_file, key_file = folder / "cert.pem", folder / "key.pem"
    cert_file.write_bytes(cert.public_bytes(serialization.Encoding.PEM))
    key_file.write_bytes(
        key.private_bytes(
            serialization.Encoding.PEM,
            serialization.PrivateFormat.TraditionalOpenSSL,
            serialization.NoEncryption(),
        )
    )

    context = ssl.create_default_context(ssl.Purpose.CLIENT_AUTH)
    context.load_cert_chain(str(cert_file), str(key_file))
    return context


@pytest_asyncio.fixture
async def tls_parking_server(unused_tcp_port: int, self_signed_context: ssl.SSLContext) -> AsyncIterator[str]:
    """HTTPS server with a self-signed certificate serving a parked page on "/"."""
    app = web.Application()

    async def handle_root(_):
        return web.Response(text=PARKED_HTML, content_type="text/html")

    app.router.add_get("/", handle_root)

    async for url in serve_app(app, unused_tcp_port, ssl_context=self_signed_context):
        yield url


@pytest.fixture()
def log_records() -> List[logging.LogRecord]:
    """Collect records of the project logger at DEBUG level."""
    records: List[logging.LogRecord] = []

    class _Collector(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    lg = logging.getLogger("ParkedDomains")
    handler = _Collector()
    previous = lg.level
    lg.setLevel(logging.DEBUG)
    lg.addHandler(handler)
    yield records
    lg.removeHandler(handler)
    lg.setLevel(previous)
