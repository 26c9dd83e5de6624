from __future__ import annotations
import logging
import requests
from requests.adapters import HTTPAdapter
from config import BACKEND_URL, HTTP_TIMEOUT, STRICT_DUPLICATE_CHECK
from errors import DecodeError, NotFound, TransportError, UpstreamRejected
from models import BlogPost, blogs_from_json

log = logging.getLogger(__name__)

# One pooled session for every backend call. No retries: a failed call ends the request.
_session = requests.Session()
_session.mount("http://", HTTPAdapter(pool_connections=10, pool_maxsize=20))
_session.mount("https://", HTTPAdapter(pool_connections=10, pool_maxsize=20))


def _url(path: str) -> str:
    return f"{BACKEND_URL}{path}"


def _decode(r, path: str):
    try:
        return r.json()
    except ValueError as e:
        log.error("❌ Backend %s returned undecodable body: %s", path, r.text[:800])
        raise DecodeError(f"decoding {path}: {e}") from e


def backend_get(path: str):
    try:
        r = _session.get(_url(path), timeout=HTTP_TIMEOUT)
    except requests.RequestException as e:
        log.error("❌ Backend GET %s failed: %s", path, e)
        raise TransportError(str(e)) from e
    if r.status_code == 404:
        raise NotFound(f"GET {path} -> 404")
    if not 200 <= r.status_code <= 299:
        log.error("❌ Backend GET %s -> %s %s", path, r.status_code, r.text[:800])
        raise UpstreamRejected(f"GET {path} -> {r.status_code}", r.status_code)
    return _decode(r, path)


def backend_post(path: str, payload: dict):
    """POST ``payload`` as JSON and return the response if it was 2xx."""
    try:
        r = _session.post(_url(path), json=payload, timeout=HTTP_TIMEOUT)
    except requests.RequestException as e:
        log.error("❌ Backend POST %s failed: %s", path, e)
        raise TransportError(str(e)) from e
    if not 200 <= r.status_code <= 299:
        log.error("❌ Backend POST %s -> %s %s", path, r.status_code, r.text[:800])
        raise UpstreamRejected(f"POST {path} -> {r.status_code}", r.status_code)
    return r


def server_action(path: str, action: str, body: str) -> int:
    """POST a raw body tagged with a ``Server-Action`` header; only the status matters."""
    try:
        r = _session.post(
            _url(path),
            data=body.encode("utf-8"),
            headers={"Server-Action": action},
            timeout=HTTP_TIMEOUT,
            stream=True,
        )
    except requests.RequestException as e:
        log.error("❌ Backend %s %s failed: %s", action, path, e)
        raise TransportError(str(e)) from e
    with r:
        # Body is never read; closing releases the connection back to the pool.
        return r.status_code


def fetch_blogs() -> list[BlogPost]:
    try:
        data = backend_get("/v1/blogs")
    except NotFound as e:
        # The collection always exists; a 404 here is a broken backend, not an empty list.
        raise UpstreamRejected(str(e), 404) from e
    return blogs_from_json(data)


def fetch_blog(blog_id: int) -> BlogPost:
    return BlogPost.from_json(backend_get(f"/v1/blogs/{blog_id}"))


def user_exists(username: str) -> bool:
    status = server_action("/v1/users", "GetByUsername", username)
    if status == 404:
        return False
    if 200 <= status <= 299:
        return True
    if STRICT_DUPLICATE_CHECK:
        raise UpstreamRejected(f"GetByUsername -> {status}", status)
    log.warning("⚠️ GetByUsername returned %s for %r; treating as existing user", status, username)
    return True


def register_account(username: str, password: str) -> None:
    backend_post("/register", {"username": username, "password": password})


def login(username: str, password: str) -> str:
    r = backend_post("/login", {"username": username, "password": password})
    token = r.text.strip()
    if not token:
        raise UpstreamRejected("login returned an empty session token", r.status_code)
    return token
