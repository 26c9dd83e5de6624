from __future__ import annotations
import logging
from flask import Blueprint
from errors import FlowError, NotFound, TransportError
from services.backend import fetch_blog, fetch_blogs
from ui import blog_list_page, blog_page, error_response, not_found_page

log = logging.getLogger(__name__)
bp = Blueprint("pages", __name__)


def _fetch_failed(e: FlowError, what: str):
    if isinstance(e, TransportError):
        # Raw error text goes back to the client here, as it always has.
        return error_response(str(e), 500)
    log.error("Fetching %s failed: %s", what, e)
    return error_response(e.public_message, e.status)


def _listing(template: str):
    try:
        blogs = fetch_blogs()
    except FlowError as e:
        return _fetch_failed(e, "blogs")
    return blog_list_page(template, blogs)


@bp.get("/")
def home():
    return _listing("home.html")


@bp.get("/blogs", strict_slashes=False)
def blogs():
    return _listing("blogs.html")


@bp.get("/blogs/<int:blog_id>")
def blog(blog_id: int):
    try:
        post = fetch_blog(blog_id)
    except NotFound:
        log.info("Blog %s not found upstream", blog_id)
        return not_found_page()
    except FlowError as e:
        return _fetch_failed(e, f"blog {blog_id}")
    return blog_page(post)
