from flask import make_response, redirect, render_template
from config import AUTH_COOKIE_MAX_AGE, AUTH_COOKIE_NAME, CORS_ALLOWED_ORIGIN

def blog_list_page(template: str, blogs):
    # Listing templates all read the posts from "Blogs".
    return render_template(template, Blogs=blogs)

def blog_page(blog):
    return render_template("blog.html", blog=blog)

def not_found_page():
    return render_template("404.html"), 404

def error_response(message: str, status: int):
    # Plain text, same shape as the errors the old Go front end sent.
    return message, status, {"Content-Type": "text/plain; charset=utf-8"}

def login_redirect(session_token: str):
    # Hand the browser its session and send it home.
    resp = make_response(redirect("/", code=302))
    resp.headers["Access-Control-Allow-Credentials"] = "true"
    resp.headers["Access-Control-Allow-Origin"] = CORS_ALLOWED_ORIGIN
    resp.set_cookie(
        AUTH_COOKIE_NAME,
        session_token,
        max_age=AUTH_COOKIE_MAX_AGE,
        path="/",
        httponly=True,
        samesite="Lax",
    )
    return resp
