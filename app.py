import argparse
import logging
import sys
from flask import Flask, send_from_directory
from jinja2 import TemplateError
from config import DEBUG, DEFAULT_PORT, JS_DIR, STATIC_DIR, TEMPLATES_DIR
from routes.auth import bp as auth_bp
from routes.pages import bp as pages_bp
from ui import not_found_page

log = logging.getLogger(__name__)


def load_templates(app: Flask) -> None:
    # Parse every template now so a broken one stops startup instead of a request.
    for name in app.jinja_env.list_templates(extensions=["html"]):
        app.jinja_env.get_template(name)


def create_app() -> Flask:
    app = Flask(
        __name__,
        template_folder=TEMPLATES_DIR,
        static_folder=STATIC_DIR,
        static_url_path="/static",
    )
    app.register_blueprint(pages_bp)
    app.register_blueprint(auth_bp)

    @app.get("/js/<path:filename>")
    def js(filename):
        return send_from_directory(JS_DIR, filename)

    # Anything unrouted gets the not-found page rather than Flask's default.
    app.register_error_handler(404, lambda e: not_found_page())

    load_templates(app)
    return app


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="barista web front end")
    parser.add_argument("--port", default=DEFAULT_PORT, help="the port the app will run on")
    args = parser.parse_args(argv)

    try:
        app = create_app()
    except TemplateError as e:
        log.critical("Failed to parse templates: %s", e)
        sys.exit(1)

    try:
        port = int(args.port)
    except ValueError:
        log.critical("Invalid port %r", args.port)
        sys.exit(1)

    log.info("app listening on port %s", port)
    try:
        app.run(host="0.0.0.0", port=port, debug=DEBUG)
    except OSError as e:
        log.critical("Could not listen on port %s: %s", port, e)
        sys.exit(1)


if __name__ == "__main__":
    main()
