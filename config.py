import os
import logging
from dotenv import load_dotenv

# Env first, then logging, so LOG_LEVEL from .env is honoured.
load_dotenv()
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(message)s"
)

def _as_bool(v: str | None, default=False):
    if v is None:
        return default
    return str(v).strip().lower() in {"1", "true", "yes", "y", "on"}

# Where the blog/user backend lives; every page is fetched from here.
BACKEND_URL = (os.getenv("BACKEND_URL") or "http://localhost:8080").rstrip("/")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10.0"))

# reCAPTCHA Enterprise; the site key is also handed to the register page.
RECAPTCHA_PROJECT_ID = os.getenv("RECAPTCHA_PROJECT_ID") or ""
RECAPTCHA_KEY = os.getenv("RECAPTCHA_KEY") or ""

CORS_ALLOWED_ORIGIN = os.getenv("CORS_ALLOWED_ORIGIN", "http://localhost")
DEBUG = _as_bool(os.getenv("FLASK_DEBUG"), False)

# Off: any non-404 from the username lookup means "taken".
# On: only 2xx means "taken", other statuses become a 500.
STRICT_DUPLICATE_CHECK = _as_bool(os.getenv("STRICT_DUPLICATE_CHECK"), False)

DEFAULT_PORT = "8000"

# Policy, not configuration.
BOT_SCORE_THRESHOLD = 0.4
REGISTER_ACTION = "register"
AUTH_COOKIE_NAME = "barista_auth_token"
AUTH_COOKIE_MAX_AGE = 60 * 60 * 24

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
TEMPLATES_DIR = os.path.join(BASE_DIR, "templates")
STATIC_DIR = os.path.join(BASE_DIR, "static")
JS_DIR = os.path.join(BASE_DIR, "js")
