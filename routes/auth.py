from __future__ import annotations
import logging
from flask import Blueprint, render_template, request
from config import RECAPTCHA_KEY, REGISTER_ACTION
from errors import FlowError
from logic.forms import parse_registration_request
from logic.registration import run_registration
from ui import error_response, login_redirect

log = logging.getLogger(__name__)
bp = Blueprint("auth", __name__)


@bp.get("/register")
def register_form():
    return render_template("register.html", site_key=RECAPTCHA_KEY, action=REGISTER_ACTION)


@bp.post("/register")
def register():
    try:
        rr = parse_registration_request(request)
        state = run_registration(rr)
    except FlowError as e:
        # Detail stays in the log; the client only gets the terse message.
        log.error("Registration failed (%s): %s", type(e).__name__, e)
        return error_response(e.public_message, e.status)
    return login_redirect(state.session_token)
