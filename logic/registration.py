from __future__ import annotations
import logging
from dataclasses import dataclass, replace
from config import BOT_SCORE_THRESHOLD, RECAPTCHA_KEY, RECAPTCHA_PROJECT_ID, REGISTER_ACTION
from errors import BotDetected, DuplicateResource
from models import RegistrationRequest
from services import backend, recaptcha

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistrationState:
    """What the flow knows so far. Each step returns a new one or raises."""
    request: RegistrationRequest
    score: float | None = None
    created: bool = False
    session_token: str | None = None


def check_risk(state: RegistrationState) -> RegistrationState:
    rr = state.request
    result = recaptcha.assess(RECAPTCHA_PROJECT_ID, RECAPTCHA_KEY, rr.token, REGISTER_ACTION)
    # Exactly the threshold passes.
    if result.score < BOT_SCORE_THRESHOLD:
        log.warning("Potential bot found (score: %s) registering %r", result.score, rr.username)
        raise BotDetected(f"score {result.score} below {BOT_SCORE_THRESHOLD}")
    return replace(state, score=result.score)


def check_duplicate(state: RegistrationState) -> RegistrationState:
    username = state.request.username
    if backend.user_exists(username):
        log.info("Registration refused, %r already exists", username)
        raise DuplicateResource(f"user {username!r} already exists")
    return state


def create_account(state: RegistrationState) -> RegistrationState:
    rr = state.request
    backend.register_account(rr.username, rr.password)
    return replace(state, created=True)


def log_in(state: RegistrationState) -> RegistrationState:
    rr = state.request
    return replace(state, session_token=backend.login(rr.username, rr.password))


# Run in order; the first exception ends the flow and nothing after it is called.
REGISTRATION_STEPS = (check_risk, check_duplicate, create_account, log_in)


def run_registration(rr: RegistrationRequest, steps=REGISTRATION_STEPS) -> RegistrationState:
    state = RegistrationState(request=rr)
    for step in steps:
        log.debug("registration %r: %s", rr.username, step.__name__)
        state = step(state)
    log.info("✅ Registered and logged in %r", rr.username)
    return state
