import logging
from errors import ValidationError
from models import RegistrationRequest

log = logging.getLogger(__name__)

# The reCAPTCHA widget posts its token under this name; the JS client sends "token".
FORM_TOKEN_FIELD = "g-recaptcha-response"


def parse_registration_request(req) -> RegistrationRequest:
    """Build a RegistrationRequest from a Flask request with a form or JSON body."""
    if req.is_json:
        data = req.get_json(silent=True)
        if not isinstance(data, dict):
            log.info("Rejecting registration with malformed JSON body")
            raise ValidationError("malformed JSON body", public_message="malformed request body")
        username = data.get("username")
        password = data.get("password")
        token = data.get("token")
    else:
        username = req.form.get("username")
        password = req.form.get("password")
        token = req.form.get(FORM_TOKEN_FIELD)

    missing = [
        name for name, val in (("username", username), ("password", password), ("token", token))
        if not isinstance(val, str) or not val.strip()
    ]
    if missing:
        log.info("Rejecting registration missing %s", ", ".join(missing))
        raise ValidationError(f"missing {missing}", public_message=f"missing {', '.join(missing)}")
    # Forwarded to the backend verbatim, so padded names are refused rather than trimmed.
    if username != username.strip():
        log.info("Rejecting registration with padded username %r", username)
        raise ValidationError("username has surrounding whitespace",
                              public_message="username must not start or end with whitespace")

    return RegistrationRequest(username=username, password=password, token=token)
