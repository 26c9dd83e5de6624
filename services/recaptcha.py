import logging
from functools import lru_cache
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import recaptchaenterprise_v1
from config import HTTP_TIMEOUT
from errors import ActionMismatch, InvalidToken, RiskAssessmentError
from models import RiskAssessment

log = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _client():
    # Built on first use so importing the app doesn't need Google credentials.
    return recaptchaenterprise_v1.RecaptchaEnterpriseServiceClient()


def assess(project_id: str, site_key: str, token: str, expected_action: str) -> RiskAssessment:
    """Score a reCAPTCHA token and check it was minted for ``expected_action``.

    Raises ``InvalidToken`` when the service rejects the token itself and
    ``ActionMismatch`` when the token belongs to a different form, which is
    what stops a token from one page being replayed against another. Any
    error talking to the service surfaces as ``RiskAssessmentError``.
    """
    event = recaptchaenterprise_v1.Event()
    event.token = token
    event.site_key = site_key

    assessment = recaptchaenterprise_v1.Assessment()
    assessment.event = event

    request = recaptchaenterprise_v1.CreateAssessmentRequest()
    request.assessment = assessment
    request.parent = f"projects/{project_id}"

    try:
        response = _client().create_assessment(request=request, timeout=HTTP_TIMEOUT)
    except (GoogleAPIError, GoogleAuthError) as e:
        # Covers missing credentials and retry deadlines as well as failed calls.
        log.error("❌ reCAPTCHA create_assessment failed: %s", e)
        raise RiskAssessmentError(str(e)) from e

    props = response.token_properties
    if not props.valid:
        raise InvalidToken(f"invalid token ({props.invalid_reason})")
    if props.action != expected_action:
        raise ActionMismatch(f"unexpected action {props.action!r}, expected {expected_action!r}")

    return RiskAssessment(valid=True, action=props.action, score=response.risk_analysis.score)
