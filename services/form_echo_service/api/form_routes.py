"""Form echo routes for the Form Echo Service."""

from __future__ import annotations

from dishka import FromDishka
from quart import Blueprint, request
from quart_dishka import inject

from services.form_echo_service.form_params import (
    GET_FORM_HEADING,
    POST_FORM_HEADING,
    ParameterSet,
    parameter_set_from_multidict,
    render_submission_fragment,
)
from services.form_echo_service.logging_utils import create_service_logger
from services.form_echo_service.metrics import FormEchoMetrics

logger = create_service_logger("form_echo.api.forms")
form_bp = Blueprint("form_routes", __name__)

URLENCODED_MIMETYPE = "application/x-www-form-urlencoded"


@form_bp.route("/get-form", methods=["GET"])
@inject
async def get_form(metrics: FromDishka[FormEchoMetrics]) -> str:
    """Echo the query-string parameters back as an HTML fragment."""
    params = parameter_set_from_multidict(request.args)
    logger.info("GET Form Data", params=params)
    metrics.form_submissions_total.labels(method="GET").inc()
    return render_submission_fragment(GET_FORM_HEADING, params)


@form_bp.route("/post-form", methods=["POST"])
@inject
async def post_form(metrics: FromDishka[FormEchoMetrics]) -> str:
    """Echo the URL-encoded body parameters back as an HTML fragment."""
    params = await _read_urlencoded_body()
    logger.info("POST Form Data", params=params)
    metrics.form_submissions_total.labels(method="POST").inc()
    return render_submission_fragment(POST_FORM_HEADING, params)


async def _read_urlencoded_body() -> ParameterSet:
    # Other body types (JSON, multipart, none) are not parsed and echo as {}
    if request.mimetype != URLENCODED_MIMETYPE:
        return {}
    form = await request.form
    return parameter_set_from_multidict(form)
