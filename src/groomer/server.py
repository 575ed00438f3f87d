"""Flask wiring for the Jira proxy and ticket analysis endpoints."""

from __future__ import annotations

import asyncio
import datetime
from typing import Optional

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from groomer import config
from groomer import logger as logger_mod
from groomer.analysis.errors import AnalysisError
from groomer.analysis.service import MISSING_TICKET_DATA, AnalysisService
from groomer.jira.client import JiraAPI
from groomer.jira.errors import JiraAPIError
from groomer.llm.errors import (
    InvalidCredentialError,
    LLMError,
    MissingCredentialError,
    ProviderCallFailedError,
    ProviderTimeoutError,
    UnknownProviderError,
)

log = logger_mod.get_logger()

AUTH_HEADER = "x-encoded-auth"
MISSING_AUTH = "Missing x-encoded-auth header"


def _allowed_origins(raw: str):
    if raw.strip() == "*":
        return "*"
    return [o.strip() for o in raw.split(",") if o.strip()]


def _llm_error_status(error: LLMError) -> int:
    if isinstance(error, (InvalidCredentialError, MissingCredentialError, UnknownProviderError)):
        return 400
    if isinstance(error, ProviderTimeoutError):
        return 504
    if isinstance(error, ProviderCallFailedError):
        return 502
    return 500


def _error(message: str, status: int):
    return jsonify({"error": message}), status


def _jira() -> Optional[JiraAPI]:
    auth = request.headers.get(AUTH_HEADER)
    if not auth:
        log.warning(f"Missing or invalid Jira authentication from {request.remote_addr}")
        return None
    return JiraAPI(auth)


def create_app(analysis_service: Optional[AnalysisService] = None) -> Flask:
    app = Flask(__name__)
    CORS(
        app,
        resources={r"/*": {"origins": _allowed_origins(config.FRONTEND_ORIGINS)}},
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", AUTH_HEADER],
    )
    logger_mod.set_logging_level(config.LOGGING_LEVEL)
    service = analysis_service or AnalysisService()

    @app.after_request
    def add_cache_headers(resp):
        for key, value in config.CACHE_CONTROL_HEADERS.items():
            resp.headers[key] = value
        return resp

    @app.route("/health")
    def health():
        now = datetime.datetime.now(datetime.timezone.utc).isoformat()
        return {"status": "ok", "timestamp": now}, 200

    # ---------------------------
    # Jira proxy
    # ---------------------------
    @app.route("/api/jira/myself")
    def jira_myself():
        jira = _jira()
        if jira is None:
            return _error(MISSING_AUTH, 401)
        return jsonify(jira.get_myself())

    @app.route("/api/jira/projects")
    def jira_projects():
        jira = _jira()
        if jira is None:
            return _error(MISSING_AUTH, 401)
        return jsonify(jira.get_projects())

    @app.route("/api/jira/issues")
    def jira_issues():
        jira = _jira()
        if jira is None:
            return _error(MISSING_AUTH, 401)
        project_id = request.args.get("projectId")
        if not project_id:
            log.warning("Missing projectId parameter")
            return _error("projectId is required", 400)
        result = jira.get_issues(
            project_id,
            max_results=request.args.get("maxResults") or config.JIRA_DEFAULT_MAX_RESULTS,
            page_token=request.args.get("startAt"),
            jql=request.args.get("jql") or "",
        )
        return jsonify(result)

    @app.route("/api/jira/issue/<issue_id>")
    def jira_issue(issue_id: str):
        jira = _jira()
        if jira is None:
            return _error(MISSING_AUTH, 401)
        return jsonify(jira.get_issue(issue_id))

    # ---------------------------
    # Analysis
    # ---------------------------
    @app.route("/api/analysis", methods=["POST"])
    def analyze():
        body = request.get_json(silent=True)
        ticket = body.get("ticket") if isinstance(body, dict) else None
        if not ticket:
            log.warning("Missing ticket in analysis request")
            return _error(MISSING_TICKET_DATA, 400)
        result = asyncio.run(service.analyze_ticket(ticket, body.get("llmApiKey")))
        return jsonify(result)

    # ---------------------------
    # Errors
    # ---------------------------
    @app.errorhandler(JiraAPIError)
    def handle_jira_error(e: JiraAPIError):
        status = e.status_code if 100 <= e.status_code <= 599 else 500
        return _error(e.message, status)

    @app.errorhandler(AnalysisError)
    def handle_analysis_error(e: AnalysisError):
        return _error(e.message, e.status_code)

    @app.errorhandler(LLMError)
    def handle_llm_error(e: LLMError):
        status = _llm_error_status(e)
        log.error(f"LLM error ({status}): {e}")
        return _error(str(e), status)

    @app.errorhandler(404)
    def not_found(_e):
        return _error("Route not found", 404)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        if isinstance(e, HTTPException):
            return _error(e.description or e.name, e.code or 500)
        log.exception(f"Unhandled error on {request.method} {request.path}")
        return _error("Internal server error", 500)

    return app


if __name__ == "__main__":
    create_app().run(port=config.PORT)
