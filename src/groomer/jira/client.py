from __future__ import annotations

from typing import Any, Optional

import requests

from groomer import config
from groomer import logger as logger_mod

from .errors import JiraAPIError
from .validators import validate_encoded_auth, validate_id, validate_max_results

log = logger_mod.get_logger()

MYSELF = "/rest/api/3/myself"
PROJECTS = "/rest/api/3/project"
ISSUE_SEARCH = "/rest/api/3/search/jql"
ISSUE_DETAILS = "/rest/api/3/issue/{issue}"

FAILED_VALIDATION = "Failed to validate Jira credentials"
FAILED_FETCH_PROJECTS = "Failed to fetch Jira projects"
FAILED_FETCH_ISSUES = "Failed to fetch Jira issues"
FAILED_FETCH_ISSUE = "Failed to fetch Jira issue details"


def build_jql(project_id: str, jql: str = "") -> str:
    query = f"project = {project_id}"
    if jql:
        query += f" AND {jql}"
    return query + " ORDER BY created DESC"


class JiraAPI:
    """Thin pass-through to Jira Cloud REST v3 using the caller's credentials."""

    def __init__(
        self,
        encoded_auth: str,
        *,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ):
        self._auth = validate_encoded_auth(encoded_auth)
        self._base_url = (base_url or config.JIRA_BASE_URL).rstrip("/")
        self._timeout_s = timeout_s if timeout_s is not None else config.JIRA_TIMEOUT_S

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Basic {self._auth}",
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _get(self, path: str, *, failure: str, params: Optional[dict] = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            resp = requests.get(
                url, headers=self.headers, params=params, timeout=self._timeout_s
            )
            resp.raise_for_status()
            return resp.json()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else 500
            try:
                data = e.response.json() if e.response is not None else None
            except ValueError:
                data = e.response.text if e.response is not None else None
            log.error(f"❌ {failure}: status={status}")
            raise JiraAPIError(failure, status_code=status, data=data) from e
        except requests.RequestException as e:
            log.error(f"❌ {failure}: {e}")
            raise JiraAPIError(failure) from e

    def get_myself(self) -> dict[str, Any]:
        log.debug("Fetching current user information")
        user = self._get(MYSELF, failure=FAILED_VALIDATION)
        log.info(f"Fetched user information: {user.get('accountId')}")
        return user

    def get_projects(self) -> list[dict[str, Any]]:
        log.debug("Fetching projects")
        projects = self._get(PROJECTS, failure=FAILED_FETCH_PROJECTS)
        log.info(f"Fetched {len(projects)} projects")
        return projects

    def get_issues(
        self,
        project_id: Any,
        *,
        max_results: Any = None,
        page_token: Optional[str] = None,
        jql: str = "",
    ) -> dict[str, Any]:
        project = validate_id(project_id, "Project ID")
        limit = validate_max_results(
            config.JIRA_DEFAULT_MAX_RESULTS if max_results is None else max_results
        )
        params: dict[str, Any] = {
            "jql": build_jql(project, jql),
            "maxResults": limit,
            "fields": ",".join(config.JIRA_DEFAULT_FIELDS),
        }
        # "0" is what the frontend sends for the first page
        if page_token and page_token != "0":
            params["nextPageToken"] = page_token

        log.debug(f"Fetching issues for {project} (max={limit}, paged={bool(page_token)})")
        data = self._get(ISSUE_SEARCH, failure=FAILED_FETCH_ISSUES, params=params)

        issues = data.get("issues") or []
        next_page_token = data.get("nextPageToken")
        is_last = not next_page_token
        log.info(f"Fetched {len(issues)} issues (isLast={is_last})")
        return {"issues": issues, "nextPageToken": next_page_token, "isLast": is_last}

    def get_issue(self, issue_id_or_key: Any) -> dict[str, Any]:
        issue = validate_id(issue_id_or_key, "Issue ID or key")
        log.debug(f"Fetching issue details: {issue}")
        data = self._get(ISSUE_DETAILS.format(issue=issue), failure=FAILED_FETCH_ISSUE)
        log.info(f"Fetched issue details: {data.get('key')}")
        return data
