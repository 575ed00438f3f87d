"""groomer.jira

Per-request Jira REST proxy. Credentials are the caller's pre-encoded Basic
auth string; nothing is stored between requests.

    from groomer.jira import JiraAPI

    jira = JiraAPI(encoded_auth)
    page = jira.get_issues("PROJ", max_results=20)
"""

from .client import JiraAPI
from .errors import JiraAPIError

__all__ = ["JiraAPI", "JiraAPIError"]
