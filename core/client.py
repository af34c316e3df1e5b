"""GraphQL data source for learner profile records."""

from __future__ import annotations

import base64
import logging
from typing import Any, Mapping, Optional

import requests

from config.settings import Settings
from core.ingest import build_dataset
from core.models import CachedDataset

__all__ = [
    "DataSourceError",
    "AuthenticationError",
    "GraphQLError",
    "PROFILE_QUERY",
    "GraphQLClient",
]

logger = logging.getLogger(__name__)

PROFILE_QUERY = """
query LearnerProfile {
    user {
        id
        login
        auditRatio
    }
    xp: transaction(where: {type: {_eq: "xp"}}, order_by: {createdAt: desc}) {
        id
        amount
        createdAt
        path
        eventId
        object {
            name
        }
    }
    skills: transaction(where: {type: {_like: "skill_%"}}, order_by: {amount: desc}) {
        id
        type
        amount
        createdAt
        path
    }
    auditsDone: transaction(where: {type: {_eq: "up"}}) {
        id
        type
        amount
        createdAt
        path
    }
    auditsReceived: transaction(where: {type: {_eq: "down"}}) {
        id
        type
        amount
        createdAt
        path
    }
}
"""


class DataSourceError(RuntimeError):
    """Raised when profile data cannot be fetched."""


class AuthenticationError(DataSourceError):
    """Raised when credentials or the session token are rejected."""


class GraphQLError(DataSourceError):
    """Raised when the GraphQL endpoint reports an error."""


def _error_message(response: requests.Response) -> str:
    body = response.text
    try:
        parsed = response.json()
    except ValueError:
        return f"HTTP error! status: {response.status_code}. Response: {body[:100]}"

    if isinstance(parsed, Mapping):
        errors = parsed.get("errors")
        if errors:
            return "; ".join(str(error.get("message", error)) for error in errors)
        if parsed.get("message"):
            return str(parsed["message"])
        if parsed.get("error"):
            return str(parsed["error"])
    return f"HTTP error! status: {response.status_code}"


class GraphQLClient:
    """Signs in against the platform and runs profile queries."""

    def __init__(
        self,
        settings: Settings,
        session: Optional[requests.Session] = None,
        token: Optional[str] = None,
    ) -> None:
        self.settings = settings
        self.session = session or requests.Session()
        self.token = token

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    def sign_in(self, login: str, password: str) -> str:
        credentials = base64.b64encode(f"{login}:{password}".encode("utf-8")).decode("ascii")
        try:
            response = self.session.post(
                self.settings.auth_url,
                headers={
                    "Authorization": f"Basic {credentials}",
                    "Content-Type": "application/json",
                },
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as exc:
            raise AuthenticationError(f"Sign-in request failed: {exc}") from exc

        if not response.ok:
            logger.warning("Sign-in rejected with status %s", response.status_code)
            message = _error_message(response)
            if message.startswith("HTTP error!"):
                message = "Invalid credentials or server error"
            raise AuthenticationError(message)

        self.token = response.text.strip().replace('"', "")
        logger.info("Signed in as %s", login)
        return self.token

    def sign_out(self) -> None:
        self.token = None

    def query(self, query: str, variables: Optional[Mapping[str, Any]] = None) -> dict[str, Any]:
        if not self.token:
            raise AuthenticationError("Authentication token not found. Please login.")

        try:
            response = self.session.post(
                self.settings.api_url,
                json={"query": query, "variables": dict(variables or {})},
                headers={
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self.token}",
                },
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as exc:
            raise GraphQLError(f"GraphQL request failed: {exc}") from exc

        if not response.ok:
            message = _error_message(response)
            if response.status_code in (401, 403):
                raise AuthenticationError(
                    f"Unauthorized or Forbidden: {message}. Your session might have expired."
                )
            raise GraphQLError(message)

        try:
            payload = response.json()
        except ValueError as exc:
            raise GraphQLError("GraphQL response was not valid JSON") from exc

        if payload.get("errors"):
            raise GraphQLError("; ".join(str(error.get("message", error)) for error in payload["errors"]))
        return payload.get("data") or {}

    def fetch_dataset(self) -> CachedDataset:
        """Fetch the signed-in learner's records in one round trip."""

        logger.debug("Fetching learner profile from %s", self.settings.api_url)
        return build_dataset(self.query(PROFILE_QUERY))
