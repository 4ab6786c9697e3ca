"""Term repository served from raw.githubusercontent.com."""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

import requests
from requests.exceptions import ConnectionError as RequestsConnectionError
from requests.exceptions import Timeout

from mustalah.config.defaults import GITHUB_RAW_BASE_URL
from mustalah.lib.errors import (
    RepositoryAPIError,
    RepositoryConnectionError,
    RepositoryError,
    ResourceNotFoundError,
)
from mustalah.lib.logging_config import get_logger
from mustalah.lib.md_parser import parse_markdown
from mustalah.models.config import GitHubSourceConfig
from mustalah.models.index import CategoryIndex, RootIndex
from mustalah.models.term import Term
from mustalah.repos.base import (
    TermRepository,
    category_index_from_payload,
    root_index_from_payload,
)

logger = get_logger(__name__)


class GitHubRepository(TermRepository):
    """Fetches published indexes and term files from a GitHub branch.

    Example:
        >>> repo = GitHubRepository(GitHubSourceConfig(branch="main"))
        >>> repo.fetch_category_index("tech").terms[0].title
    """

    def __init__(
        self,
        config: GitHubSourceConfig | None = None,
        base_url: str = GITHUB_RAW_BASE_URL,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Repository location (defaults to the public glossary)
            base_url: Raw content host
            session: Optional pre-configured requests session
        """
        self.config = config or GitHubSourceConfig()
        self.base_url = (
            f"{base_url.rstrip('/')}/{self.config.owner}/"
            f"{self.config.repo}/{self.config.branch}"
        )
        self._session = session or requests.Session()

    @property
    def api_base_url(self) -> str:
        """URL of the directory holding the index artifacts."""
        return f"{self.base_url}/{self.config.api_path}"

    @property
    def terms_base_url(self) -> str:
        """URL of the directory holding the term markdown."""
        return f"{self.base_url}/{self.config.terms_path}"

    def fetch_root_index(self) -> RootIndex:
        """Fetch ``categories.json``."""
        url = f"{self.api_base_url}/categories.json"
        payload = self._get_json(url, "root index")
        return root_index_from_payload(payload, url)

    def fetch_category_index(self, category: str) -> CategoryIndex:
        """Fetch ``<category>/index.json``."""
        url = f"{self.api_base_url}/{quote(category)}/index.json"
        payload = self._get_json(url, f"category {category}")
        return category_index_from_payload(payload, url)

    def fetch_term(self, category: str, slug: str) -> Term:
        """Fetch and parse ``<category>/<slug>.md``."""
        url = f"{self.terms_base_url}/{quote(category)}/{quote(slug)}.md"
        response = self._request(url, f'term "{slug}"')
        return parse_markdown(response.text)

    def _get_json(self, url: str, resource: str) -> Any:
        response = self._request(url, resource)
        try:
            return response.json()
        except ValueError as e:
            raise RepositoryError(f"Invalid JSON from {url}: {e}") from e

    def _request(self, url: str, resource: str) -> requests.Response:
        """Execute a GET request with error handling.

        Raises:
            ResourceNotFoundError: 404 response
            RepositoryAPIError: Other non-2xx status code
            RepositoryConnectionError: Connection/timeout issues
        """
        logger.debug(f"GET {url}")
        try:
            response = self._session.get(url, timeout=self.config.timeout)
        except (Timeout, RequestsConnectionError) as e:
            raise RepositoryConnectionError(self.base_url, original_error=e) from e

        if response.status_code == 404:
            raise ResourceNotFoundError(f"{resource} ({url})")

        if not response.ok:
            raise RepositoryAPIError(
                url, response.status_code, response.reason or None
            )

        return response
