"""
GitLab API read operations.

Provides the read-only operations the frontend needs on the connected repository:
- Repository tree listings
- Raw file contents
"""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from app.services.gitlab.constants import FILE_TIMEOUT, TREE_PAGE_SIZE, TREE_TIMEOUT
from app.services.gitlab.exceptions import GitLabAPIError, InvalidRepositoryUrlError
from app.services.gitlab.helpers import extract_project_id, get_api_base, handle_error_response
from app.services.gitlab.http_client import get_gitlab_client
from app.services.gitlab.types import ConnectionRecord, RepoFile, RepoTree, RepoTreeItem

logger = logging.getLogger(__name__)


class GitLabReadOperations:
    """
    Read-only operations for the GitLab REST API (v4).

    Bound to one ConnectionRecord; every request authenticates with its
    PRIVATE-TOKEN. No request is retried.
    """

    def __init__(self, record: ConnectionRecord):
        self.record = record
        self.repo_url = record.repository_url
        self.api_base = get_api_base(record.repository_url)
        self._headers = {"PRIVATE-TOKEN": record.access_token}

    @property
    def project_id(self) -> str:
        """Project path from the repository URL, e.g. "group/project"."""
        project_id = extract_project_id(self.repo_url)
        if not project_id:
            raise InvalidRepositoryUrlError()
        return project_id

    def _project_url(self, project_id: str) -> str:
        return f"{self.api_base}/projects/{quote(project_id, safe='')}"

    def _normalize_tree_item(self, data: dict[str, Any]) -> RepoTreeItem:
        """Convert GitLab tree entry to RepoTreeItem (blob -> file, tree -> folder)."""
        return RepoTreeItem(
            id=data.get("id", ""),
            name=data.get("name", ""),
            path=data.get("path", ""),
            type="file" if data.get("type") == "blob" else "folder",
            mode=data.get("mode", ""),
            size=data.get("size"),
        )

    async def list_tree(
        self,
        path: str = "",
        ref: str = "main",
        recursive: bool = False,
    ) -> RepoTree:
        """
        List files and folders in the repository.

        Args:
            path: Directory inside the repository (blank for the root)
            ref: Branch, tag or commit
            recursive: Include all descendants, not only direct children

        Returns:
            RepoTree with the normalized entries and the request coordinates

        Raises:
            InvalidRepositoryUrlError: If no project path can be derived
            GitLabAPIError: For upstream or network failures
        """
        project_id = self.project_id
        url = f"{self._project_url(project_id)}/repository/tree"
        params: dict[str, str | int] = {
            "ref": ref,
            "recursive": "true" if recursive else "false",
            "per_page": TREE_PAGE_SIZE,
        }
        if path and path.strip():
            params["path"] = path

        logger.info(f"Fetching GitLab repository tree from {url} (ref={ref}, path={path or '/'})")

        client = get_gitlab_client()
        try:
            response = await client.get(
                url,
                headers={**self._headers, "Accept": "application/json"},
                params=params,
                timeout=TREE_TIMEOUT,
            )
        except httpx.RequestError as e:
            logger.error(f"GitLab tree request failed: {e}")
            raise GitLabAPIError(
                "Internal server error", "Failed to fetch repository files", 500
            ) from e

        handle_error_response(response, "repository")

        items = [self._normalize_tree_item(item) for item in response.json()]
        logger.info(f"Fetched {len(items)} entries from GitLab")

        return RepoTree(
            repo_url=self.repo_url,
            project_id=project_id,
            ref=ref,
            path=path or "/",
            files=items,
        )

    async def get_file_content(
        self,
        file_path: str,
        ref: str = "main",
        lfs: bool = False,
    ) -> RepoFile:
        """
        Fetch the raw content of a file.

        Args:
            file_path: File path within the repository
            ref: Branch, tag or commit
            lfs: Resolve Git LFS pointers to their content

        Returns:
            RepoFile with the raw body and its size in bytes

        Raises:
            InvalidRepositoryUrlError: If no project path can be derived
            GitLabAPIError: For upstream or network failures
        """
        project_id = self.project_id
        url = f"{self._project_url(project_id)}/repository/files/{quote(file_path, safe='')}/raw"
        params = {"ref": ref}
        if lfs:
            params["lfs"] = "true"

        logger.info(f"Fetching file content from {url} (ref={ref})")

        client = get_gitlab_client()
        try:
            response = await client.get(
                url,
                headers=self._headers,
                params=params,
                timeout=FILE_TIMEOUT,
            )
        except httpx.RequestError as e:
            logger.error(f"GitLab file request failed for {file_path}: {e}")
            raise GitLabAPIError(
                "Internal server error", "Failed to fetch file content", 500
            ) from e

        handle_error_response(response, "file")

        return RepoFile(
            file_path=file_path,
            ref=ref,
            content=response.text,
            size=len(response.content),
        )
