"""
GitLab integration endpoints: connect/disconnect and repository browsing.
"""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, BackgroundTasks, Body, Query

from app.api.deps import Connection
from app.core.exceptions import APIError, ValidationError
from app.schemas.gitlab import (
    ConnectionData,
    ConnectionResponse,
    ConnectRequest,
    FileContentData,
    FileContentResponse,
    RepoFileItem,
    RepoFilesData,
    RepoFilesResponse,
)
from app.services.gitlab import GitLabAPIError, GitLabReadOperations, probe_connection

router = APIRouter(prefix="/gitlab", tags=["gitlab"])
logger = logging.getLogger(__name__)


def _now() -> str:
    return datetime.now(UTC).isoformat()


def _to_api_error(exc: GitLabAPIError) -> APIError:
    """Map a gateway error onto the HTTP error returned to the frontend."""
    return APIError(exc.status_code or 500, exc.error, exc.message)


@router.post("/connect", response_model=ConnectionResponse)
async def connect(
    connection: Connection,
    background_tasks: BackgroundTasks,
    body: ConnectRequest | None = Body(default=None),
) -> ConnectionResponse:
    """Store repository URL + access token for subsequent repository calls."""
    body = body or ConnectRequest()
    try:
        record = connection.connect(body.repo_url, body.access_token)
    except GitLabAPIError as e:
        raise _to_api_error(e) from e

    # Diagnostic only: logged after the response, never affects the stored connection
    background_tasks.add_task(probe_connection, record)

    return ConnectionResponse(
        message="GitLab connection details received successfully",
        data=ConnectionData(
            repo_url=record.repository_url,
            connected=True,
            timestamp=_now(),
        ),
    )


@router.post("/disconnect", response_model=ConnectionResponse, response_model_exclude_none=True)
async def disconnect(connection: Connection) -> ConnectionResponse:
    """Forget the active repository connection."""
    try:
        connection.disconnect()
    except GitLabAPIError as e:
        raise _to_api_error(e) from e

    return ConnectionResponse(
        message="Disconnected from GitLab successfully",
        data=ConnectionData(connected=False, timestamp=_now()),
    )


@router.get("/files", response_model=RepoFilesResponse)
async def list_repository_files(
    connection: Connection,
    path: str = Query(""),
    ref: str = Query("main"),
    recursive: bool = Query(False),
) -> RepoFilesResponse:
    """List files and folders of the connected repository."""
    try:
        gitlab = GitLabReadOperations(connection.require())
        tree = await gitlab.list_tree(path=path, ref=ref, recursive=recursive)
    except GitLabAPIError as e:
        raise _to_api_error(e) from e

    return RepoFilesResponse(
        message=f"Successfully fetched {len(tree.files)} files",
        data=RepoFilesData(
            repo_url=tree.repo_url,
            project_id=tree.project_id,
            ref=tree.ref,
            path=tree.path,
            files=[
                RepoFileItem(
                    id=item.id,
                    name=item.name,
                    path=item.path,
                    type=item.type,
                    size=item.size,
                    mode=item.mode,
                )
                for item in tree.files
            ],
            timestamp=_now(),
        ),
    )


@router.get("/files/{file_path:path}", response_model=FileContentResponse)
async def get_repository_file_content(
    file_path: str,
    connection: Connection,
    ref: str = Query("main"),
    lfs: bool = Query(False),
) -> FileContentResponse:
    """Fetch the raw content of one file from the connected repository."""
    try:
        gitlab = GitLabReadOperations(connection.require())
        if not file_path:
            raise ValidationError("Missing file path", "File path parameter is required")
        repo_file = await gitlab.get_file_content(file_path, ref=ref, lfs=lfs)
    except GitLabAPIError as e:
        raise _to_api_error(e) from e

    logger.info(f"Fetched content for file {file_path} ({repo_file.size} bytes)")

    return FileContentResponse(
        message="File content retrieved successfully",
        data=FileContentData(
            file_path=repo_file.file_path,
            ref=repo_file.ref,
            content=repo_file.content,
            size=repo_file.size,
            timestamp=_now(),
        ),
    )
