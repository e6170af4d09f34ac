"""
Static file serving for the web front-end.

Any GET path not claimed by the API is looked up under the configured
root. The resolved path must stay inside that root.
"""

import logging
from pathlib import Path
from typing import Union

from fastapi import APIRouter
from fastapi.responses import Response

from app.core.exceptions import BaseAPIException, NotFoundException, PermissionDeniedException

logger = logging.getLogger(__name__)

MIME_TYPES = {
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".txt": "text/plain",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
}
DEFAULT_MIME_TYPE = "application/octet-stream"


def guess_mime_type(path: Union[str, Path]) -> str:
    return MIME_TYPES.get(Path(path).suffix.lower(), DEFAULT_MIME_TYPE)


class StaticFileServer:
    def __init__(self, root: Union[str, Path], index_file: str = "index.html"):
        self.root = Path(root).resolve()
        self.index_file = index_file

    def resolve(self, request_path: str) -> Path:
        """
        Map a request path to a file under the root.

        Raises PermissionDeniedException when the canonical target escapes
        the root and NotFoundException when it is missing or a directory.
        """
        relative = request_path.lstrip("/") or self.index_file
        try:
            target = (self.root / relative).resolve()
        except ValueError:
            # e.g. an embedded NUL byte; no such file can exist
            raise NotFoundException("Arquivo não encontrado")

        if target != self.root and self.root not in target.parents:
            logger.warning(f"Blocked path outside static root: {request_path!r}")
            raise PermissionDeniedException("Acesso negado")

        try:
            is_file = target.is_file()
        except ValueError:
            is_file = False
        if not is_file:
            raise NotFoundException("Arquivo não encontrado")

        return target

    def read(self, request_path: str) -> Response:
        target = self.resolve(request_path)
        try:
            content = target.read_bytes()
        except OSError as e:
            raise BaseAPIException(message=f"Erro interno: {e}")
        return Response(content=content, media_type=guess_mime_type(target))


def build_static_router(server: StaticFileServer) -> APIRouter:
    """Catch-all GET route; include it after the API routers."""
    router = APIRouter()

    @router.get("/{file_path:path}", include_in_schema=False)
    def serve_static(file_path: str):
        return server.read(file_path)

    return router
