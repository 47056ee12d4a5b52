"""Static file routes serving the public directory."""

from __future__ import annotations

from pathlib import Path

from quart import (
    Blueprint,
    Response,
    abort,
    current_app,
    redirect,
    request,
    send_from_directory,
)
from werkzeug.security import safe_join

static_bp = Blueprint("static_routes", __name__)

INDEX_FILE = "index.html"


def _is_hidden(filename: str) -> bool:
    """True when any path segment is a dotfile or dot-directory."""
    return any(segment.startswith(".") for segment in filename.split("/"))


def _slashed_location(filename: str) -> str:
    location = f"/{filename}/"
    if request.query_string:
        location = f"{location}?{request.query_string.decode('latin-1')}"
    return location


@static_bp.route("/", defaults={"filename": ""}, methods=["GET"])
@static_bp.route("/<path:filename>", methods=["GET"])
async def serve_public_file(filename: str) -> Response:
    """Serve a file from the public directory, or a directory's index.html.

    Dotfiles and dot-directories are never served. A directory requested
    without its trailing slash is redirected to the slashed path, keeping the
    query string. Anything else that is not a regular file is a 404.
    """
    public_dir = current_app.public_dir

    if _is_hidden(filename):
        abort(404)

    if filename == "" or filename.endswith("/"):
        filename = f"{filename}{INDEX_FILE}"

    # None when the path escapes the public directory
    candidate = safe_join(str(public_dir), filename)
    if candidate is None:
        abort(404)

    if Path(candidate).is_dir():
        return redirect(_slashed_location(filename), code=301)

    return await send_from_directory(public_dir, filename)
