"""Fallback Route — uniform errors for every path no other route matches.

Invariants:
    - Matches any method and any path; must be included after all other routers
    - A path that matches a real route once its trailing slash is added or
      removed → 307 redirect to that route (method and body preserved)
    - /api/users//exercises with no query string (empty id segment) → 400,
      anything else → 404

Design Decisions:
    - Slash redirect re-implemented here: the catch-all always matches, so the
      router's own redirect_slashes never triggers
"""

from fastapi import APIRouter, Request
from fastapi.responses import RedirectResponse
from starlette.routing import Match

from app.core.errors import RouteNotFoundError

EMPTY_ID_EXERCISES_PATH = "/api/users//exercises"

router = APIRouter(tags=["fallback"])


def _slash_redirect_target(request: Request) -> str | None:
    """Return the alternate-slash URL if another route would serve it."""
    path = request.url.path
    if path == "/":
        return None
    alternate = path.rstrip("/") if path.endswith("/") else path + "/"
    if not alternate:
        return None

    scope = dict(request.scope, path=alternate)
    for route in request.app.router.routes:
        if getattr(route, "endpoint", None) is route_not_found:
            continue
        match, _ = route.matches(scope)
        if match != Match.NONE:
            return str(request.url.replace(path=alternate))
    return None


@router.api_route(
    "/{full_path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    include_in_schema=False,
)
async def route_not_found(full_path: str, request: Request):
    target = _slash_redirect_target(request)
    if target is not None:
        return RedirectResponse(target)

    path = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    if path == EMPTY_ID_EXERCISES_PATH:
        raise RouteNotFoundError(
            "Invalid ID format. Ensure the ID is exactly 24 characters long "
            "and corresponds to an existing user.",
            status=400,
        )
    raise RouteNotFoundError(
        f"The requested path '{path}' was not found on this server.",
    )
