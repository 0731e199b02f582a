"""Visitor redirect route."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from joinlink.application.usecase.invitation import VisitInvitationUseCase

router = APIRouter(tags=["visitor"], route_class=DishkaRoute)

UNAVAILABLE_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>Invitation Unavailable</title>
  <style>
    body { font-family: system-ui, sans-serif; background: #f3f4f6; margin: 0;
           min-height: 100vh; display: flex; align-items: center; justify-content: center; }
    main { background: #fff; padding: 2rem; border-radius: 0.5rem; text-align: center;
           box-shadow: 0 1px 3px rgba(0, 0, 0, 0.1); }
    h1 { color: #1f2937; font-size: 1.5rem; }
    p { color: #4b5563; }
    small { color: #6b7280; }
  </style>
</head>
<body>
  <main>
    <h1>Invitation Unavailable</h1>
    <p>No active invitation is currently available or it has expired.</p>
    <small>Please contact the administrator for a new invitation.</small>
  </main>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def visit(use_case: FromDishka[VisitInvitationUseCase]) -> Response:
    """Send the visitor to the current invitation.

    Args:
        use_case: Visit invitation use case from DI

    Returns:
        302 redirect to the invitation, or the unavailable page
    """
    response = await use_case.execute()
    if response.redirect_url:
        return RedirectResponse(response.redirect_url, status_code=status.HTTP_302_FOUND)
    return HTMLResponse(UNAVAILABLE_PAGE, status_code=status.HTTP_200_OK)
