"""Landing page."""

from fastapi import APIRouter, Request

from petclinic.app.web.templating import templates

router = APIRouter()


@router.get("/")
async def welcome(request: Request):
    return templates.TemplateResponse(request, "welcome.html", {})
