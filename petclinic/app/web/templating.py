"""
Jinja2 template environment shared by all endpoints.

Templates live in ``petclinic/app/templates``.  The application name
and version are registered as globals for the layout.
"""

from pathlib import Path

from fastapi.templating import Jinja2Templates

from ..core.config import settings

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
templates.env.globals["project_name"] = settings.project_name
templates.env.globals["app_version"] = settings.app_version
