"""
HTML web layer.

Endpoints render Jinja2 templates and redirect after successful form
submissions.  Routers for each area are aggregated in ``router.py``.
"""
