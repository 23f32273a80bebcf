"""HTML templates using Jinja2."""

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

TEMPLATES_DIR = Path(__file__).parent
_env = Environment(
    loader=FileSystemLoader(TEMPLATES_DIR),
    autoescape=select_autoescape(["html", "jinja2"]),
)


def render_status_page(instance: str, label: str) -> str:
    """Render the instance status page."""
    template = _env.get_template("status.jinja2")
    return template.render(instance=instance, label=label)
