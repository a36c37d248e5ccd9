"""
Markup fragments the form transform engine places into forms.

Fragments are Jinja2 templates shipped in templates/ as <name>.jinja2, one per
constant on Template. A missing fragment fails the import.
"""

from jinja2 import Environment, PackageLoader, select_autoescape

from .templates import Template

TEMPLATE_SUFFIX = ".jinja2"

# State and workflow names are admin-entered text rendered into HTML
_env = Environment(
    loader=PackageLoader(__package__, "templates"),
    autoescape=select_autoescape(default=True),
    trim_blocks=True,
    lstrip_blocks=True,
)

_missing = sorted(
    set(Template.all())
    - {name[: -len(TEMPLATE_SUFFIX)] for name in _env.list_templates(extensions=["jinja2"])}
)
if _missing:
    raise FileNotFoundError(f"Markup templates missing: {', '.join(_missing)}")


def render(template_name: str, **context) -> str:
    """Render a fragment without its surrounding whitespace."""
    template = _env.get_template(template_name + TEMPLATE_SUFFIX)
    return template.render(**context).strip()
