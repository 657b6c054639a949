"""Default HTML render rules built from jinja2 templates."""

from __future__ import annotations

from typing import Any

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

from slidepress.renderer import Rule
from slidepress.schemas import RULE_KINDS

_DIMENSIONS = (
    '{% if height %} height="{{ height }}"{% endif %}'
    '{% if width %} width="{{ width }}"{% endif %}'
)

TEMPLATES: dict[str, str] = {
    "section": (
        '<section class="slide depth-{{ depth }}" id="slide-{{ formatted_number }}">\n'
        '<h{{ heading_level }}><span class="number">{{ formatted_number }}</span> '
        "{{ styled_title }}</h{{ heading_level }}>\n"
        "{{ body }}</section>\n"
    ),
    "list": (
        '<ul class="level-{{ level }}">\n'
        "{% for bullet in styled_bullets %}<li>{{ bullet }}</li>\n{% endfor %}"
        "</ul>\n"
    ),
    "text": (
        "{% if pre %}<pre>{{ lines | join('\\n') }}</pre>\n"
        "{% else %}<p>{% for line in styled_lines %}"
        "{% if not loop.first %}<br>\n{% endif %}{{ line }}"
        "{% endfor %}</p>\n{% endif %}"
    ),
    "code": (
        '<div class="code{% if playable %} playground{% endif %}"'
        '{% if language %} data-language="{{ language }}"{% endif %}'
        '{% if edit %} contenteditable="true" spellcheck="false"{% endif %}>'
        "<pre>{% if numbers %}{% for line in text.split('\\n') %}"
        '<span num="{{ loop.index }}">{{ line }}</span>\n'
        "{% endfor %}{% else %}{{ text }}{% endif %}</pre></div>\n"
    ),
    "image": '<img src="{{ url }}"' + _DIMENSIONS + ">\n",
    "video": (
        "<video" + _DIMENSIONS + " controls>\n"
        '<source src="{{ url }}" type="{{ source_type }}">\n'
        "</video>\n"
    ),
    "background": '<img class="background" src="{{ url }}"' + _DIMENSIONS + ">\n",
    "iframe": '<iframe src="{{ url }}"' + _DIMENSIONS + "></iframe>\n",
    "link": (
        '<ul><li><a href="{{ url }}" target="_blank">{{ styled_label }}</a></li></ul>\n'
    ),
    # Raw HTML is the one place escaping is bypassed; the payload is trusted.
    "html": "{{ html | safe }}\n",
    "caption": "<figcaption>{{ styled_text }}</figcaption>\n",
}


def create_environment() -> Environment:
    """Return the jinja2 environment holding the default templates."""
    return Environment(
        loader=DictLoader(TEMPLATES),
        autoescape=select_autoescape(default=True, default_for_string=True),
        undefined=StrictUndefined,
        keep_trailing_newline=True,
    )


def html_rules(environment: Environment | None = None) -> dict[str, Rule]:
    """Return a complete rule set that renders every kind to HTML."""
    env = environment or create_environment()
    return {kind: _template_rule(env, kind) for kind in sorted(RULE_KINDS)}


def _template_rule(env: Environment, kind: str) -> Rule:
    template = env.get_template(kind)

    def rule(context: dict[str, Any]) -> str:
        return template.render(context)

    rule.__name__ = f"render_{kind}"
    return rule
