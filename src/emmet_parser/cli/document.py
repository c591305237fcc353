"""HTML document skeleton for `--document` output."""

from jinja2 import BaseLoader, Environment

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="{{ lang }}">
<head>
  <meta charset="UTF-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1.0" />
  <title>{{ title | e }}</title>
</head>
<body>
  {{ body }}
</body>
</html>
"""


def render_document(body: str, title: str = "Document", lang: str = "en") -> str:
    """Wrap expanded markup in a minimal HTML5 page.

    The body is inserted verbatim; only the title is escaped.
    """
    env = Environment(loader=BaseLoader(), autoescape=False, keep_trailing_newline=True)
    template = env.from_string(DOCUMENT_TEMPLATE)
    return template.render(body=body, title=title, lang=lang)
