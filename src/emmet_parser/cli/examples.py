"""Built-in demonstration abbreviations for `--examples`"""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from emmet_parser.config import EmmetConfig
from emmet_parser.exceptions import EmmetError
from emmet_parser.pipeline import emmet_to_html

EXAMPLES = [
    ("Basic element", "div"),
    ("Element with ID", "div#main"),
    ("Element with class", "div.container"),
    ("Element with ID and class", "div#main.container"),
    ("Element with multiple classes", "div.container.fluid"),
    ("Input with attributes", "input[type=text][placeholder=Enter name]"),
    ("Element with text", "div{Hello World}"),
    ("Element with multiplication", "div*3"),
    ("Nested elements", "div>p>span"),
    ("Sibling elements", "div+p+span"),
    ("Self-closing tag", "img[src=image.jpg][alt=Image]"),
    (
        "Complex form",
        "form#login>input[type=email][placeholder=Email]"
        "+input[type=password][placeholder=Password]"
        "+button[type=submit]{Login}",
    ),
    ("Table structure", "table>thead>tr>th*3{Header}+tbody>tr*2>td*3{Cell}"),
]

ERROR_EXAMPLES = [
    ("Unclosed bracket", "div["),
    ("Invalid attribute", "div[=value]"),
    ("Unclosed text brace", "div{Hello"),
    ("Invalid multiplier", "div*abc"),
]


def examples_table(config: EmmetConfig | None = None) -> Table:
    """Expand every example and collect the results in a table."""
    table = Table(title="Emmet examples")
    table.add_column("Description", style="cyan")
    table.add_column("Abbreviation")
    table.add_column("Result", overflow="fold")

    for description, abbreviation in EXAMPLES + ERROR_EXAMPLES:
        try:
            result = Text(emmet_to_html(abbreviation, config))
        except EmmetError as exc:
            result = Text(f"Error: {exc.message}", style="red")
        # Text cells are not parsed as rich markup, so `[...]` survives
        table.add_row(description, Text(abbreviation), result)

    return table
