from typing import Iterable, NamedTuple

from colorama import Back, Fore, Style

from .classifier import Classification, Token
from .policy import DirectiveRow, extract_header, parse_policy

# region Constants
ROW_SEPARATOR: str = ";\n"
# endregion


# region Structures
class Palette(NamedTuple):
    """
    Mapping from a visual role to the terminal style used for it. The renderer only ever
    prepends the style and appends `reset`, so a palette of empty strings yields the literal
    text of the policy.
    """

    name: str
    safe: str
    unsafe: str
    malformed: str
    plain: str
    reset: str

    def style_for(self, classification: Classification) -> str:
        if classification is Classification.SAFE:
            return self.safe
        if classification is Classification.UNSAFE:
            return self.unsafe
        if classification is Classification.MALFORMED:
            return self.malformed

        return self.plain


ANSI_PALETTE = Palette(
    name=Fore.BLUE,
    safe=Fore.GREEN,
    unsafe=Fore.RED,
    malformed=Fore.BLACK + Back.RED,
    plain="",
    reset=Style.RESET_ALL,
)

PLAIN_PALETTE = Palette(name="", safe="", unsafe="", malformed="", plain="", reset="")


class RenderOptions(NamedTuple):
    """
    Rendering configuration passed down from the command line.

    multiline: Put every source value on its own indented line.
    palette: Styles used for directive names and classified values.
    indent: Indentation used in front of values in multiline mode.
    """

    multiline: bool = False
    palette: Palette = ANSI_PALETTE
    indent: str = "\t"

    @property
    def separator(self) -> str:
        return "\n" + self.indent if self.multiline else " "


# endregion


# region Rendering
def paint(text: str, style: str, palette: Palette) -> str:
    if not style:
        return text

    return style + text + palette.reset


def render_token(token: Token, palette: Palette) -> str:
    return paint(token.text, palette.style_for(token.classification), palette)


def render_row(row: DirectiveRow, options: RenderOptions) -> str:
    parts = [paint(row.name, options.palette.name, options.palette)]
    parts.extend(render_token(token, options.palette) for token in row.tokens)

    return options.separator.join(parts)


def render(rows: Iterable[DirectiveRow], options: RenderOptions = RenderOptions()) -> str:
    """
    Renders parsed directives into a single human-readable string. Directives are always
    separated by a semicolon and a newline, the values inside a directive by a space or by a
    newline with indentation in multiline mode.

    Args:
        rows (Iterable[DirectiveRow]): Directives in the order they appeared in the policy.
        options (RenderOptions, optional): Separator and color configuration.

    Returns:
        str: Rendered policy, empty string when there are no directives.
    """
    return ROW_SEPARATOR.join(render_row(row, options) for row in rows)


def format_policy(text: str, options: RenderOptions = RenderOptions()) -> str:
    return render(parse_policy(text), options)


def format_line(line: str, options: RenderOptions = RenderOptions()) -> str:
    """
    Full pipeline for one input line: strips the optional header name, parses the policy and
    renders it.
    """
    return format_policy(extract_header(line), options)


# endregion
