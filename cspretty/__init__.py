from cspretty.classifier import Classification, Token, classify
from cspretty.policy import DirectiveRow, extract_header, parse_policy, parse_row, split_policy
from cspretty.renderer import (
    ANSI_PALETTE,
    PLAIN_PALETTE,
    Palette,
    RenderOptions,
    format_line,
    format_policy,
    render,
)
from cspretty.utils.helpers import Log
