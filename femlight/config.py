# femlight/config.py
"""
Text format configuration and defaults.
"""

from dataclasses import dataclass


@dataclass
class IOConfig:
    """Global text format configuration."""

    # Everything after this character up to the end of the line is ignored
    comment_char: str = "%"

    # Block tags look like <Node>, <LoadNode>, ...
    tag_open: str = "<"
    tag_close: str = ">"
    end_tag: str = "END"

    # Written before every field line
    indent: str = "\t"

    # Separator between a field's value and its trailing comment
    comment_sep: str = "\t"

    # repr() gives the shortest text that reads back to the same float
    float_format: str = "repr"


# Global config instance
CONFIG = IOConfig()
