"""Classification engine: shebang parsing, interpreter resolution, and sniffing."""

from .classifier import FileIdentifier, IdentifyOptions, tags_from_filename, tags_from_path
from .content import file_is_text, is_text
from .interpreter import tags_from_interpreter
from .shebang import ShebangCommand, parse_shebang, parse_shebang_from_file

__all__ = [
    "FileIdentifier",
    "IdentifyOptions",
    "ShebangCommand",
    "file_is_text",
    "is_text",
    "parse_shebang",
    "parse_shebang_from_file",
    "tags_from_filename",
    "tags_from_interpreter",
    "tags_from_path",
]
