"""Core ATHN functionality: IR, line and form field parsers, document driver."""

from . import ir
from .config import DEFAULT_CONFIG, ParserConfig
from .document_parser import DocumentBuilder, Section, parse_document
from .errors import AthnError, ErrorContext, ErrorKind, ParseError
from .form_parser import parse_form_field
from .line_parser import classify_line, parse_form_line, parse_link
from .metadata_parser import MetadataBuilder, parse_metadata_line

__all__ = [
    "ir",
    "AthnError",
    "ParseError",
    "ErrorContext",
    "ErrorKind",
    "ParserConfig",
    "DEFAULT_CONFIG",
    "parse_document",
    "DocumentBuilder",
    "Section",
    "classify_line",
    "parse_link",
    "parse_form_line",
    "parse_form_field",
    "parse_metadata_line",
    "MetadataBuilder",
]
