"""BEM naming: identifier parsing, conventions and component-name conversion."""

from bemgen.naming.conventions import CONVENTIONS, NamingConvention, get_convention
from bemgen.naming.errors import NamingError, UnknownConventionError
from bemgen.naming.identifiers import to_component_name
from bemgen.naming.parser import EntityParser, LarkEntityParser, get_parser, parse_entity

__all__ = [
    "CONVENTIONS",
    "EntityParser",
    "LarkEntityParser",
    "NamingConvention",
    "NamingError",
    "UnknownConventionError",
    "get_convention",
    "get_parser",
    "parse_entity",
    "to_component_name",
]
