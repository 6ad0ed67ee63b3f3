"""
model.py
Generator-ready representation of the enumerations found in a parsed schema file.
Descriptors are read-only once the loader has built them; generators never mutate them.
"""
from typing import List, Optional


class ModelEnumValue:
    def __init__(self, name: str, number: int, leading_comments: Optional[str] = None, trailing_comments: Optional[str] = None,
                 deprecated: bool = False, file: Optional[str] = None, line: Optional[int] = None):
        self.name = name
        self.number = number
        self.leading_comments = leading_comments
        self.trailing_comments = trailing_comments
        self.deprecated = deprecated
        self.file = file
        self.line = line

    def __repr__(self):
        return f"ModelEnumValue(name={self.name!r}, number={self.number!r})"


class ModelEnum:
    """
    Descriptor for one enumeration.
    `name` may be None for anonymous enumerations built programmatically.
    `parent_names` lists the enclosing messages, outermost first.
    """
    def __init__(self, name: Optional[str], values: List['ModelEnumValue'], leading_comments: Optional[str] = None,
                 trailing_comments: Optional[str] = None, package: Optional[str] = None, parent_names: Optional[List[str]] = None,
                 deprecated: bool = False, allow_alias: bool = False, file: Optional[str] = None, line: Optional[int] = None):
        self.name = name
        self.values = values
        self.leading_comments = leading_comments
        self.trailing_comments = trailing_comments
        self.package = package
        self.parent_names = parent_names or []
        self.deprecated = deprecated
        self.allow_alias = allow_alias
        self.file = file
        self.line = line
        # Assigned by AssignEnumCatalogTransform
        self.catalog = None

    @property
    def qualified_name(self) -> str:
        """Dotted protobuf name, e.g. 'jobs.Outer.Status'."""
        parts = []
        if self.package:
            parts.append(self.package)
        parts.extend(self.parent_names)
        parts.append(self.name or '<anonymous>')
        return '.'.join(parts)

    def __repr__(self):
        return f"ModelEnum(name={self.name!r}, values={self.values!r})"


class EnumCatalogEntry:
    """One (name, number) pair that will actually be emitted."""
    def __init__(self, name: str, number: int):
        self.name = name
        self.number = number

    def __eq__(self, other):
        if isinstance(other, EnumCatalogEntry):
            return (self.name, self.number) == (other.name, other.number)
        if isinstance(other, tuple):
            return (self.name, self.number) == other
        return NotImplemented

    def __hash__(self):
        return hash((self.name, self.number))

    def __repr__(self):
        return f"EnumCatalogEntry(name={self.name!r}, number={self.number!r})"


class Model:
    def __init__(self, file: str, enums: List['ModelEnum'], package: Optional[str] = None, syntax: Optional[str] = None):
        self.file = file
        self.enums = enums
        self.package = package
        self.syntax = syntax

    def find_enum(self, qualified_name: str) -> Optional['ModelEnum']:
        for enum in self.enums:
            if enum.qualified_name == qualified_name:
                return enum
        return None
