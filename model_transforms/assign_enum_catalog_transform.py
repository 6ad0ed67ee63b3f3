"""
Model Transform: AssignEnumCatalogTransform
Resolves the emission-ready (name, number) catalog of every enum, so generators do not need to
handle prefix stripping or synthetic value insertion.
"""
import re
from typing import List, Optional
from model import Model, ModelEnum, EnumCatalogEntry

# Name of the member inserted when an enum declares no 0 value
SYNTHETIC_ZERO_NAME = "UNSPECIFIED$"


def find_enum_shared_prefix(enum: ModelEnum) -> Optional[str]:
    """
    Returns the prefix shared by all value names, derived from the enum name, e.g. "MyEnum" => "MY_ENUM_".
    Returns None if a value does not start with it, or if a stripped name would not be a valid
    member name (upper-case first letter, at least 2 chars).
    """
    if not enum.name or not enum.values:
        return None
    enum_prefix = re.sub(r'[A-Z]', lambda m: '_' + m.group(0).lower(), enum.name)
    if enum_prefix.startswith('_'):
        enum_prefix = enum_prefix[1:]
    enum_prefix = enum_prefix.upper() + '_'

    names = [v.name for v in enum.values]
    if not all(name.startswith(enum_prefix) for name in names):
        return None
    stripped = [name[len(enum_prefix):] for name in names]
    if not all(re.match(r'^[A-Z].+', name) for name in stripped):
        return None
    return enum_prefix


def build_enum_catalog(enum: ModelEnum, keep_enum_prefix: bool = False) -> List[EnumCatalogEntry]:
    shared_prefix = None if keep_enum_prefix else find_enum_shared_prefix(enum)
    catalog = []
    if not any(v.number == 0 for v in enum.values):
        catalog.append(EnumCatalogEntry(SYNTHETIC_ZERO_NAME, 0))
    for value in enum.values:
        name = value.name
        if shared_prefix:
            name = name[len(shared_prefix):]
        catalog.append(EnumCatalogEntry(name, value.number))

    seen = set()
    for entry in catalog:
        if entry.name in seen:
            raise ValueError(f"Enum '{enum.qualified_name}' has duplicate member name '{entry.name}'.")
        seen.add(entry.name)
    return catalog


def get_enum_catalog(enum: ModelEnum) -> List[EnumCatalogEntry]:
    """The catalog assigned by AssignEnumCatalogTransform, or a default build if none was assigned."""
    if enum.catalog is not None:
        return enum.catalog
    return build_enum_catalog(enum)


class AssignEnumCatalogTransform:
    def __init__(self, keep_enum_prefix: bool = False):
        self.keep_enum_prefix = keep_enum_prefix

    def transform(self, model: Model) -> Model:
        for enum in model.enums:
            enum.catalog = build_enum_catalog(enum, self.keep_enum_prefix)
        return model
