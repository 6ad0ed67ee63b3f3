"""
Resolves the local TypeScript identifier under which an enum descriptor is declared in an output file.
"""
from typing import Dict, Optional

DEFAULT_ANONYMOUS_ENUM_NAME = "AnonymousEnum"

# Names that would shadow built-in TypeScript types
RESERVED_TYPE_NAMES = {
    'object', 'Uint8Array', 'array', 'Array', 'string', 'String',
    'number', 'Number', 'boolean', 'Boolean', 'bigint', 'BigInt',
}


class SymbolTable:
    """Names registered in one output file, keyed by the descriptor that owns them."""

    def __init__(self):
        self._by_descriptor: Dict[int, str] = {}
        self._owners: Dict[str, object] = {}

    def find(self, descriptor) -> Optional[str]:
        return self._by_descriptor.get(id(descriptor))

    def has(self, name: str) -> bool:
        return name in self._owners

    def register(self, name: str, descriptor) -> None:
        owner = self._owners.get(name)
        if owner is not None and owner is not descriptor:
            raise ValueError(f"Name '{name}' is already registered in this file.")
        self._owners[name] = descriptor
        self._by_descriptor[id(descriptor)] = name

    def __len__(self):
        return len(self._owners)


class TypeScriptImports:
    def __init__(self, anonymous_enum_name: str = DEFAULT_ANONYMOUS_ENUM_NAME):
        self.anonymous_enum_name = anonymous_enum_name

    def local_name(self, descriptor) -> str:
        # Nested enums are flattened: Outer.Inner => Outer_Inner
        name = descriptor.name or self.anonymous_enum_name
        parts = list(getattr(descriptor, 'parent_names', [])) + [name]
        name = '_'.join(parts)
        if name in RESERVED_TYPE_NAMES:
            name += '$'
        return name

    def type(self, source, descriptor) -> str:
        """
        Returns the identifier to declare (or reference) the enum with in `source`.
        Repeated calls for the same descriptor return the same name.
        """
        existing = source.symbols.find(descriptor)
        if existing is not None:
            return existing
        base = self.local_name(descriptor)
        name = base
        counter = 0
        while source.symbols.has(name):
            counter += 1
            name = f"{base}${counter}"
        source.symbols.register(name, descriptor)
        return name
