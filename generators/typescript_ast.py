"""
Minimal TypeScript syntax nodes, plus the enum builder and the output file accumulator used by the generators.
Every node renders itself to TypeScript source text; comments render as JSDoc blocks.
"""
import json
import re
from typing import List, Optional

from generators.typescript_imports import SymbolTable

INDENT = "    "
_IDENTIFIER = re.compile(r'^[A-Za-z_$][A-Za-z0-9_$]*$')


def is_valid_identifier(name: str) -> bool:
    return bool(name) and bool(_IDENTIFIER.match(name))


def render_jsdoc(comment: str, indent: str = "") -> List[str]:
    lines = [f"{indent}/**"]
    for line in comment.replace('*/', '*\\/').split('\n'):
        lines.append(f"{indent} * {line}".rstrip() if line else f"{indent} *")
    lines.append(f"{indent} */")
    return lines


class Identifier:
    def __init__(self, text: str):
        if not is_valid_identifier(text):
            raise ValueError(f"'{text}' is not a valid TypeScript identifier.")
        self.text = text

    def render(self) -> str:
        return self.text


class PropertyAccess:
    def __init__(self, expression, name: str):
        self.expression = expression
        self.name = Identifier(name)

    def render(self) -> str:
        return f"{self.expression.render()}.{self.name.render()}"


class StringLiteral:
    def __init__(self, text: str):
        self.text = text

    def render(self) -> str:
        return json.dumps(self.text)


class ObjectLiteral:
    def __init__(self, properties: List[tuple]):
        # (name, expression) pairs, printed in order
        self.properties = properties

    def render(self) -> str:
        if not self.properties:
            return "{}"
        body = ", ".join(f"{name}: {expr.render()}" for name, expr in self.properties)
        return f"{{ {body} }}"


class ArrayLiteral:
    def __init__(self, elements: list, multi_line: bool = False):
        self.elements = elements
        self.multi_line = multi_line

    def render(self, indent: str = "") -> str:
        if not self.elements:
            return "[]"
        if not self.multi_line:
            return "[" + ", ".join(e.render() for e in self.elements) + "]"
        inner = ",\n".join(f"{indent}{INDENT}{e.render()}" for e in self.elements)
        return f"[\n{inner}\n{indent}]"


class EnumMember:
    def __init__(self, name: str, number: int, comment: Optional[str] = None):
        self.name = name
        self.number = number
        self.comment = comment

    def render_lines(self, indent: str) -> List[str]:
        lines = render_jsdoc(self.comment, indent) if self.comment else []
        lines.append(f"{indent}{self.name} = {self.number}")
        return lines


class EnumDeclaration:
    def __init__(self, name: str, members: List[EnumMember], modifiers: Optional[List[str]] = None):
        self.name = Identifier(name)
        self.members = members
        self.modifiers = modifiers or []
        self.leading_comment: Optional[str] = None

    def render(self, indent: str = "") -> str:
        lines = render_jsdoc(self.leading_comment, indent) if self.leading_comment else []
        prefix = " ".join(self.modifiers + ["enum"])
        lines.append(f"{indent}{prefix} {self.name.render()} {{")
        for idx, member in enumerate(self.members):
            member_lines = member.render_lines(indent + INDENT)
            if idx < len(self.members) - 1:
                member_lines[-1] += ","
            lines.extend(member_lines)
        lines.append(f"{indent}}}")
        return "\n".join(lines)


class VariableStatement:
    """A single variable declaration, e.g. `export const Foo = [...];`."""
    def __init__(self, name: str, initializer, modifiers: Optional[List[str]] = None, keyword: str = "const"):
        if keyword not in ("const", "let", "var"):
            raise ValueError(f"Unknown declaration keyword '{keyword}'.")
        self.name = Identifier(name)
        self.initializer = initializer
        self.modifiers = modifiers or []
        self.keyword = keyword
        self.leading_comment: Optional[str] = None

    def render(self, indent: str = "") -> str:
        lines = render_jsdoc(self.leading_comment, indent) if self.leading_comment else []
        prefix = " ".join(self.modifiers + [self.keyword])
        if isinstance(self.initializer, ArrayLiteral):
            value = self.initializer.render(indent)
        else:
            value = self.initializer.render()
        lines.append(f"{indent}{prefix} {self.name.render()} = {value};")
        return "\n".join(lines)


class TypescriptEnumBuilder:
    """Collects enum members, then builds an EnumDeclaration."""

    def __init__(self):
        self.values: List[EnumMember] = []

    def add(self, name: str, number: int, comment: Optional[str] = None) -> None:
        self.values.append(EnumMember(name, number, comment))

    def build(self, name: str, modifiers: Optional[List[str]] = None) -> EnumDeclaration:
        if not self.values:
            raise ValueError(f"Enum '{name}' has no members.")
        seen = set()
        for value in self.values:
            if not is_valid_identifier(value.name):
                raise ValueError(f"Enum '{name}' member '{value.name}' is not a valid TypeScript identifier.")
            if value.name in seen:
                raise ValueError(f"Enum '{name}' has duplicate member '{value.name}'.")
            seen.add(value.name)
        return EnumDeclaration(name, list(self.values), modifiers)


class TypescriptFile:
    """
    Accumulates top-level statements for one output file.
    Statements are printed in the order they were added; callers must not add concurrently.
    """

    def __init__(self, file_name: str, source_file: Optional[str] = None):
        self.file_name = file_name
        self.source_file = source_file
        self.statements = []
        self.symbols = SymbolTable()

    def add_statement(self, statement) -> None:
        self.statements.append(statement)

    def get_content(self) -> str:
        lines = []
        if self.source_file:
            lines.append(f"// @generated by enum_wrangler from {self.source_file}")
        lines.extend(statement.render() for statement in self.statements)
        return "\n".join(lines) + "\n"
