# proto_file_loader.py
# Reads schema files and builds the enum Model, attaching source comments to enums and enum values.
import os
import sys
from typing import List, Optional
from lark import Token, Tree
from lark_parser import parse_enum_schema
from model import Model, ModelEnum, ModelEnumValue


def load_schema_file(path: str, verbose: bool = False) -> Model:
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()
    return load_schema_text(text, file=path, verbose=verbose)


def load_schema_text(text: str, file: Optional[str] = None, verbose: bool = False) -> Model:
    tree, comments = parse_enum_schema(text)
    return _SchemaModelBuilder(text, comments, file, verbose).build(tree)


def comment_text(token: Token) -> str:
    """Strip comment markers: '// foo' => 'foo', '/** foo\n * bar */' => 'foo\nbar'."""
    raw = str(token)
    if raw.startswith('//'):
        line = raw[2:]
        return (line[1:] if line.startswith(' ') else line).rstrip()
    body = raw[2:-2]
    lines = []
    for line in body.split('\n'):
        line = line.lstrip()
        if line.startswith('*'):
            line = line[1:]
        if line.startswith(' '):
            line = line[1:]
        lines.append(line.rstrip())
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()
    return '\n'.join(lines)


class _SchemaModelBuilder:
    def __init__(self, text: str, comments: List[Token], file: Optional[str], verbose: bool):
        self.text = text
        self.comments = comments
        self.file = file
        self.verbose = verbose
        self.package = None
        self.syntax = None
        self.enums = []

    def debug_print(self, message: str) -> None:
        if self.verbose:
            print(f"[DEBUG] {message}", file=sys.stderr)

    def build(self, tree: Tree) -> Model:
        for node in tree.children:
            if not isinstance(node, Tree):
                continue
            if node.data == 'syntax_stmt':
                self.syntax = str(node.children[0])[1:-1]
            elif node.data == 'package_stmt':
                self.package = _ident_text(node.children[0])
            elif node.data == 'enum_def':
                self.enums.append(self._parse_enum(node, []))
            elif node.data == 'message_def':
                self._walk_message(node, [])
        self.debug_print(f"Loaded {len(self.enums)} enums from {self.file or '<text>'} (package={self.package})")
        return Model(self.file, self.enums, package=self.package, syntax=self.syntax)

    def _walk_message(self, message_node: Tree, parent_names: List[str]):
        name = str(message_node.children[0])
        for child in message_node.children[1:]:
            if isinstance(child, Tree) and child.data == 'enum_def':
                self.enums.append(self._parse_enum(child, parent_names + [name]))
            elif isinstance(child, Tree) and child.data == 'message_def':
                self._walk_message(child, parent_names + [name])

    def _parse_enum(self, enum_node: Tree, parent_names: List[str]) -> ModelEnum:
        name_token = enum_node.children[0]
        name = str(name_token)
        value_nodes = [c for c in enum_node.children if isinstance(c, Tree) and c.data == 'enum_value']
        options = {}
        for child in enum_node.children:
            if isinstance(child, Tree) and child.data == 'option_stmt':
                opt_name, opt_value = _option_pair(child)
                options[opt_name] = opt_value

        values = []
        for idx, v_node in enumerate(value_nodes):
            next_start = value_nodes[idx + 1].meta.start_pos if idx + 1 < len(value_nodes) else None
            v_name = str(v_node.children[0])
            v_number = v_node.children[1]
            v_options = {}
            if len(v_node.children) > 2 and isinstance(v_node.children[2], Tree):
                for assign in v_node.children[2].children:
                    opt_name, opt_value = _option_pair(assign)
                    v_options[opt_name] = opt_value
            values.append(ModelEnumValue(
                v_name, v_number,
                leading_comments=self._leading_comments(v_node.meta.line, v_node.meta.start_pos),
                trailing_comments=self._trailing_comments(v_node.meta.end_line, v_node.meta.end_pos, next_start),
                deprecated=v_options.get('deprecated') == 'true',
                file=self.file,
                line=v_node.meta.line,
            ))

        enum = ModelEnum(
            name, values,
            leading_comments=self._leading_comments(enum_node.meta.line, enum_node.meta.start_pos),
            trailing_comments=self._trailing_comments(
                name_token.end_line, name_token.end_pos,
                value_nodes[0].meta.start_pos if value_nodes else enum_node.meta.end_pos),
            package=self.package,
            parent_names=parent_names,
            deprecated=options.get('deprecated') == 'true',
            allow_alias=options.get('allow_alias') == 'true',
            file=self.file,
            line=enum_node.meta.line,
        )
        self._check_aliases(enum)
        self.debug_print(f"Enum {enum.qualified_name}: {[(v.name, v.number) for v in values]}")
        return enum

    def _check_aliases(self, enum: ModelEnum):
        if enum.allow_alias:
            return
        seen = {}
        for value in enum.values:
            if value.number in seen:
                raise ValueError(
                    f"{self.file or '<text>'}:{value.line}: '{value.name}' uses number {value.number} already used by "
                    f"'{seen[value.number]}' in enum '{enum.qualified_name}'. Set option allow_alias = true to allow aliases.")
            seen[value.number] = value.name

    def _alone_on_line(self, token: Token) -> bool:
        line_start = self.text.rfind('\n', 0, token.start_pos) + 1
        return not self.text[line_start:token.start_pos].strip()

    def _leading_comments(self, line: int, start_pos: int) -> Optional[str]:
        # Consecutive comments, each alone on its line, ending right above the element.
        # A blank line between the comments and the element detaches them.
        block = []
        expected_end_line = line - 1
        for token in reversed([c for c in self.comments if c.end_pos <= start_pos]):
            if token.end_line != expected_end_line or not self._alone_on_line(token):
                break
            block.insert(0, comment_text(token))
            expected_end_line = token.line - 1
        if not block:
            return None
        return '\n'.join(block)

    def _trailing_comments(self, end_line: int, end_pos: int, next_start: Optional[int]) -> Optional[str]:
        for token in self.comments:
            if token.start_pos < end_pos:
                continue
            if token.line != end_line or (next_start is not None and token.start_pos > next_start):
                break
            return comment_text(token)
        return None


def _ident_text(node) -> str:
    if isinstance(node, Tree):
        return '.'.join(str(t) for t in node.children if isinstance(t, Token))
    return str(node)


def _option_pair(node: Tree):
    name_node, value = node.children[0], node.children[1]
    name = '.'.join(
        _ident_text(part) if isinstance(part, Tree) else str(part)
        for part in name_node.children
    )
    if isinstance(value, Tree):
        value = _ident_text(value)
    elif isinstance(value, Token) and value.type == 'STRING':
        value = str(value)[1:-1]
    else:
        value = str(value)
    return name, value
