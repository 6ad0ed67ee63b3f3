from lark import Lark, Transformer


# Grammar for the subset of the protobuf language needed to find enums.
# Message fields, oneofs, reserved ranges and options are parsed so that real schema files load,
# but only enums (and the messages that nest them) are kept by the loader.
grammar = r"""
    start: statement*

    ?statement: syntax_stmt
              | package_stmt
              | import_stmt
              | option_stmt
              | enum_def
              | message_def
              | empty_stmt

    syntax_stmt: ("syntax" | "edition") "=" STRING ";"
    package_stmt: "package" full_ident ";"
    import_stmt: "import" IMPORT_MODIFIER? STRING ";"
    IMPORT_MODIFIER: "public" | "weak"
    option_stmt: "option" option_name "=" constant ";"
    empty_stmt: ";"

    message_def: "message" NAME "{" message_item* "}"
    ?message_item: field_def
                 | enum_def
                 | message_def
                 | oneof_def
                 | option_stmt
                 | reserved_stmt
                 | extensions_stmt
                 | empty_stmt

    oneof_def: "oneof" NAME "{" (field_def | option_stmt | empty_stmt)* "}"
    // Field declarations are kept as a flat token run; only their shape matters.
    field_def: field_token+ "=" int_lit field_options? ";"
    field_token: NAME | "." | "<" | ">" | ","
    field_options: "[" option_assign ("," option_assign)* "]"

    enum_def: "enum" NAME "{" enum_item* "}"
    ?enum_item: enum_value
              | option_stmt
              | reserved_stmt
              | empty_stmt
    enum_value: NAME "=" int_lit enum_value_options? ";"
    enum_value_options: "[" option_assign ("," option_assign)* "]"

    option_assign: option_name "=" constant
    option_name: (NAME | "(" "."? full_ident ")") ("." NAME)*
    ?constant: full_ident
             | int_lit
             | FLOAT
             | STRING

    reserved_stmt: "reserved" reserved_item ("," reserved_item)* ";"
    extensions_stmt: "extensions" reserved_item ("," reserved_item)* field_options? ";"
    ?reserved_item: reserved_range
                  | STRING
                  | NAME
    reserved_range: int_lit ("to" (int_lit | "max"))?

    full_ident: NAME ("." NAME)*
    int_lit: INT_LIT

    NAME: /[A-Za-z_][A-Za-z0-9_]*/
    INT_LIT: /-?(0[xX][0-9a-fA-F]+|[0-9]+)/
    FLOAT.2: /-?([0-9]+\.[0-9]*([eE][+-]?[0-9]+)?|[0-9]+[eE][+-]?[0-9]+|\.[0-9]+([eE][+-]?[0-9]+)?)/
    STRING: /"(\\.|[^"\\\n])*"/ | /'(\\.|[^'\\\n])*'/
    COMMENT: /\/\/[^\n]*/
    BLOCK_COMMENT: /\/\*[\s\S]*?\*\//

    %import common.WS
    %ignore WS
    %ignore COMMENT
    %ignore BLOCK_COMMENT
"""


def parse_int_literal(text: str) -> int:
    """Decimal, hex (0x1F) or octal (017) integer literal, optionally negative."""
    negative = text.startswith('-')
    digits = text[1:] if negative else text
    if digits[:2] in ('0x', '0X'):
        value = int(digits[2:], 16)
    elif len(digits) > 1 and digits.startswith('0'):
        value = int(digits[1:], 8)
    else:
        value = int(digits)
    return -value if negative else value


class IntLiteralTransformer(Transformer):
    """Replaces int_lit subtrees with Python ints; all other nodes keep their positions."""
    def int_lit(self, items):
        return parse_int_literal(str(items[0]))


def make_parser(comments: list) -> Lark:
    # Comments are ignored by the grammar but handed to the lexer callbacks,
    # so the loader can attach them to the declarations they document.
    return Lark(
        grammar,
        start='start',
        parser='lalr',
        propagate_positions=True,
        lexer_callbacks={'COMMENT': comments.append, 'BLOCK_COMMENT': comments.append},
    )


def parse_enum_schema(text):
    """
    Parse schema text. Returns (tree, comments) where comments is the list of COMMENT and
    BLOCK_COMMENT tokens in source order. Syntax errors raise lark.exceptions.UnexpectedInput.
    """
    comments = []
    tree = make_parser(comments).parse(text)
    tree = IntLiteralTransformer().transform(tree)
    return tree, comments
