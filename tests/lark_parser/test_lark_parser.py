import pytest
from lark import Tree
from lark.exceptions import UnexpectedInput
from lark_parser import parse_enum_schema, parse_int_literal


def find_all(tree, data):
    return [t for t in tree.iter_subtrees_topdown() if t.data == data]


def test_parse_simple_enum():
    tree, comments = parse_enum_schema('''
    syntax = "proto3";
    enum Status {
        UNSPECIFIED = 0;
        ACTIVE = 1;
    }
    ''')
    enums = find_all(tree, 'enum_def')
    assert len(enums) == 1
    assert str(enums[0].children[0]) == "Status"
    values = find_all(tree, 'enum_value')
    assert [(str(v.children[0]), v.children[1]) for v in values] == [("UNSPECIFIED", 0), ("ACTIVE", 1)]
    assert comments == []


def test_comments_are_collected_in_order():
    tree, comments = parse_enum_schema('''
    // leading
    enum E {
        A = 0; // trailing
        /* block
           comment */
        B = 1;
    }
    ''')
    assert [c.type for c in comments] == ['COMMENT', 'COMMENT', 'BLOCK_COMMENT']
    assert str(comments[0]) == "// leading"
    assert comments[2].line == 5 and comments[2].end_line == 6
    assert len(find_all(tree, 'enum_value')) == 2


def test_messages_fields_and_options_parse():
    tree, _ = parse_enum_schema('''
    syntax = "proto3";
    package acme.jobs;
    import public "other.proto";
    option java_package = "com.acme";
    message Outer {
        option (my.opt).flag = true;
        repeated .acme.jobs.Outer children = 1 [deprecated = true, json_name = "kids"];
        map<string, int32> counts = 2;
        oneof choice {
            string a = 3;
            int64 b = 4;
        }
        reserved 5, 7 to 9, 20 to max;
        reserved "old";
        extensions 100 to 199;
        message Inner {
            enum Kind { KIND_UNSPECIFIED = 0; }
        }
    }
    ''')
    assert len(find_all(tree, 'message_def')) == 2
    assert len(find_all(tree, 'field_def')) == 4
    assert len(find_all(tree, 'enum_def')) == 1
    assert len(find_all(tree, 'reserved_stmt')) == 2


def test_enum_options_and_value_options():
    tree, _ = parse_enum_schema('''
    enum E {
        option allow_alias = true;
        reserved 3, 4;
        A = 0;
        B = 0 [deprecated = true];
        NEG = -1;
        HEX = 0x1F;
        ;
    }
    ''')
    enum = find_all(tree, 'enum_def')[0]
    kinds = [c.data for c in enum.children if isinstance(c, Tree)]
    assert kinds == ['option_stmt', 'reserved_stmt', 'enum_value', 'enum_value', 'enum_value', 'enum_value', 'empty_stmt']
    numbers = [v.children[1] for v in find_all(tree, 'enum_value')]
    assert numbers == [0, 0, -1, 31]


@pytest.mark.parametrize("text", [
    "enum E { A = ; }",
    "enum E { A = 1 }",
    "enum { A = 1; }",
    "enum E { A = 1;",
    "service S { }",
])
def test_syntax_errors_raise(text):
    with pytest.raises(UnexpectedInput):
        parse_enum_schema(text)


@pytest.mark.parametrize("text, expected", [
    ("0", 0),
    ("42", 42),
    ("-7", -7),
    ("0x1F", 31),
    ("0X10", 16),
    ("017", 15),
    ("-010", -8),
])
def test_parse_int_literal(text, expected):
    assert parse_int_literal(text) == expected
