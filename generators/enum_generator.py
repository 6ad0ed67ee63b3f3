"""
EnumGenerator: emits TypeScript enum declarations and their translation tables.

For the following .proto:

    enum MyEnum {
        // @Translate: Whatever
        MY_ENUM_ANY = 0;
        MY_ENUM_YES = 1;
        MY_ENUM_NO = 2;
    }

we generate (the shared prefix MY_ENUM_ is dropped by the catalog):

    export enum MyEnum {
        /**
         * @Translate: Whatever
         */
        ANY = 0,
        YES = 1,
        NO = 2
    }
    export const MyEnumTranslation = [
        { id: MyEnum.ANY, name: "Whatever" },
        { id: MyEnum.YES, name: "Yes" },
        { id: MyEnum.NO, name: "No" }
    ];
"""
from typing import Callable, List, Optional

from model import ModelEnum, ModelEnumValue, EnumCatalogEntry
from model_transforms.assign_enum_catalog_transform import get_enum_catalog
from generators.comment_generator import CommentGenerator
from generators.generator_utils import format_enum_name, extract_translate_directive, debug_print
from generators.typescript_ast import (
    ArrayLiteral, EnumDeclaration, Identifier, ObjectLiteral, PropertyAccess, StringLiteral,
    TypescriptEnumBuilder, TypescriptFile, VariableStatement,
)
from generators.typescript_imports import TypeScriptImports

SYNTHETIC_VALUE_COMMENT = "@generated synthetic value - TypeScript enums generated from protobuf require a 0 value"
TRANSLATION_TABLE_SUFFIX = "Translation"


class TranslationEntry:
    def __init__(self, id: PropertyAccess, name: StringLiteral):
        self.id = id
        self.name = name

    def to_object_literal(self) -> ObjectLiteral:
        return ObjectLiteral([("id", self.id), ("name", self.name)])


def find_declared_value(descriptor: ModelEnum, number: int) -> Optional[ModelEnumValue]:
    # First declared value wins when numbers repeat (aliases)
    for value in descriptor.values:
        if value.number == number:
            return value
    return None


class EnumGenerator:
    def __init__(self, imports: Optional[TypeScriptImports] = None, comments: Optional[CommentGenerator] = None,
                 catalog_resolver: Callable[[ModelEnum], List[EnumCatalogEntry]] = get_enum_catalog, verbose: bool = False):
        self.imports = imports or TypeScriptImports()
        self.comments = comments or CommentGenerator()
        self.catalog_resolver = catalog_resolver
        self.verbose = verbose

    def generate_enum(self, source: TypescriptFile, descriptor: ModelEnum) -> EnumDeclaration:
        """
        Adds an exported enum declaration for the descriptor to `source` and returns it.
        Members follow the catalog order. Members without a declared value (the synthetic 0)
        get SYNTHETIC_VALUE_COMMENT, the others get their leading comment.
        """
        builder = TypescriptEnumBuilder()
        for entry in self.catalog_resolver(descriptor):
            declared = find_declared_value(descriptor, entry.number)
            if declared is not None:
                comment = self.comments.get_comment_block(declared, leading_only=True)
            else:
                comment = SYNTHETIC_VALUE_COMMENT
            builder.add(entry.name, entry.number, comment)
        statement = builder.build(self.imports.type(source, descriptor), ["export"])
        source.add_statement(statement)
        self.comments.add_comments_for_descriptor(statement, descriptor, "append")
        debug_print(self.verbose, f"EnumGenerator: declared enum {statement.name.text} with {len(statement.members)} members")
        return statement

    def generate_translation_table(self, source: TypescriptFile, descriptor: ModelEnum) -> VariableStatement:
        """
        Adds `export const <Enum>Translation = [{ id: <Enum>.<MEMBER>, name: "<label>" }, ...];` to `source`.
        The label is the humanized member name unless the member's leading comment carries an
        `@Translate: <token>` directive, in which case the token is used as is.
        """
        type_name = self.imports.type(source, descriptor)
        translations = []
        for entry in self.catalog_resolver(descriptor):
            declared = find_declared_value(descriptor, entry.number)
            comment = self.comments.get_comment_block(declared, leading_only=True) if declared is not None else None
            label = format_enum_name(entry.name)
            override = extract_translate_directive(comment)
            if override is not None:
                label = override
            translations.append(TranslationEntry(
                id=PropertyAccess(Identifier(type_name), entry.name),
                name=StringLiteral(label),
            ))

        table = ArrayLiteral([t.to_object_literal() for t in translations], multi_line=True)
        statement = VariableStatement(f"{type_name}{TRANSLATION_TABLE_SUFFIX}", table, ["export"], keyword="const")
        source.add_statement(statement)
        debug_print(self.verbose, f"EnumGenerator: added translation table {statement.name.text} with {len(translations)} entries")
        return statement
