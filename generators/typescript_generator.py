"""
TypeScript generator for Model.
Outputs one exported enum per schema enum, each followed by its translation table.
"""
import os
from model import Model
from model_transforms.model_transform_pipeline import run_model_transform_pipeline
from model_transforms.assign_enum_catalog_transform import AssignEnumCatalogTransform
from generators.comment_generator import CommentGenerator
from generators.enum_generator import EnumGenerator
from generators.generator_utils import debug_print
from generators.typescript_ast import TypescriptFile
from generators.typescript_imports import TypeScriptImports, DEFAULT_ANONYMOUS_ENUM_NAME


def generate_typescript_code(model: Model, translation_tables: bool = True, keep_enum_prefix: bool = False,
                             anonymous_enum_name: str = DEFAULT_ANONYMOUS_ENUM_NAME, verbose: bool = False) -> str:
    model = run_model_transform_pipeline(model, [AssignEnumCatalogTransform(keep_enum_prefix)], verbose)

    file_name = os.path.splitext(os.path.basename(model.file))[0] + ".ts" if model.file else "enums.ts"
    source = TypescriptFile(file_name, source_file=os.path.basename(model.file) if model.file else None)
    generator = EnumGenerator(TypeScriptImports(anonymous_enum_name), CommentGenerator(), verbose=verbose)

    for enum in model.enums:
        # Declaration first so the table always follows the enum it references
        generator.generate_enum(source, enum)
        if translation_tables:
            generator.generate_translation_table(source, enum)

    debug_print(verbose, f"TypeScript generator: {len(source.statements)} statements for {file_name}")
    return source.get_content()


def write_typescript_file(model: Model, out_path, **kwargs):
    code = generate_typescript_code(model, **kwargs)
    with open(out_path, "w", encoding="utf-8") as f:
        f.write(code)
