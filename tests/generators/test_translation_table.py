from model import ModelEnum, ModelEnumValue
from generators.enum_generator import EnumGenerator
from generators.typescript_ast import TypescriptFile, ArrayLiteral
from generators.typescript_imports import TypeScriptImports


def table_entries(statement):
    assert isinstance(statement.initializer, ArrayLiteral)
    entries = []
    for obj in statement.initializer.elements:
        props = dict(obj.properties)
        entries.append((props["id"].render(), props["name"].text))
    return entries


def test_status_scenario():
    enum = ModelEnum("Status", [
        ModelEnumValue("UNSPECIFIED", 0),
        ModelEnumValue("ACTIVE", 1),
        ModelEnumValue("DONE", 2),
    ])
    source = TypescriptFile("status.ts")
    statement = EnumGenerator().generate_translation_table(source, enum)
    assert statement.name.text == "StatusTranslation"
    assert statement.keyword == "const"
    assert statement.modifiers == ["export"]
    assert table_entries(statement) == [
        ("Status.UNSPECIFIED", "Unspecified"),
        ("Status.ACTIVE", "Active"),
        ("Status.DONE", "Done"),
    ]
    assert source.statements == [statement]


def test_translate_directive_overrides_label():
    enum = ModelEnum("Phase", [
        ModelEnumValue("IDLE", 0),
        ModelEnumValue("READY_TO_START", 1, leading_comments="Queued.\n@Translate: GoTime"),
    ])
    statement = EnumGenerator().generate_translation_table(TypescriptFile("phase.ts"), enum)
    assert table_entries(statement) == [("Phase.IDLE", "Idle"), ("Phase.READY_TO_START", "GoTime")]


def test_empty_directive_falls_back_to_default_label():
    enum = ModelEnum("Phase", [ModelEnumValue("READY_TO_START", 0, leading_comments="@Translate:")])
    statement = EnumGenerator().generate_translation_table(TypescriptFile("phase.ts"), enum)
    assert table_entries(statement) == [("Phase.READY_TO_START", "Ready To Start")]


def test_directive_in_trailing_comment_is_ignored():
    enum = ModelEnum("Phase", [ModelEnumValue("READY", 0, trailing_comments="@Translate: Nope")])
    statement = EnumGenerator().generate_translation_table(TypescriptFile("phase.ts"), enum)
    assert table_entries(statement) == [("Phase.READY", "Ready")]


def test_synthetic_zero_entry_uses_humanized_name():
    enum = ModelEnum("Priority", [ModelEnumValue("LOW", 1, leading_comments="@Translate: Meh")])
    statement = EnumGenerator().generate_translation_table(TypescriptFile("priority.ts"), enum)
    assert table_entries(statement) == [("Priority.UNSPECIFIED$", "Unspecified$"), ("Priority.LOW", "Meh")]


def test_table_length_and_order_match_catalog():
    values = [ModelEnumValue(f"VALUE_{n}", n) for n in (3, 1, 0, 2)]
    enum = ModelEnum("Shuffled", values)
    statement = EnumGenerator().generate_translation_table(TypescriptFile("shuffled.ts"), enum)
    assert [e[0] for e in table_entries(statement)] == [
        "Shuffled.VALUE_3", "Shuffled.VALUE_1", "Shuffled.VALUE_0", "Shuffled.VALUE_2",
    ]


def test_anonymous_enum_uses_fallback_name():
    enum = ModelEnum(None, [ModelEnumValue("FIRST", 0)])
    statement = EnumGenerator().generate_translation_table(TypescriptFile("anon.ts"), enum)
    assert statement.name.text == "AnonymousEnumTranslation"
    assert table_entries(statement) == [("AnonymousEnum.FIRST", "First")]


def test_anonymous_enum_fallback_is_configurable():
    enum = ModelEnum(None, [ModelEnumValue("FIRST", 0)])
    generator = EnumGenerator(imports=TypeScriptImports(anonymous_enum_name="SpectralBot"))
    statement = generator.generate_translation_table(TypescriptFile("anon.ts"), enum)
    assert statement.name.text == "SpectralBotTranslation"
    assert table_entries(statement) == [("SpectralBot.FIRST", "First")]


def test_table_references_declared_identifier():
    enum = ModelEnum("Kind", [ModelEnumValue("A", 0)], parent_names=["Outer"])
    source = TypescriptFile("kinds.ts")
    generator = EnumGenerator()
    decl = generator.generate_enum(source, enum)
    statement = generator.generate_translation_table(source, enum)
    assert decl.name.text == "Outer_Kind"
    assert statement.name.text == "Outer_KindTranslation"
    assert table_entries(statement) == [("Outer_Kind.A", "A")]
    assert source.statements == [decl, statement]


def test_translation_table_renders_typescript():
    enum = ModelEnum("Status", [ModelEnumValue("UNSPECIFIED", 0), ModelEnumValue("ACTIVE", 1)])
    source = TypescriptFile("status.ts")
    EnumGenerator().generate_translation_table(source, enum)
    assert source.get_content() == (
        "export const StatusTranslation = [\n"
        "    { id: Status.UNSPECIFIED, name: \"Unspecified\" },\n"
        "    { id: Status.ACTIVE, name: \"Active\" }\n"
        "];\n"
    )
