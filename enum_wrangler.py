#!/usr/bin/env python3
"""
EnumWrangler

This script reads the enums declared in a protobuf schema file and writes a TypeScript file
with one exported enum per schema enum, each followed by a translation table that maps every
member to a display label. Labels come from an `@Translate: <Label>` directive in the member's
leading comment, or are derived from the member name (READY_TO_START => "Ready To Start").

Usage:
    python enum_wrangler.py --input <input_file> --output <output_dir> [--output-name <name>]
                            [--no-translation] [--keep-enum-prefix] [--anonymous-enum-name <name>] [--verbose]

Arguments:
    --input, -i             : Path to the schema file containing enum definitions
    --output, -o            : Directory where the TypeScript file will be generated
    --output-name, -n       : Base name for the output file without extension (default: input filename)
    --no-translation        : Do not generate translation tables
    --keep-enum-prefix      : Keep the MY_ENUM_ prefix shared by all members of MyEnum
    --anonymous-enum-name   : Name used for enums without a name (default: AnonymousEnum)
    --verbose, -v           : Print debug information
    --help, -h              : Show this help message

Environment overrides: EW_INPUT_FILE, EW_OUTPUT_DIR, EW_OUTPUT_NAME, EW_VERBOSE

Example:
    python enum_wrangler.py --input jobs.proto --output ./generated
    python enum_wrangler.py --input jobs.proto --output ./generated --output-name job_enums --no-translation
"""

import argparse
import os
import sys
from typing import Optional

from lark.exceptions import LarkError

from model import Model
from proto_file_loader import load_schema_file
from generators.typescript_generator import write_typescript_file
from generators.typescript_imports import DEFAULT_ANONYMOUS_ENUM_NAME


class EnumFormatConverter:
    """
    Handles the conversion of the enums in a schema file to a TypeScript file.
    """

    def __init__(self, input_file: str, output_dir: str, output_name: str = None, translation_tables: bool = True,
                 keep_enum_prefix: bool = False, anonymous_enum_name: str = DEFAULT_ANONYMOUS_ENUM_NAME, verbose: bool = False):
        """
        Initialize the converter with input file and output directory.

        Args:
            input_file: Path to the schema file
            output_dir: Directory where the output file will be generated
            output_name: Base name for the output file without extension (default: input filename)
            translation_tables: Whether to emit a translation table after every enum
            keep_enum_prefix: Whether to keep the shared MY_ENUM_ prefix on member names
            anonymous_enum_name: Name used for enums that have no name
            verbose: Whether to print debug information (default: False)
        """
        self.input_file = input_file
        self.output_dir = output_dir
        self.translation_tables = translation_tables
        self.keep_enum_prefix = keep_enum_prefix
        self.anonymous_enum_name = anonymous_enum_name
        self.verbose = verbose
        self.model: Optional[Model] = None

        if output_name is None:
            self.output_name = os.path.splitext(os.path.basename(input_file))[0]
        else:
            self.output_name = output_name

    def parse_input_file(self) -> bool:
        """
        Load the schema file.

        Returns:
            bool: True if loading was successful, False otherwise
        """
        if not os.path.exists(self.input_file):
            print(f"Error: Input file '{self.input_file}' does not exist.")
            return False
        try:
            self.model = load_schema_file(self.input_file, verbose=self.verbose)
        except (LarkError, ValueError) as e:
            print(f"Error: Failed to parse '{self.input_file}': {e}")
            return False
        return True

    def generate_typescript_output(self) -> bool:
        """
        Generate the TypeScript file from the loaded schema.

        Returns:
            bool: True if generation was successful, False otherwise
        """
        if not self.model:
            print("Error: No enum model available. Parse input file first.")
            return False

        os.makedirs(self.output_dir, exist_ok=True)
        out_path = os.path.join(self.output_dir, f"{self.output_name}.ts")
        try:
            write_typescript_file(
                self.model, out_path,
                translation_tables=self.translation_tables,
                keep_enum_prefix=self.keep_enum_prefix,
                anonymous_enum_name=self.anonymous_enum_name,
                verbose=self.verbose,
            )
        except ValueError as e:
            print(f"Error: Failed to generate '{out_path}': {e}")
            return False
        print(f"Generated {out_path}")
        return True


def parse_arguments(argv=None):
    """
    Parse command line arguments.

    Returns:
        argparse.Namespace: Parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Convert protobuf enum definitions to TypeScript enums and translation tables",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument('--input', '-i', required=True, help='Path to the schema file containing enum definitions')
    parser.add_argument('--output', '-o', required=True, help='Directory where the TypeScript file will be generated')
    parser.add_argument('--output-name', '-n', help='Base name for the output file without extension (default: input filename)')
    parser.add_argument('--no-translation', action='store_true', help='Do not generate translation tables')
    parser.add_argument('--keep-enum-prefix', action='store_true', help='Keep the prefix shared by all members of an enum')
    parser.add_argument('--anonymous-enum-name', default=DEFAULT_ANONYMOUS_ENUM_NAME,
                        help=f'Name used for enums without a name (default: {DEFAULT_ANONYMOUS_ENUM_NAME})')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose output for debugging')

    return parser.parse_args(argv)


def main(argv=None) -> int:
    """
    Main entry point of the script.
    """
    args = parse_arguments(argv)

    # Override with environment variables if set
    input_file = os.environ.get('EW_INPUT_FILE', args.input)
    output_dir = os.environ.get('EW_OUTPUT_DIR', args.output)
    output_name = os.environ.get('EW_OUTPUT_NAME', args.output_name)
    verbose = args.verbose or os.environ.get('EW_VERBOSE', '').lower() in ('1', 'true', 'yes')

    converter = EnumFormatConverter(
        input_file, output_dir, output_name,
        translation_tables=not args.no_translation,
        keep_enum_prefix=args.keep_enum_prefix,
        anonymous_enum_name=args.anonymous_enum_name,
        verbose=verbose,
    )

    if not converter.parse_input_file():
        return 1

    if not converter.generate_typescript_output():
        print("Enum conversion completed with errors.")
        return 1

    print("Enum conversion completed successfully.")
    return 0


if __name__ == '__main__':
    sys.exit(main())
