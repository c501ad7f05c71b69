# ./scripts/emoji_json_output_verifier.py
import argparse
import json
import pathlib
import sys

from emoji_json_data_builder import INTERNAL_DEFAULTS, UNNECESSARY_PROPERTIES, serialize_emoji_data

# --- Configuration ---
INPUT_FILE = pathlib.Path(INTERNAL_DEFAULTS["output"])


def find_record_problems(record, index):
    """Returns a list of human readable problems found in a single output record."""
    if not isinstance(record, dict):
        return [f"Item at index {index} is not a dictionary/object."]

    label = f"Item {index} ('{record.get('short_name', 'N/A')}')"
    problems = []

    char = record.get("char")
    unified = record.get("unified")
    if not isinstance(char, str) or not char:
        problems.append(f"{label} is missing a non-empty 'char'.")
    if not isinstance(unified, str):
        problems.append(f"{label} is missing a valid 'unified' key.")

    if isinstance(char, str) and char and isinstance(unified, str):
        # Compare numerically so "0023" and "23" are treated the same.
        try:
            expected = [int(part, 16) for part in unified.split('-')]
        except ValueError:
            expected = None
        actual = [ord(c) for c in char]
        if expected != actual:
            codepoints = "-".join(f"{code:04X}" for code in actual)
            problems.append(f"{label} has 'char' {codepoints} which does not match unified '{unified}'.")

    leftovers = sorted(UNNECESSARY_PROPERTIES.intersection(record))
    if leftovers:
        problems.append(f"{label} still has unnecessary properties: {', '.join(leftovers)}.")

    return problems


def verify_emoji_file(filepath, indent=2):
    """Verifies the structure and formatting of the generated emoji file."""
    filepath = pathlib.Path(filepath)
    print(f"--- Verifying '{filepath.name}' ---")
    if not filepath.exists():
        print(f"❌ ERROR: File not found at '{filepath}'")
        return False

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ ERROR: Could not read or parse JSON file. Reason: {e}")
        return False

    errors = []
    if not isinstance(data, list):
        errors.append("Top-level structure is not a list.")
    else:
        for i, record in enumerate(data):
            errors.extend(find_record_problems(record, i))

        if serialize_emoji_data(data, indent) != content:
            errors.append(f"File is not formatted the way the builder writes it (indent={indent}).")

    if not errors:
        print(f"✅ SUCCESS: All {len(data)} emojis are valid.")
        return True

    print(f"\n❌ FAILED: Found {len(errors)} issues:")
    for error in errors:
        print(f"  - {error}")
    return False


def main(argv=None):
    parser = argparse.ArgumentParser(description="Verifies the generated emoji data file.")
    parser.add_argument(
        "-f", "--file",
        type=pathlib.Path,
        default=INPUT_FILE,
        help=f"Path to the generated file. Default is '{INPUT_FILE}'."
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=INTERNAL_DEFAULTS["indent"],
        help="The indentation the file is expected to use. Default is 2."
    )
    args = parser.parse_args(argv)

    if not verify_emoji_file(args.file, args.indent):
        sys.exit(1)


if __name__ == '__main__':
    main()
