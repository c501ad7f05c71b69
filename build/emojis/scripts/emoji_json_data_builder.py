# ./scripts/emoji_json_data_builder.py
import argparse
import json
import math
import numbers
import sys
from pathlib import Path

from emoji_json_unified_decoder import InvalidCodePointError, decode_unified

# --- Configuration Section ---
# Paths are relative to the directory the build is run from (the project root).
CONFIG_FILE_PATH = Path('emoji_build_config.json')

# Hardcoded defaults. These are used if emoji_build_config.json is missing or incomplete.
INTERNAL_DEFAULTS = {
    "input": "node_modules/emoji-datasource-google/emoji.json",
    "output": "src/emoji.json",
    "indent": 2,
}

# Properties that are not required in the final emoji data.
UNNECESSARY_PROPERTIES = frozenset({
    'text',
    'texts',
    'sort_order',
    'added_in',
    'has_img_apple',
    'has_img_google',
    'has_img_twitter',
    'has_img_facebook',
    'has_img_messenger',
    'non_qualified',
    'docomo',
    'au',
    'softbank',
    'google',
})


class InvalidEmojiRecordError(ValueError):
    """Raised when the source dataset does not have the expected shape."""


# --- Helper Functions ---
def load_and_merge_config(config_path=CONFIG_FILE_PATH):
    """Loads default paths and indentation with a clear priority."""
    effective_defaults = INTERNAL_DEFAULTS.copy()
    if not config_path.exists():
        print(f"INFO: No '{config_path}' found. Using internal defaults.")
        return effective_defaults

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            user_config = json.load(f)
        user_paths = user_config.get("default_paths", {})
        for key in ("input", "output"):
            if key not in user_paths:
                continue
            if isinstance(user_paths[key], str) and user_paths[key]:
                effective_defaults[key] = user_paths[key]
            else:
                print(f"Warning: Ignoring '{key}' in '{config_path}': expected a non-empty path string.", file=sys.stderr)
        if "indent" in user_config:
            indent = user_config["indent"]
            if isinstance(indent, int) and not isinstance(indent, bool) and indent >= 0:
                effective_defaults["indent"] = indent
            else:
                print(f"Warning: Ignoring 'indent' in '{config_path}': expected a non-negative integer.", file=sys.stderr)
        print(f"INFO: Loaded custom defaults from '{config_path}'")
    except json.JSONDecodeError:
        print(f"Warning: Could not parse '{config_path}'. Using internal defaults.", file=sys.stderr)
        return INTERNAL_DEFAULTS.copy()
    except (OSError, AttributeError, TypeError, ValueError) as e:
        print(f"Warning: Error reading '{config_path}'. Using internal defaults. Error: {e}", file=sys.stderr)
        return INTERNAL_DEFAULTS.copy()
    return effective_defaults


def load_emoji_data(input_path):
    """Reads the raw emoji dataset. Missing files and invalid JSON are left to the caller."""
    with open(input_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def describe_record(record, index):
    short_name = record.get("short_name") if isinstance(record, dict) else None
    if short_name:
        return f"record {index} ('{short_name}')"
    return f"record {index}"


def validate_emoji_record(record, index):
    """Checks that a record carries the two fields the build depends on."""
    if not isinstance(record, dict):
        raise InvalidEmojiRecordError(f"{describe_record(record, index)} is not an object.")

    unified = record.get("unified")
    if not isinstance(unified, str):
        raise InvalidEmojiRecordError(f"{describe_record(record, index)} is missing a valid 'unified' string.")

    sort_order = record.get("sort_order")
    # bool is a subclass of int, so it has to be excluded explicitly.
    if isinstance(sort_order, bool) or not isinstance(sort_order, numbers.Real):
        raise InvalidEmojiRecordError(f"{describe_record(record, index)} is missing a numeric 'sort_order'.")
    # json.load accepts NaN and Infinity, which would break the ordering.
    if not math.isfinite(sort_order):
        raise InvalidEmojiRecordError(f"{describe_record(record, index)} has a non-finite 'sort_order' ({sort_order}).")


def sort_emoji_records(records):
    """Returns the records ordered by 'sort_order'. The sort is stable, so ties keep their input order."""
    return sorted(records, key=lambda record: record["sort_order"])


def transform_emoji_record(record):
    """
    Builds the trimmed output object for one emoji.

    Every property not listed in UNNECESSARY_PROPERTIES is copied in its
    original order, and the decoded 'char' is added. The input is not modified.
    """
    trimmed = {key: value for key, value in record.items() if key not in UNNECESSARY_PROPERTIES}
    trimmed["char"] = decode_unified(record["unified"])
    return trimmed


def transform_emoji_data(records):
    """
    Processes the raw emoji data by:
    1. Validating every record.
    2. Sorting the emojis based on the 'sort_order' property.
    3. Converting 'unified' to its character(s) and dropping unnecessary properties.
    """
    if not isinstance(records, list):
        raise InvalidEmojiRecordError("Top-level structure of the emoji dataset is not a list.")

    for index, record in enumerate(records):
        validate_emoji_record(record, index)

    return [transform_emoji_record(record) for record in sort_emoji_records(records)]


def serialize_emoji_data(records, indent=2):
    """Pretty-prints the data, keeping emoji characters literal instead of \\uXXXX escapes."""
    return json.dumps(records, indent=indent, ensure_ascii=False)


def write_emoji_data(records, output_path, indent=2):
    """Replaces the output file with the serialized data."""
    output_path = Path(output_path)
    # Serialize and encode before touching the disk so a failure leaves the old file alone.
    content = serialize_emoji_data(records, indent).encode('utf-8')

    if output_path.exists():
        output_path.unlink()
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'wb') as f:
        f.write(content)


def main(argv=None):
    final_defaults = load_and_merge_config()

    parser = argparse.ArgumentParser(
        description="Builds the trimmed emoji data file from the emoji-datasource dataset."
    )
    parser.add_argument(
        "-i", "--input",
        dest="input_file",
        type=Path,
        default=Path(final_defaults["input"]),
        help=f"Path to the raw emoji dataset. Default is '{final_defaults['input']}'."
    )
    parser.add_argument(
        "-o", "--output",
        dest="output_file",
        type=Path,
        default=Path(final_defaults["output"]),
        help=f"Path of the generated file. Default is '{final_defaults['output']}'."
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=final_defaults["indent"],
        help="The number of spaces to use for indentation in the output JSON. Default is 2."
    )

    args = parser.parse_args(argv)

    # --- 1. Load the raw dataset ---
    print(f"Loading '{args.input_file}'...")
    try:
        raw_data = load_emoji_data(args.input_file)
    except FileNotFoundError:
        print(f"Error: Source file not found at '{args.input_file}'", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Could not parse JSON from '{args.input_file}'. Details: {e}", file=sys.stderr)
        sys.exit(1)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Could not read source file '{args.input_file}'. Error: {e}", file=sys.stderr)
        sys.exit(1)

    # --- 2. Sort, decode and trim ---
    print("Sorting emojis and converting unified code points...")
    try:
        processed = transform_emoji_data(raw_data)
    except (InvalidEmojiRecordError, InvalidCodePointError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    print(f"  > Processed {len(processed)} emojis.")

    # --- 3. Replace the output file ---
    try:
        write_emoji_data(processed, args.output_file, args.indent)
    except (TypeError, ValueError) as e:
        # UnicodeEncodeError (e.g. a lone surrogate in a copied field) is a ValueError.
        print(f"Error: Could not serialize the emoji data. Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Could not write to destination file '{args.output_file}'. Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"\n✅ Success! Wrote {len(processed)} emojis to '{args.output_file}'")


if __name__ == "__main__":
    main()
