"""Shared fixtures for the emoji build script tests."""

import json

import pytest


def make_record(unified, sort_order, short_name=None, **extra):
    """Builds a record shaped like an entry of emoji-datasource's emoji.json."""
    record = {
        "name": (short_name or unified).upper(),
        "unified": unified,
        "non_qualified": None,
        "docomo": None,
        "au": None,
        "softbank": None,
        "google": None,
        "image": f"{unified.lower()}.png",
        "sheet_x": 0,
        "sheet_y": 0,
        "short_name": short_name or unified.lower(),
        "short_names": [short_name or unified.lower()],
        "text": None,
        "texts": None,
        "category": "Smileys & Emotion",
        "subcategory": "face-smiling",
        "sort_order": sort_order,
        "added_in": "1.0",
        "has_img_apple": True,
        "has_img_google": True,
        "has_img_twitter": True,
        "has_img_facebook": True,
    }
    record.update(extra)
    return record


@pytest.fixture
def raw_emojis():
    """A small unsorted dataset covering single, keycap, flag and ZWJ emojis."""
    return [
        make_record("1F9D1-200D-1F373", 5, "cook", category="People & Body"),
        make_record("1F600", 1, "grinning"),
        make_record("0023-FE0F-20E3", 9, "hash", non_qualified="0023-20E3", category="Symbols"),
        make_record("1F1EF-1F1F5", 7, "flag-jp", category="Flags"),
        make_record("263A-FE0F", 2, "relaxed", non_qualified="263A", text=":)", texts=[":)"]),
    ]


@pytest.fixture
def dataset_file(tmp_path, raw_emojis):
    """Writes the raw dataset to disk the way node_modules ships it."""
    path = tmp_path / "node_modules" / "emoji-datasource-google" / "emoji.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(raw_emojis), encoding="utf-8")
    return path
