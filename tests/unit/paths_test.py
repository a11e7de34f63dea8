"""Tests for provider location → index path mapping."""

from __future__ import annotations

import pytest

from drive_index.core.paths import encode_path_segments, encode_uri_component, map_absolute_path

MARKER = "/Documents"
BASE = "https://contoso-my.sharepoint.com/personal/demo/Documents"


class TestMapAbsolutePath:
    @pytest.mark.parametrize(
        "location",
        [
            "https://contoso-my.sharepoint.com/personal/demo/Shared/a.txt",
            "/drive/root:/a.txt",
            "",
        ],
        ids=["other-library", "drive-root", "empty"],
    )
    def test_location_without_marker_maps_to_empty(self, location: str) -> None:
        assert map_absolute_path(location, MARKER) == ""

    def test_plain_path(self) -> None:
        assert map_absolute_path(f"{BASE}/public/b.txt", MARKER) == "/public/b.txt"

    def test_hash_is_percent_encoded(self) -> None:
        assert map_absolute_path(f"{BASE}/notes/#1.md", MARKER) == "/notes/%231.md"

    def test_spaces_and_unicode_are_encoded(self) -> None:
        assert map_absolute_path(f"{BASE}/my docs/café.txt", MARKER) == "/my%20docs/caf%C3%A9.txt"

    def test_already_encoded_segment_is_unchanged(self) -> None:
        assert map_absolute_path(f"{BASE}/my%20docs/a%23b.txt", MARKER) == "/my%20docs/a%23b.txt"

    def test_mapping_is_idempotent_on_encoded_segments(self) -> None:
        once = map_absolute_path(f"{BASE}/x #y/z", MARKER)
        twice = map_absolute_path(f"{BASE}{once}", MARKER)
        assert twice == once

    def test_everything_after_first_marker_is_kept(self) -> None:
        assert map_absolute_path(f"{BASE}/a/Documents/b", MARKER) == "/a/Documents/b"

    def test_marker_at_end_maps_to_empty_path(self) -> None:
        assert map_absolute_path(BASE, MARKER) == ""


class TestEncoding:
    def test_uri_component_keeps_js_safe_characters(self) -> None:
        assert encode_uri_component("a-b_c.d!e~f*g'h(i)") == "a-b_c.d!e~f*g'h(i)"

    def test_uri_component_encodes_slash(self) -> None:
        assert encode_uri_component("a/b") == "a%2Fb"

    def test_path_segments_keep_slashes(self) -> None:
        assert encode_path_segments("/my docs/#1") == "/my%20docs/%231"
