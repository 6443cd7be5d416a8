"""Tests for record key builders."""

from __future__ import annotations

import pytest

from quotesync.store.keys import RecordKeys


class TestRecordKeys:
    """Tests for RecordKeys."""

    @pytest.mark.parametrize(
        "author_id,expected",
        [
            (7, "author_7"),
            ("7", "author_7"),
            ("twain", "author_twain"),
        ],
    )
    def test_author_key(self, author_id, expected: str):
        assert RecordKeys.author(author_id) == expected
