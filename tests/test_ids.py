"""Tests for rule id generation."""

import re
import time

from cssedit.ids import _to_base36, generate_id


class TestBase36:
    def test_zero(self):
        assert _to_base36(0) == "0"

    def test_small_numbers(self):
        assert _to_base36(35) == "z"
        assert _to_base36(36) == "10"

    def test_matches_int_parsing(self):
        for n in (1, 1234, 987654321, 2**53 - 1):
            assert int(_to_base36(n), 36) == n


class TestGenerateId:
    def test_lowercase_base36_only(self):
        assert re.fullmatch(r"[0-9a-z]+", generate_id())

    def test_prefix_is_current_time(self):
        before = time.time_ns() // 1_000_000
        value = generate_id()
        after = time.time_ns() // 1_000_000
        prefix_len = len(_to_base36(before))
        assert before <= int(value[:prefix_len], 36) <= after

    def test_ids_do_not_collide_in_a_session(self):
        ids = {generate_id() for _ in range(5000)}
        assert len(ids) == 5000
