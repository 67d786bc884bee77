"""Tests for rc.conf enablement parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from daemonctl.service.rcconf import is_active, is_enabled, parse_enabled


class TestParseEnabled:
    """parse_enabled decides from rc.conf text whether a service starts at boot."""

    def test_plain_assignment_is_enabled(self) -> None:
        assert parse_enabled("foo", 'foo_enable="YES"') is True

    def test_commented_assignment_is_disabled(self) -> None:
        assert parse_enabled("foo", '#foo_enable="YES"') is False

    def test_leading_space_is_enabled(self) -> None:
        assert parse_enabled("foo", '  foo_enable="YES"') is True

    def test_space_before_comment_is_disabled(self) -> None:
        assert parse_enabled("foo", '   # foo_enable="YES"') is False

    def test_unrelated_text_is_disabled(self) -> None:
        assert parse_enabled("foo", 'sshd_enable="YES"\nhostname="box"\n') is False

    def test_no_is_disabled(self) -> None:
        assert parse_enabled("foo", 'foo_enable="NO"') is False

    def test_value_is_case_insensitive(self) -> None:
        assert parse_enabled("foo", 'foo_enable="yes"') is True

    def test_name_is_case_sensitive(self) -> None:
        assert parse_enabled("foo", 'FOO_enable="YES"') is False

    def test_exact_name_after_wrong_case_on_same_line(self) -> None:
        assert parse_enabled("foo", 'FOO_enable="YES"; foo_enable="YES"') is True

    def test_longer_name_does_not_match(self) -> None:
        assert parse_enabled("foo", 'barfoo_enable="YES"') is False

    def test_name_is_matched_literally(self) -> None:
        assert parse_enabled("f.o", 'fxo_enable="YES"') is False
        assert parse_enabled("f.o", 'f.o_enable="YES"') is True

    def test_active_line_after_commented_one(self) -> None:
        text = '#foo_enable="YES"\nsshd_enable="YES"\nfoo_enable="YES"\n'
        assert parse_enabled("foo", text) is True

    def test_multiline_file(self) -> None:
        text = 'hostname="box"\nifconfig_em0="DHCP"\nfoo_enable="YES"\n'
        assert parse_enabled("foo", text) is True


class TestIsActive:
    """is_active scans the text before the assignment."""

    @pytest.mark.parametrize(
        "prefix, expected",
        [
            ("", True),
            ("   ", True),
            ("#", False),
            ("  #", False),
            ("\t#", False),
            ("x #", True),
        ],
    )
    def test_prefixes(self, prefix: str, expected: bool) -> None:
        assert is_active(prefix) is expected


class TestIsEnabled:
    """is_enabled reads the configured files."""

    def test_reads_file(self, tmp_path: Path) -> None:
        rc_conf = tmp_path / "rc.conf"
        rc_conf.write_text('foo_enable="YES"\n')
        assert is_enabled("foo", [rc_conf]) is True

    def test_missing_file_is_not_enabled(self, tmp_path: Path) -> None:
        assert is_enabled("foo", [tmp_path / "missing"]) is False

    def test_later_file_can_enable(self, tmp_path: Path) -> None:
        rc_conf = tmp_path / "rc.conf"
        rc_conf.write_text('#foo_enable="YES"\n')
        rc_local = tmp_path / "rc.conf.local"
        rc_local.write_text('foo_enable="YES"\n')
        assert is_enabled("foo", [tmp_path / "missing", rc_conf, rc_local]) is True

    def test_file_is_not_modified(self, tmp_path: Path) -> None:
        rc_conf = tmp_path / "rc.conf"
        rc_conf.write_text('foo_enable="YES"\n')
        before = rc_conf.stat().st_mtime_ns
        is_enabled("foo", [rc_conf])
        assert rc_conf.read_text() == 'foo_enable="YES"\n'
        assert rc_conf.stat().st_mtime_ns == before
