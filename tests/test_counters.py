"""Tests for reading /proc/net/dev."""

import json

from netspeed.counters import parse_line, parse_stats, read_snapshot
from netspeed.data.network_speed import MAX_INTERFACES, InterfaceSample
from netspeed.selector import InterfaceSelector

from netdev import HEADER, stats_row, write_stats, write_stats_bytes


def accept_all(_name: str) -> bool:
    return True


class TestParseLine:
    """Tests for parse_line()."""

    def test_rx_and_tx_fields(self):
        sample = parse_line("  eth0: 1234 10 0 0 0 0 0 0 5678 20 0 0 0 0 0 0\n")
        assert sample == InterfaceSample(name="eth0", rx_bytes=1234, tx_bytes=5678)

    def test_counter_glued_to_colon(self):
        sample = parse_line("eth0:1234 10 0 0 0 0 0 0 5678 20 0 0 0 0 0 0")
        assert sample is not None
        assert sample.rx_bytes == 1234

    def test_line_without_colon(self):
        assert parse_line("eth0 1234 10 0 0 0 0 0 0 5678 20 0 0 0 0 0 0") is None

    def test_too_few_fields(self):
        assert parse_line("eth0: 1234 10 0 0 0 0 0 0 5678") is None

    def test_non_numeric_field(self):
        assert parse_line("eth0: 1234 10 0 0 x 0 0 0 5678 20 0 0 0 0 0 0") is None

    def test_extra_fields_are_ignored(self):
        sample = parse_line("eth0: 1 2 3 4 5 6 7 8 9 10 11 12 13 14 15 16 17 18")
        assert sample == InterfaceSample(name="eth0", rx_bytes=1, tx_bytes=9)

    def test_long_name_is_truncated(self):
        sample = parse_line(
            "averyveryverylongname: 1 0 0 0 0 0 0 0 2 0 0 0 0 0 0 0"
        )
        assert sample is not None
        assert sample.name == "averyveryverylo"
        assert len(sample.name) == 15


class TestParseStats:
    """Tests for parse_stats()."""

    def test_header_lines_are_skipped(self):
        lines = (HEADER + stats_row("eth0", 100, 200)).splitlines(keepends=True)
        snapshot = parse_stats(lines, accept_all)
        assert [s.name for s in snapshot] == ["eth0"]

    def test_selection_is_applied(self):
        text = HEADER + "".join(
            stats_row(name, 1, 1) for name in ("lo", "eth0", "docker0", "wlp2s0")
        )
        snapshot = parse_stats(text.splitlines(), InterfaceSelector())
        assert [s.name for s in snapshot] == ["eth0", "wlp2s0"]

    def test_malformed_rows_are_skipped(self):
        text = (
            HEADER
            + stats_row("eth0", 1, 2)
            + "  eth1: garbage\n"
            + "no colon here\n"
            + stats_row("eth2", 3, 4)
        )
        snapshot = parse_stats(text.splitlines(), accept_all)
        assert [s.name for s in snapshot] == ["eth0", "eth2"]

    def test_capacity_is_bounded(self):
        text = HEADER + "".join(stats_row(f"eth{i}", i, i) for i in range(40))
        snapshot = parse_stats(text.splitlines(), accept_all)
        assert len(snapshot) == MAX_INTERFACES
        assert snapshot.get("eth31") is not None
        assert snapshot.get("eth32") is None

    def test_capacity_counts_selected_interfaces_only(self):
        rows = [stats_row(f"veth{i}", 1, 1) for i in range(40)]
        rows.append(stats_row("eth0", 5, 6))
        snapshot = parse_stats((HEADER + "".join(rows)).splitlines(), InterfaceSelector())
        assert [s.name for s in snapshot] == ["eth0"]

    def test_duplicate_names_keep_first(self):
        text = HEADER + stats_row("eth0", 1, 2) + stats_row("eth0", 9, 9)
        snapshot = parse_stats(text.splitlines(), accept_all)
        assert len(snapshot) == 1
        assert snapshot.get("eth0") == InterfaceSample("eth0", 1, 2)


class TestReadSnapshot:
    """Tests for read_snapshot()."""

    def test_reads_file(self, stats_file, capsys):
        write_stats(stats_file, {"lo": (5, 5), "eth0": (1000, 500)})
        snapshot = read_snapshot(InterfaceSelector(), path=str(stats_file))
        assert snapshot is not None
        assert [s.name for s in snapshot] == ["eth0"]
        assert capsys.readouterr().out == ""

    def test_no_matching_interfaces_is_empty(self, stats_file):
        write_stats(stats_file, {"lo": (5, 5)})
        snapshot = read_snapshot(InterfaceSelector(), path=str(stats_file))
        assert snapshot is not None
        assert len(snapshot) == 0

    def test_unreadable_file_emits_error(self, stats_file, capsys):
        assert read_snapshot(InterfaceSelector(), path=str(stats_file)) is None

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0]) == {
            "text": "⚠ Error",
            "tooltip": f"Cannot open {stats_file}",
            "class": "error",
        }

    def test_undecodable_row_does_not_drop_others(self, stats_file, capsys):
        """Test a name with a non-UTF-8 byte is parsed with the rest of the file."""
        write_stats_bytes(
            stats_file,
            [
                b"  eth\xff0: 7 0 0 0 0 0 0 0 8 0 0 0 0 0 0 0\n",
                stats_row("eth0", 1000, 500).encode("utf-8"),
            ],
        )

        snapshot = read_snapshot(InterfaceSelector(), path=str(stats_file))

        assert snapshot is not None
        assert snapshot.get("eth0") == InterfaceSample("eth0", 1000, 500)
        assert snapshot.get("eth\ufffd0") == InterfaceSample("eth\ufffd0", 7, 8)
        assert capsys.readouterr().out == ""

    def test_undecodable_row_is_skipped_by_allow_list(self, stats_file):
        write_stats_bytes(
            stats_file,
            [
                b"  \xfe\xff: 7 0 0 0 0 0 0 0 8 0 0 0 0 0 0 0\n",
                stats_row("lo", 3, 4).encode("utf-8"),
            ],
        )

        snapshot = read_snapshot(InterfaceSelector(["lo"]), path=str(stats_file))

        assert snapshot is not None
        assert [s.name for s in snapshot] == ["lo"]
