"""Tests for opt-in scan profiling."""

from tablitas.compiler import compile_byte_table, table_label
from tablitas.driver import generate
from tablitas.encoding import ASCII
from tablitas.flags import Category
from tablitas.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from tablitas.ranges import compress, compress_all


class TestScanAccumulator:
    """Recording and summary."""

    def test_record_scan(self) -> None:
        acc = ScanAccumulator()
        acc.record_scan("alpha", 100, 3)
        acc.record_scan("alpha", 50, 1)
        acc.record_byte_table(256)
        summary = acc.summary()
        assert summary["classify_calls"] == 406
        assert summary["byte_tables"] == 1
        assert summary["ranges"] == {"alpha": 4}
        assert summary["total_ms"] >= 0


class TestProfiledScan:
    """Context manager installs and removes the accumulator."""

    def test_disabled_by_default(self) -> None:
        assert get_scan_accumulator() is None

    def test_context(self) -> None:
        with profiled_scan() as metrics:
            assert get_scan_accumulator() is metrics
        assert get_scan_accumulator() is None

    def test_byte_table_recorded(self) -> None:
        with profiled_scan() as metrics:
            table = compile_byte_table(ASCII)
            table_label(table)
        assert metrics.byte_tables == 1
        assert metrics.classify_calls == 256

    def test_compress_recorded(self, set_classifier) -> None:
        with profiled_scan() as metrics:
            compress(set_classifier(letters={1, 3}), Category.ALPHA, domain=[(0, 9)])
        assert metrics.classify_calls == 10
        assert metrics.ranges == {"alpha": 2}

    def test_parallel_scans_recorded(self, set_classifier) -> None:
        with profiled_scan() as metrics:
            compress_all(set_classifier(letters={1}), domain=[(0, 9)], workers=3)
        assert metrics.classify_calls == 30
        assert metrics.ranges == {"alpha": 1, "alnum": 1, "isupper": 0}

    def test_generate(self) -> None:
        with profiled_scan() as metrics:
            generate("utf-8", domain=[(0x100, 0x1FF)])
        assert metrics.byte_tables == 1
        assert metrics.classify_calls == 256 + 3 * 0x100
        assert set(metrics.ranges) == {"alpha", "alnum", "isupper"}
