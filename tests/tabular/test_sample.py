"""
Tests for the Sample Builder and raw text acquisition.
"""

import numpy as np
import pytest

from quickfit.core.capabilities import CAPABILITY_MATERIALIZED, CAPABILITY_NORMALIZED
from quickfit.core.exceptions import (
    DimensionError,
    EmptySampleError,
    InputAcquisitionError,
    ValidationError,
)
from quickfit.core.protocols import DataSource
from quickfit.tabular.parser import parse_csv
from quickfit.tabular.sample import Sample, build_sample
from quickfit.tabular.source import read_text


# ═══════════════════════════════════════════════════════════════════════
# Cleaning
# ═══════════════════════════════════════════════════════════════════════


class TestBuildSample:

    def test_perfect_line(self, perfect_line_csv):
        table = parse_csv(perfect_line_csv)
        sample = build_sample(table.rows, "x", "y")
        assert len(sample) == 4
        assert sample.pairs() == [(1.0, 3.0), (2.0, 5.0), (3.0, 7.0), (4.0, 9.0)]
        assert sample.n_dropped == 0

    def test_bad_rows_dropped_order_kept(self):
        text = "x,y\n1,10\nfoo,20\n3,\n4,Infinity\n5,50\n-Infinity,60\n7,70"
        table = parse_csv(text)
        sample = build_sample(table.rows, "x", "y")
        assert sample.pairs() == [(1.0, 10.0), (5.0, 50.0), (7.0, 70.0)]
        assert sample.n_rows == 7
        assert sample.n_dropped == 4

    def test_every_pair_finite(self, mixed_csv):
        table = parse_csv(mixed_csv)
        sample = build_sample(table.rows, "id", "weight")
        assert np.all(np.isfinite(sample.x))
        assert np.all(np.isfinite(sample.y))
        assert len(sample) <= table.n_rows
        assert 9.0 not in sample.x

    def test_lenient_prefix_used(self):
        table = parse_csv("x,y\n1kg,2m\n2kg,4m")
        sample = build_sample(table.rows, "x", "y")
        np.testing.assert_array_equal(sample.y, [2.0, 4.0])

    def test_strict_mode_drops_prefix_cells(self):
        table = parse_csv("x,y\n1kg,2\n2,4")
        sample = build_sample(table.rows, "x", "y", parsing="strict")
        assert sample.pairs() == [(2.0, 4.0)]

    def test_empty_result_is_error(self):
        table = parse_csv("x,y\na,1\n2,b\n,")
        with pytest.raises(EmptySampleError, match="no numeric pairs after cleaning") as info:
            build_sample(table.rows, "x", "y")
        assert info.value.n_rows == 3
        assert info.value.x_column == "x"

    def test_no_rows_is_error(self):
        with pytest.raises(EmptySampleError):
            build_sample((), "x", "y")


# ═══════════════════════════════════════════════════════════════════════
# Sample container
# ═══════════════════════════════════════════════════════════════════════


class TestSample:

    def test_from_arrays(self):
        sample = Sample.from_arrays([1, 2], [3, 4], x_column="a", y_column="b")
        assert sample.n_observations == 2
        assert sample.metadata == {
            'x_column': 'a', 'y_column': 'b', 'n_rows': 2, 'n_dropped': 0,
        }

    def test_arrays_read_only(self):
        sample = Sample.from_arrays([1, 2], [3, 4])
        with pytest.raises(ValueError):
            sample.x[0] = 99.0

    def test_caller_array_untouched(self):
        x = np.array([1.0, 2.0])
        Sample.from_arrays(x, [3, 4])
        x[0] = 5.0

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            Sample.from_arrays([1, np.nan], [3, 4])

    def test_length_mismatch(self):
        with pytest.raises(DimensionError):
            Sample.from_arrays([1, 2, 3], [3, 4])

    def test_datasource_protocol(self):
        sample = Sample.from_arrays([1, 2], [3, 4])
        assert isinstance(sample, DataSource)
        assert sample.supports(CAPABILITY_MATERIALIZED)
        assert not sample.supports(CAPABILITY_NORMALIZED)
        assert not sample.supports("no_such_capability")


# ═══════════════════════════════════════════════════════════════════════
# Input acquisition
# ═══════════════════════════════════════════════════════════════════════


class TestReadText:

    def test_reads_utf8(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("nome,preço\n1,2\n", encoding="utf-8")
        assert read_text(path) == "nome,preço\n1,2\n"

    def test_missing_file(self, tmp_path):
        path = tmp_path / "games.csv"
        with pytest.raises(InputAcquisitionError, match="file not found") as info:
            read_text(path)
        assert info.value.path == str(path)
        assert "Check the path" in str(info.value)

    def test_directory(self, tmp_path):
        with pytest.raises(InputAcquisitionError):
            read_text(tmp_path)

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.csv"
        path.write_bytes("a,b\n\xe9,1\n".encode("latin-1"))
        with pytest.raises(InputAcquisitionError, match="utf-8"):
            read_text(path)
