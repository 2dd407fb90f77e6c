"""Tests for the pandas bounds-frame bridge."""

import logging

import numpy as np
import pandas as pd
import pytest

from bbox2d import Rectangle, from_frame, to_frame, total_bounds


@pytest.fixture
def bounds_df():
    """Three rectangles keyed by record ID."""
    return pd.DataFrame(
        {
            "minx": [0.0, 4.0, -1.0],
            "miny": [0.0, 5.0, -1.0],
            "maxx": [2.0, 8.0, 1.5],
            "maxy": [2.0, 9.0, 1.9],
        },
        index=["r1", "r2", "r3"],
    )


class TestToFrame:
    def test_columns_and_dtype(self, rect_a, rect_b):
        df = to_frame([rect_a, rect_b])
        assert list(df.columns) == ["minx", "miny", "maxx", "maxy"]
        assert (df.dtypes == np.float64).all()
        assert df.iloc[0].tolist() == [200.0, 250.0, 350.0, 400.0]

    def test_index_labels(self, rect_a, rect_b):
        df = to_frame([rect_a, rect_b], index=["a", "b"])
        assert list(df.index) == ["a", "b"]
        assert df.loc["b", "maxx"] == 400.0

    def test_index_length_mismatch(self, rect_a):
        with pytest.raises(ValueError, match="index has 2 labels"):
            to_frame([rect_a], index=["a", "b"])

    def test_empty(self):
        df = to_frame([])
        assert df.shape == (0, 4)

    def test_logs_count(self, rect_a, caplog):
        with caplog.at_level(logging.DEBUG, logger="bbox2d.export.frame"):
            to_frame([rect_a])
        assert "Converted 1 rectangles" in caplog.text


class TestFromFrame:
    def test_rows_become_rectangles(self, bounds_df):
        rects = from_frame(bounds_df)
        assert rects == [
            Rectangle(0.0, 0.0, 2.0, 2.0),
            Rectangle(4.0, 5.0, 8.0, 9.0),
            Rectangle(-1.0, -1.0, 1.5, 1.9),
        ]

    def test_keeps_inverted_rows(self):
        df = pd.DataFrame({"minx": [2.0], "miny": [2.0], "maxx": [0.0], "maxy": [0.0]})
        assert from_frame(df) == [Rectangle(2.0, 2.0, 0.0, 0.0)]

    def test_extra_columns_ignored(self, bounds_df):
        df = bounds_df.assign(label=["x", "y", "z"])
        assert len(from_frame(df)) == 3

    def test_round_trip(self, rect_a, rect_b):
        assert from_frame(to_frame([rect_a, rect_b])) == [rect_a, rect_b]

    def test_rejects_non_dataframe(self):
        with pytest.raises(TypeError, match="pandas DataFrame"):
            from_frame(np.zeros((2, 4)))

    def test_rejects_missing_columns(self, bounds_df):
        with pytest.raises(ValueError, match="missing columns"):
            from_frame(bounds_df.drop(columns=["maxy"]))

    def test_rejects_non_numeric(self, bounds_df):
        df = bounds_df.assign(minx=["a", "b", "c"])
        with pytest.raises(TypeError, match="numeric"):
            from_frame(df)


class TestTotalBounds:
    def test_list(self):
        rects = [
            Rectangle(0.0, 0.0, 2.0, 2.0),
            Rectangle(1.7, 1.5, 5.0, 9.0),
            Rectangle(-1.0, -1.0, 1.5, 1.9),
        ]
        assert total_bounds(rects) == Rectangle(-1.0, -1.0, 5.0, 9.0)

    def test_does_not_mutate_inputs(self, rect_a, rect_b):
        before = rect_a.copy()
        total_bounds([rect_a, rect_b])
        assert rect_a == before

    def test_frame(self, bounds_df):
        assert total_bounds(bounds_df) == Rectangle(-1.0, -1.0, 8.0, 9.0)

    def test_nan_propagates_in_frame_and_list(self, bounds_df):
        df = bounds_df.copy()
        df.loc["r2", "minx"] = np.nan
        from_df = total_bounds(df)
        rects = from_frame(df)
        for result in (from_df, total_bounds(rects), total_bounds(rects[::-1])):
            assert np.isnan(result.minx)
            assert (result.miny, result.maxx, result.maxy) == (-1.0, 8.0, 9.0)

    def test_matches_union(self, rect_a, rect_b):
        assert total_bounds([rect_a, rect_b]) == rect_a | rect_b

    def test_empty_list_raises(self):
        with pytest.raises(ValueError, match="no rectangles"):
            total_bounds([])

    def test_empty_frame_raises(self, bounds_df):
        with pytest.raises(ValueError, match="empty frame"):
            total_bounds(bounds_df.iloc[0:0])
