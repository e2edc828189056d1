import json
import os
import tempfile
import unittest

from SampleChart.ChartOptions import ChartOptions, load_options
from SampleChart.DataSource import DataSource, Sample


class TestChartOptions(unittest.TestCase):
    def test_defaults(self):
        opts = ChartOptions()
        self.assertEqual(opts.transparency, 1.0)
        self.assertEqual(opts.icon, "point")
        self.assertEqual(opts.hover_color, "white")
        self.assertEqual(opts.min_scale, 0.02)
        self.assertEqual(opts.max_scale, 2.0)

    def test_derived_margin_and_hit_radius(self):
        opts = ChartOptions(size=220)
        self.assertAlmostEqual(opts.margin, 24.2)
        self.assertAlmostEqual(opts.hit_radius, 12.1)

    def test_from_dict_accepts_original_names(self):
        opts = ChartOptions.from_dict({
            "size": 300,
            "axesLabels": ["kg", "cm"],
            "styles": {"car": {"color": "red"}},
            "icon": "text",
            "transparency": 0.7,
            "unknown": 123,
        })
        self.assertEqual(opts.size, 300)
        self.assertEqual(opts.axes_labels, ("kg", "cm"))
        self.assertEqual(opts.icon, "text")
        self.assertEqual(opts.transparency, 0.7)

    def test_missing_transparency_defaults_to_opaque(self):
        opts = ChartOptions.from_dict({"size": 100, "transparency": None})
        self.assertEqual(opts.transparency, 1.0)

    def test_validate_rejects_bad_values(self):
        with self.assertRaises(ValueError):
            ChartOptions(size=0).validate()
        with self.assertRaises(ValueError):
            ChartOptions(transparency=0).validate()
        with self.assertRaises(ValueError):
            ChartOptions(transparency=1.5).validate()
        with self.assertRaises(ValueError):
            ChartOptions(icon="star").validate()

    def test_load_options_from_json(self):
        data = {"size": 250, "axesLabels": ["a", "b"], "styles": {"x": {"color": "blue"}}}
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "options.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump(data, f)
            opts = load_options(path)
        self.assertEqual(opts.size, 250)
        self.assertEqual(opts.styles["x"]["color"], "blue")


class TestDataSource(unittest.TestCase):
    def test_accepts_samples_mappings_and_pairs(self):
        ds = DataSource([
            Sample(point=(1, 2), label="a"),
            {"point": [3, 4], "label": "b"},
            ((5, 6), "c"),
        ])
        self.assertEqual(ds.size(), 3)
        self.assertEqual(ds.get().shape, (3, 2))
        self.assertEqual(ds.labels(), ["a", "b", "c"])
        self.assertEqual(ds[1].point, (3.0, 4.0))

    def test_points_are_read_only(self):
        ds = DataSource([((1, 2), "a")])
        with self.assertRaises(ValueError):
            ds.get()[0, 0] = 99

    def test_empty(self):
        ds = DataSource(None)
        self.assertEqual(len(ds), 0)
        self.assertEqual(ds.get().shape, (0, 2))

    def test_rejects_unknown_records(self):
        with self.assertRaises(TypeError):
            DataSource([42])

    def test_index_of_prefers_identity(self):
        a = Sample(point=(1, 1), label="a")
        twin = Sample(point=(1, 1), label="a")
        ds = DataSource([twin, a])
        self.assertEqual(ds.index_of(a), 1)
        self.assertEqual(ds.index_of(Sample(point=(1, 1), label="a")), 0)
        self.assertIsNone(ds.index_of(Sample(point=(9, 9), label="z")))
        self.assertIsNone(ds.index_of(None))

    def test_sample_is_immutable(self):
        s = Sample(point=(1, 2), label="a")
        with self.assertRaises(AttributeError):
            s.label = "b"


if __name__ == "__main__":
    unittest.main(verbosity=2)
