import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from gpx_fixtures import equator_run, utc, write_route

from route_summary.cli import main


class CliTests(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.temp_dir.name)
        self.routes = self.root / "workout-routes"
        self.routes.mkdir()

    def tearDown(self):
        self.temp_dir.cleanup()

    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        code = 0
        with redirect_stdout(out), redirect_stderr(err):
            try:
                main(list(argv))
            except SystemExit as e:
                code = e.code
        return code, out.getvalue(), err.getvalue()

    def test_year_is_required(self):
        code, _out, err = self._run("-d", str(self.routes))
        self.assertEqual(code, 1)
        self.assertIn("--year", err)

    def test_missing_directory(self):
        code, _out, err = self._run("-y", "2023", "-d", str(self.root / "missing"))
        self.assertEqual(code, 1)
        self.assertIn("does not exist", err)

    def test_year_without_workouts(self):
        write_route(self.routes, "route_2022-05-01_7.00am.gpx", [equator_run(utc(2022, 5, 1, 7), 3)])

        code, out, _err = self._run("--year", "2023", "--dir", str(self.routes))

        self.assertEqual(code, 0)
        self.assertIn("No workouts found for year 2023", out)

    def test_report_and_csv_export(self):
        write_route(self.routes, "route_2023-01-05_7.00am.gpx", [equator_run(utc(2023, 1, 5, 7), 5)])
        write_route(self.routes, "route_2023-02-10_6.00pm.gpx", [equator_run(utc(2023, 2, 10, 18), 5)])
        export_dir = self.root / "exports"

        code, out, _err = self._run("-y", "2023", "-d", str(self.routes), "--csv", str(export_dir))

        self.assertEqual(code, 0)
        self.assertIn("Workout days: 2", out)
        self.assertIn("2023-01", out)
        self.assertTrue(os.path.isfile(export_dir / "route_summary_2023.csv"))


if __name__ == "__main__":
    unittest.main()
