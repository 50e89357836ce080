"""Tests for the `dpl parse` command."""

import json
import sys
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DynamicPageList.cli.ui import cli


_CONFIG_YAML = """
log:
  level: ERROR
  to_file: false
  dir: log

wiki:
  functional_richness: 4
  max_result_count: 500
  allow_unlimited_results: false
  allowed_namespaces: null
  article_label: Article
  category_tree: {}

parser:
  on_unknown_parameter: warn
  on_invalid_value: warn
"""


def _payload(output: str) -> dict:
    # Console log records may precede the JSON document.
    return json.loads(output[output.index("{\n"):])


class TestParseCommand(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.config_path = Path(self._tmp.name) / "config.yml"
        self.config_path.write_text(_CONFIG_YAML, encoding="utf-8")
        self.runner = CliRunner()

    def _invoke(self, directive: str, *extra: str):
        return self.runner.invoke(
            cli,
            ["--config", str(self.config_path), "parse", *extra, "-"],
            input=directive,
        )

    def test_parse_from_stdin(self) -> None:
        result = self._invoke("category=A&B\nnamespace=Help\n")
        self.assertEqual(result.exit_code, 0, result.output)
        payload = _payload(result.output)
        self.assertEqual(payload["values"]["category"]["AND"], ["A", "B"])
        self.assertEqual(payload["values"]["namespace"], [12])
        self.assertTrue(payload["selection_criteria_found"])
        self.assertEqual(payload["processed"], ["category", "namespace"])
        self.assertEqual(payload["issues"], [])

    def test_issues_are_reported(self) -> None:
        result = self._invoke("mode=none\nfrobnicate=1\n")
        self.assertEqual(result.exit_code, 0, result.output)
        payload = _payload(result.output)
        self.assertEqual([issue["kind"] for issue in payload["issues"]], ["unknown", "noselection"])

    def test_request_arguments_reach_scroll(self) -> None:
        result = self._invoke("category=A\nscroll=yes\n", "--request", "DPL_fromTitle=foo bar")
        self.assertEqual(result.exit_code, 0, result.output)
        payload = _payload(result.output)
        self.assertEqual(payload["values"]["titlegt"], "Foo_bar")

    def test_malformed_request_argument(self) -> None:
        result = self._invoke("category=A\n", "--request", "DPL_fromTitle")
        self.assertNotEqual(result.exit_code, 0)

    def test_permission_required(self) -> None:
        result = self._invoke("category=A\ndeleterules=yes\n")
        self.assertNotEqual(result.exit_code, 0)

    def test_permission_granted(self) -> None:
        result = self._invoke("category=A\ndeleterules=yes\n", "--grant", "dpl_param_delete_rules")
        self.assertEqual(result.exit_code, 0, result.output)
        payload = _payload(result.output)
        self.assertIs(payload["values"]["deleterules"], True)


if __name__ == "__main__":
    unittest.main()
