"""Tests for the generic parameter pipeline and dispatcher."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DynamicPageList.collaborators import PageTitle, StaticPermissions, WikiContext
from DynamicPageList.core.errors import ParameterPermissionError, StructuralError
from DynamicPageList.core.selector import Selector
from DynamicPageList.processor import ParameterProcessor
from DynamicPageList.registry import ParameterRegistry


class _RecordingDiagnostics:
    def __init__(self) -> None:
        self.levels: list[int] = []

    def set_verbosity(self, level: int) -> None:
        self.levels.append(level)


def _make_processor(**wiki_kwargs) -> ParameterProcessor:
    wiki_kwargs.setdefault("diagnostics", _RecordingDiagnostics())
    return ParameterProcessor(wiki=WikiContext(**wiki_kwargs))


class TestSpecificationDefaults(unittest.TestCase):
    def test_fresh_spec_is_seeded(self) -> None:
        spec = _make_processor().new_specification()
        self.assertEqual(spec.get("mode"), "unordered")
        self.assertEqual(spec.get("ordermethod"), ["titlewithoutnamespace"])
        self.assertEqual(spec.get("defaulttemplatesuffix"), ".default")
        self.assertEqual(spec.get("category"), Selector())
        self.assertEqual(spec.get("namespace"), [])
        self.assertTrue(spec.get("distinct"))
        self.assertFalse(spec.is_selection_criteria_found())
        self.assertFalse(spec.is_open_references_conflict())

    def test_false_boolean_defaults_are_not_seeded(self) -> None:
        spec = _make_processor().new_specification()
        self.assertNotIn("ignorecase", spec)
        self.assertTrue(spec.get("escapelinks"))

    def test_specs_do_not_share_defaults(self) -> None:
        processor = _make_processor()
        first = processor.new_specification()
        first.get("namespace").append(12)
        second = processor.new_specification()
        self.assertEqual(second.get("namespace"), [])

    def test_debug_default_reaches_diagnostics(self) -> None:
        diagnostics = _RecordingDiagnostics()
        _make_processor(diagnostics=diagnostics).new_specification()
        self.assertEqual(diagnostics.levels, [2])


class TestGenericPipeline(unittest.TestCase):
    def setUp(self) -> None:
        self.processor = _make_processor()
        self.spec = self.processor.new_specification()

    def test_allowed_values_are_case_insensitive(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "order", "Descending"))
        self.assertEqual(self.spec.get("order"), "descending")

    def test_disallowed_value_keeps_previous(self) -> None:
        self.assertFalse(self.processor.process(self.spec, "order", "sideways"))
        self.assertEqual(self.spec.get("order"), "ascending")

    def test_integer_falls_back_to_default(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "offset", "abc"))
        self.assertEqual(self.spec.get("offset"), 0)
        self.assertTrue(self.processor.process(self.spec, "offset", "12.7"))
        self.assertEqual(self.spec.get("offset"), 12)

    def test_integer_without_default_fails(self) -> None:
        self.assertFalse(self.processor.process(self.spec, "titlemaxlength", "abc"))
        self.assertNotIn("titlemaxlength", self.spec)

    def test_boolean(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "ignorecase", "yes"))
        self.assertIs(self.spec.get("ignorecase"), True)
        self.assertFalse(self.processor.process(self.spec, "headingcount", "perhaps"))
        self.assertNotIn("headingcount", self.spec)

    def test_timestamp_sets_flags(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "firstrevisionsince", "2024-03-05 10:20"))
        self.assertEqual(self.spec.get("firstrevisionsince"), "20240305102000")
        self.assertTrue(self.spec.is_selection_criteria_found())
        self.assertTrue(self.spec.is_open_references_conflict())

    def test_bad_timestamp_commits_nothing(self) -> None:
        self.assertFalse(self.processor.process(self.spec, "lastrevisionbefore", "garbage"))
        self.assertNotIn("lastrevisionbefore", self.spec)
        self.assertFalse(self.spec.is_selection_criteria_found())
        self.assertFalse(self.spec.is_open_references_conflict())

    def test_page_lists_accumulate_groups(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "linksto", "Foo|Help:Bar"))
        self.assertTrue(self.processor.process(self.spec, "linksto", "baz"))
        self.assertEqual(
            self.spec.get("linksto"),
            [[PageTitle(0, "Foo"), PageTitle(12, "Bar", "Help")], [PageTitle(0, "Baz")]],
        )

    def test_page_list_keeps_case_and_rejects_bad_titles(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "linkstoexternal", "http://Example.org/*"))
        self.assertEqual(self.spec.get("linkstoexternal"), [["http://Example.org/*"]])
        self.assertFalse(self.processor.process(self.spec, "uses", "Template:Ok|Bad<title>"))
        self.assertNotIn("uses", self.spec)

    def test_pattern_captures_groups(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "categoriesminmax", "2,5"))
        self.assertEqual(self.spec.get("categoriesminmax"), ["2", "5"])
        self.assertTrue(self.processor.process(self.spec, "categoriesminmax", "3"))
        self.assertEqual(self.spec.get("categoriesminmax"), ["3", ""])
        self.assertFalse(self.processor.process(self.spec, "categoriesminmax", "x"))
        self.assertEqual(self.spec.get("categoriesminmax"), ["3", ""])

    def test_db_format_preserves_case(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "createdby", "John Doe"))
        self.assertEqual(self.spec.get("createdby"), "John_Doe")

    def test_strip_html_preserves_case(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "execandexit", "<html>Done</html>"))
        self.assertEqual(self.spec.get("execandexit"), "Done")

    def test_processed_parameters_are_recorded(self) -> None:
        self.processor.process(self.spec, "order", "descending")
        self.processor.process(self.spec, "order", "bad")
        self.processor.process(self.spec, "mode", "ordered")
        self.assertEqual(self.spec.processed_parameters, ("order", "mode"))


class TestDispatch(unittest.TestCase):
    def test_unknown_parameter(self) -> None:
        processor = _make_processor()
        spec = processor.new_specification()
        self.assertFalse(processor.process(spec, "nosuchparameter", "1"))
        self.assertEqual(spec.processed_parameters, ())

    def test_richness_hides_parameters(self) -> None:
        processor = ParameterProcessor(ParameterRegistry(richness=0), wiki=WikiContext(diagnostics=_RecordingDiagnostics()))
        spec = processor.new_specification()
        self.assertFalse(processor.process(spec, "include", "Intro"))
        self.assertTrue(processor.process(spec, "category", "Animals"))

    def test_permission_failure_is_fatal(self) -> None:
        processor = _make_processor()
        spec = processor.new_specification()
        with self.assertRaises(ParameterPermissionError) as ctx:
            processor.process(spec, "deleterules", "yes")
        self.assertEqual(ctx.exception.permission, "dpl_param_delete_rules")
        self.assertFalse(spec.was_processed("deleterules"))

    def test_permission_granted(self) -> None:
        processor = _make_processor(permissions=StaticPermissions(frozenset({"dpl_param_delete_rules"})))
        spec = processor.new_specification()
        self.assertTrue(processor.process(spec, "deleterules", "yes"))
        self.assertIs(spec.get("deleterules"), True)

    def test_custom_parameter_without_handler(self) -> None:
        with self.assertRaisesRegex(ValueError, "No handler registered"):
            ParameterProcessor(handlers={})

    def test_non_string_name(self) -> None:
        processor = _make_processor()
        spec = processor.new_specification()
        with self.assertRaises(StructuralError):
            processor.process(spec, 42, "x")

    def test_frozen_spec_rejects_writes(self) -> None:
        processor = _make_processor()
        spec = processor.new_specification().freeze()
        with self.assertRaises(StructuralError):
            processor.process(spec, "order", "descending")


if __name__ == "__main__":
    unittest.main()
