"""Tests for category, title, namespace and scroll handlers."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from DynamicPageList.collaborators import MappingRequest, StaticCategoryTree, WikiContext
from DynamicPageList.core.selector import Selector
from DynamicPageList.core.settings import EngineSettings
from DynamicPageList.processor import ParameterProcessor


class _QuietDiagnostics:
    def set_verbosity(self, level: int) -> None:
        pass


def _make_processor(*, settings: EngineSettings | None = None, **wiki_kwargs) -> ParameterProcessor:
    wiki_kwargs.setdefault("diagnostics", _QuietDiagnostics())
    return ParameterProcessor(wiki=WikiContext(**wiki_kwargs), settings=settings)


class TestCategoryHandler(unittest.TestCase):
    def setUp(self) -> None:
        tree = StaticCategoryTree(
            {
                "Animals": ["Mammals", "Birds"],
                "Mammals": ["Cats", "Dogs"],
                "Birds": ["Owls", "Cats"],
            }
        )
        self.processor = _make_processor(categories=tree)
        self.spec = self.processor.new_specification()

    def test_headings_and_or_buckets_accumulate(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "category", "+Animals|Plants"))
        self.assertTrue(self.processor.process(self.spec, "category", "-Minerals"))
        category = self.spec.get("category")
        self.assertEqual(set(category.OR), {"Animals", "Plants", "Minerals"})
        self.assertEqual(category.AND, ())
        self.assertEqual(set(self.spec.get("catheadings")), {"Animals", "Plants"})
        self.assertEqual(self.spec.get("catnotheadings"), ["Minerals"])
        self.assertTrue(self.spec.is_open_references_conflict())

    def test_ampersand_forces_and(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "category", "A&B"))
        category = self.spec.get("category")
        self.assertEqual(category.AND, ("A", "B"))
        self.assertEqual(category.OR, ())

    def test_encoded_ampersand_is_and(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "category", "A&amp;B"))
        self.assertEqual(self.spec.get("category").AND, ("A", "B"))

    def test_names_are_canonicalized(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "category", "living things"))
        self.assertEqual(self.spec.get("category").OR, ("Living_things",))

    def test_subcategory_expansion(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "category", "*Animals"))
        self.assertEqual(self.spec.get("category").OR, ("Mammals", "Birds"))

    def test_second_level_expansion(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "category", "**Animals"))
        self.assertEqual(self.spec.get("category").OR, ("Cats", "Dogs", "Owls"))

    def test_uncategorized(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "category", "_none_"))
        self.assertEqual(self.spec.get("category").OR, ("",))
        self.assertTrue(self.spec.get("includeuncat"))

    def test_empty_input_fails(self) -> None:
        self.assertFalse(self.processor.process(self.spec, "category", "   "))
        self.assertEqual(self.spec.get("category"), Selector())
        self.assertFalse(self.spec.is_open_references_conflict())

    def test_zero_resolved_categories_fails(self) -> None:
        self.assertFalse(self.processor.process(self.spec, "category", "*Nothing"))
        self.assertFalse(self.processor.process(self.spec, "category", "Bad<name>"))
        self.assertEqual(self.spec.get("category"), Selector())

    def test_pattern_variants(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "categoryregexp", "Anim.*"))
        self.assertTrue(self.processor.process(self.spec, "categorymatch", "A%|B%"))
        self.assertTrue(self.processor.process(self.spec, "notcategorymatch", "Stub%"))
        self.assertTrue(self.processor.process(self.spec, "notcategoryregexp", "^Draft"))
        self.assertEqual(self.spec.get("category").regexp, ("Anim.*",))
        self.assertEqual(self.spec.get("category").like, ("A%", "B%"))
        self.assertEqual(self.spec.get("notcategory").like, ("Stub%",))
        self.assertEqual(self.spec.get("notcategory").regexp, ("^Draft",))
        self.assertTrue(self.spec.is_open_references_conflict())

    def test_notcategory(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "notcategory", "Stubs"))
        self.assertEqual(self.spec.get("notcategory").OR, ("Stubs",))
        self.assertFalse(self.processor.process(self.spec, "notcategory", "[[x]]"))


class TestTitleHandlers(unittest.TestCase):
    def setUp(self) -> None:
        self.processor = _make_processor()
        self.spec = self.processor.new_specification()

    def test_exact_title_narrows_query(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "title", "Help:Getting started"))
        self.assertEqual(self.spec.get("title").OR, ("Getting_started",))
        self.assertEqual(self.spec.get("namespace"), [12])
        self.assertEqual(self.spec.get("mode"), "userformat")
        self.assertEqual(self.spec.get("ordermethod"), [])
        self.assertTrue(self.spec.is_selection_criteria_found())
        self.assertTrue(self.spec.is_open_references_conflict())

    def test_title_replaces_earlier_namespace_filter(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "namespace", "Help"))
        self.assertTrue(self.processor.process(self.spec, "title", "Foo"))
        self.assertEqual(self.spec.get("namespace"), [0])

    def test_repeated_titles_collect_their_namespaces(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "title", "Foo"))
        self.assertTrue(self.processor.process(self.spec, "title", "Help:Bar"))
        self.assertTrue(self.processor.process(self.spec, "title", "Baz"))
        self.assertEqual(self.spec.get("title").OR, ("Foo", "Bar", "Baz"))
        self.assertEqual(self.spec.get("namespace"), [0, 12])

    def test_invalid_title_keeps_namespace_filter(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "namespace", "Help"))
        self.assertFalse(self.processor.process(self.spec, "title", "Bad|Title"))
        self.assertEqual(self.spec.get("namespace"), [12])

    def test_invalid_title_fails(self) -> None:
        self.assertFalse(self.processor.process(self.spec, "title", ""))
        self.assertEqual(self.spec.get("mode"), "unordered")
        self.assertFalse(self.spec.is_selection_criteria_found())

    def test_pattern_variants_escape_spaces(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "titleregexp", "Foo bar|Baz"))
        self.assertTrue(self.processor.process(self.spec, "titlematch", "A b%"))
        self.assertEqual(self.spec.get("title").regexp, ("Foo\\_bar", "Baz"))
        self.assertEqual(self.spec.get("title").like, ("A\\_b%",))
        self.assertTrue(self.spec.is_selection_criteria_found())
        self.assertFalse(self.spec.is_open_references_conflict())

    def test_negated_variants(self) -> None:
        self.assertTrue(self.processor.process(self.spec, "nottitleregexp", "^Old "))
        self.assertTrue(self.processor.process(self.spec, "nottitlematch", "%draft%"))
        self.assertTrue(self.processor.process(self.spec, "nottitle", "Sandbox page"))
        nottitle = self.spec.get("nottitle")
        self.assertEqual(nottitle.regexp, ("^Old\\_",))
        self.assertEqual(nottitle.like, ("%draft%",))
        self.assertEqual(nottitle.OR, ("Sandbox_page",))


class TestNamespaceHandlers(unittest.TestCase):
    def test_namespaces_merge_without_duplicates(self) -> None:
        processor = _make_processor()
        spec = processor.new_specification()
        self.assertTrue(processor.process(spec, "namespace", "Help|Project"))
        self.assertTrue(processor.process(spec, "namespace", "help"))
        self.assertEqual(spec.get("namespace"), [12, 4])
        self.assertTrue(spec.is_selection_criteria_found())

    def test_main_namespace(self) -> None:
        processor = _make_processor()
        spec = processor.new_specification()
        self.assertTrue(processor.process(spec, "namespace", ""))
        self.assertEqual(spec.get("namespace"), [0])

    def test_unknown_namespace_rejects_whole_list(self) -> None:
        processor = _make_processor()
        spec = processor.new_specification()
        self.assertFalse(processor.process(spec, "namespace", "Help|Bogus"))
        self.assertEqual(spec.get("namespace"), [])
        self.assertFalse(spec.is_selection_criteria_found())

    def test_allowed_namespaces(self) -> None:
        processor = _make_processor(settings=EngineSettings(allowed_namespaces=("Help",)))
        spec = processor.new_specification()
        self.assertFalse(processor.process(spec, "namespace", "Help|Project"))
        self.assertTrue(processor.process(spec, "namespace", "Help"))
        self.assertTrue(processor.process(spec, "notnamespace", "Project"))
        self.assertEqual(spec.get("notnamespace"), [4])


class TestScrollHandler(unittest.TestCase):
    def test_request_values_are_applied(self) -> None:
        request = MappingRequest(
            {
                "DPL_findTitle": "foo bar",
                "DPL_fromTitle": "ignored",
                "DPL_toTitle": "zeta page",
                "DPL_scrollDir": "down",
                "DPL_count": "25",
            }
        )
        processor = _make_processor(request=request)
        spec = processor.new_specification()
        self.assertTrue(processor.process(spec, "scroll", "yes"))
        self.assertIs(spec.get("scroll"), True)
        self.assertEqual(spec.get("titlegt"), "=_Foo_bar")
        self.assertEqual(spec.get("titlelt"), "Zeta_page")
        self.assertEqual(spec.get("scrolldir"), "down")
        self.assertEqual(spec.get("count"), 25)

    def test_from_title_without_find_title(self) -> None:
        processor = _make_processor(request=MappingRequest({"DPL_fromTitle": "apple"}))
        spec = processor.new_specification()
        self.assertTrue(processor.process(spec, "scroll", "on"))
        self.assertEqual(spec.get("titlegt"), "Apple")
        self.assertEqual(spec.get("titlelt"), "")
        self.assertIsNone(spec.get("count"))

    def test_disabled_scroll_always_succeeds(self) -> None:
        processor = _make_processor(request=MappingRequest({"DPL_fromTitle": "apple"}))
        spec = processor.new_specification()
        self.assertTrue(processor.process(spec, "scroll", "no"))
        self.assertTrue(processor.process(spec, "scroll", "whatever"))
        self.assertIs(spec.get("scroll"), False)
        self.assertEqual(spec.get("titlegt"), "")


if __name__ == "__main__":
    unittest.main()
