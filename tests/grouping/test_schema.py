import unittest

from pr_grouper.grouping.group_model import ChangedFile, DependencyInfo
from pr_grouper.grouping.schema import InputError, parse_changed_files, parse_dependency_graph


def _entry(**overrides):
    entry = {"filename": "src/a.ts", "status": "modified", "changes": 2, "additions": 1, "deletions": 1}
    entry.update(overrides)
    return entry


class TestParseChangedFiles(unittest.TestCase):
    def test_parses_list(self) -> None:
        self.assertEqual(parse_changed_files([_entry()]), [ChangedFile("src/a.ts", "modified", 2, 1, 1)])

    def test_parses_pull_request_detail(self) -> None:
        detail = {"metadata": {"number": 10}, "comments": [], "files": [_entry(status="renamed")]}
        self.assertEqual(parse_changed_files(detail)[0].status, "renamed")

    def test_empty_list(self) -> None:
        self.assertEqual(parse_changed_files([]), [])

    def test_invalid_payloads(self) -> None:
        cases = [
            ("not a list", {"filename": "a"}),
            ("entry not object", ["a.ts"]),
            ("missing key", [{"filename": "a.ts", "status": "added"}]),
            ("filename type", [_entry(filename=3)]),
            ("unknown status", [_entry(status="copied")]),
            ("negative count", [_entry(additions=-1)]),
            ("float count", [_entry(changes=1.5)]),
            ("bool count", [_entry(deletions=True)]),
        ]
        for label, payload in cases:
            with self.subTest(case=label):
                with self.assertRaises(InputError):
                    parse_changed_files(payload)


class TestParseDependencyGraph(unittest.TestCase):
    def test_parses_graph(self) -> None:
        graph = parse_dependency_graph({"src/a.ts": {"dependencies": ["src/b.ts"], "dependents": []}})
        self.assertEqual(graph, {"src/a.ts": DependencyInfo(["src/b.ts"], [])})

    def test_empty_graph(self) -> None:
        self.assertEqual(parse_dependency_graph({}), {})

    def test_invalid_graphs(self) -> None:
        cases = [
            ("not an object", []),
            ("entry not object", {"a": ["b"]}),
            ("missing dependents", {"a": {"dependencies": []}}),
            ("non-string entries", {"a": {"dependencies": [1], "dependents": []}}),
        ]
        for label, payload in cases:
            with self.subTest(case=label):
                with self.assertRaises(InputError):
                    parse_dependency_graph(payload)

    def test_input_error_is_value_error(self) -> None:
        self.assertTrue(issubclass(InputError, ValueError))


if __name__ == "__main__":
    unittest.main()
