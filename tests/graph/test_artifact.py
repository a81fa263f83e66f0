import json
import tempfile
import unittest
from pathlib import Path

from pr_grouper.graph.artifact import load_dependency_graph, simplify_dependency_graph
from pr_grouper.grouping.group_model import DependencyInfo
from pr_grouper.grouping.schema import InputError

RAW_REPORT = {
    "modules": [
        {
            "source": "src/index.ts",
            "coreModule": False,
            "dependencies": [
                {"resolved": "src/core/scanner.ts", "coreModule": False},
                {"resolved": "fs", "coreModule": True},
                {"resolved": "node_modules/lodash/index.js", "coreModule": False},
                {"resolved": "", "coreModule": False},
            ],
            "dependents": [],
        },
        {
            "source": "src/core/scanner.ts",
            "dependencies": [],
            "dependents": ["src/index.ts", "test/scanner.spec.ts"],
        },
        {"source": "fs", "coreModule": True, "dependencies": [], "dependents": ["src/index.ts"]},
        {"source": "node_modules/lodash/index.js", "dependencies": [], "dependents": ["src/index.ts"]},
        {"dependencies": []},
    ]
}


class TestSimplifyDependencyGraph(unittest.TestCase):
    def test_keeps_internal_modules_only(self) -> None:
        graph = simplify_dependency_graph(RAW_REPORT)
        self.assertEqual(
            graph,
            {
                "src/index.ts": DependencyInfo(["src/core/scanner.ts"], []),
                "src/core/scanner.ts": DependencyInfo([], ["src/index.ts", "test/scanner.spec.ts"]),
            },
        )

    def test_dependents_are_not_filtered(self) -> None:
        graph = simplify_dependency_graph(RAW_REPORT)
        self.assertIn("test/scanner.spec.ts", graph["src/core/scanner.ts"].dependents)

    def test_custom_internal_prefix(self) -> None:
        raw = {"modules": [{"source": "lib/a.js", "dependencies": [{"resolved": "lib/b.js", "coreModule": False}]}]}
        self.assertEqual(simplify_dependency_graph(raw, internal_prefix="lib/"), {"lib/a.js": DependencyInfo(["lib/b.js"], [])})
        self.assertEqual(simplify_dependency_graph(raw), {})

    def test_dependency_without_core_flag_is_dropped(self) -> None:
        raw = {"modules": [{"source": "src/a.ts", "dependencies": [{"resolved": "src/b.ts"}]}]}
        self.assertEqual(simplify_dependency_graph(raw)["src/a.ts"].dependencies, [])

    def test_missing_modules_yields_empty_graph(self) -> None:
        for raw in ({}, {"modules": "nope"}, [], None):
            with self.subTest(raw=raw):
                with self.assertLogs("pr_grouper.graph.artifact", level="WARNING"):
                    self.assertEqual(simplify_dependency_graph(raw), {})


class TestLoadDependencyGraph(unittest.TestCase):
    def test_load_simplified_graph(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "graph.json"
            path.write_text(json.dumps({"src/a.ts": {"dependencies": [], "dependents": []}}))
            self.assertEqual(load_dependency_graph(path), {"src/a.ts": DependencyInfo()})

    def test_load_raw_report(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "dependency-graph.json"
            path.write_text(json.dumps(RAW_REPORT))
            graph = load_dependency_graph(path, raw=True)
            self.assertEqual(sorted(graph), ["src/core/scanner.ts", "src/index.ts"])

    def test_invalid_json(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "graph.json"
            path.write_text("{invalid}")
            with self.assertRaises(InputError):
                load_dependency_graph(path)

    def test_missing_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(InputError):
                load_dependency_graph(Path(tmp) / "missing.json")

    def test_malformed_simplified_graph(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "graph.json"
            path.write_text(json.dumps({"src/a.ts": {"dependencies": "src/b.ts", "dependents": []}}))
            with self.assertRaises(InputError):
                load_dependency_graph(path)


if __name__ == "__main__":
    unittest.main()
