"""ASTトラバーサルのテスト。"""

from global_detector.analyzer.traversal import traverse
from global_detector.config import DEFAULT_EXCLUDE_PATHS
from global_detector.models.finding import Finding, SourceLocation
from global_detector.models.node import NodeKind

from fake_nodes import FakeNode, function, translation_unit, var


def names(findings):
    return [f.identifier for f in findings]


class TestTraverse:
    """traverse()のテスト。"""

    def test_single_global(self):
        tu = translation_unit()
        tu.add(var("counter", file_path="/work/src/main.c", line=3, column=5))

        findings = list(traverse(tu, DEFAULT_EXCLUDE_PATHS))

        assert findings == [
            Finding("counter", SourceLocation("/work/src/main.c", 3, 5))
        ]

    def test_const_skipped(self):
        tu = translation_unit()
        tu.add(var("MAX", ["const", "int", "MAX", "=", "10"]))
        assert list(traverse(tu, DEFAULT_EXCLUDE_PATHS)) == []

    def test_parameters_and_locals_skipped(self):
        tu = translation_unit()
        func = tu.add(function("f"))
        func.add(var("x"))
        body = FakeNode(NodeKind.OTHER, spelling="")
        func.add(body)
        body.add(var("local", parent=func))

        assert list(traverse(tu, DEFAULT_EXCLUDE_PATHS)) == []

    def test_excluded_path_skipped(self):
        tu = translation_unit()
        tu.add(var("stdin_like", file_path="/usr/include/stdio.h"))
        tu.add(var("mine", file_path="/work/src/main.c"))

        assert names(traverse(tu, DEFAULT_EXCLUDE_PATHS)) == ["mine"]

    def test_pre_order_source_order(self):
        """すべての対象を深さ優先・行きがけ順で報告する。"""
        tu = translation_unit()
        tu.add(var("first"))
        ns = tu.add(FakeNode(NodeKind.OTHER, spelling="ns"))
        outer = ns.add(var("outer"))
        outer.add(var("nested"))
        tu.add(var("last"))

        assert names(traverse(tu, DEFAULT_EXCLUDE_PATHS)) == [
            "first", "outer", "nested", "last"
        ]

    def test_recurses_below_filtered_nodes(self):
        """除外されたノードの子も走査する。"""
        tu = translation_unit()
        const_decl = tu.add(var("K", ["const", "int", "K"]))
        const_decl.add(var("below_const"))
        func = tu.add(function("f"))
        param = func.add(var("p"))
        param.add(var("below_param", parent=tu))
        excluded = tu.add(var("sys", file_path="/usr/include/x.h"))
        excluded.add(var("below_excluded"))

        assert names(traverse(tu, DEFAULT_EXCLUDE_PATHS)) == [
            "below_const", "below_param", "below_excluded"
        ]

    def test_root_variable_is_inspected(self):
        root = var("alone")
        assert names(traverse(root, ())) == ["alone"]

    def test_is_lazy(self):
        """ジェネレーターとして1件ずつ取り出せる。"""
        tu = translation_unit()
        tu.add(var("a"))
        tu.add(var("b"))

        findings = traverse(tu, ())
        assert next(findings).identifier == "a"
        assert next(findings).identifier == "b"
        assert next(findings, None) is None

    def test_explicit_exclusions(self):
        tu = translation_unit()
        tu.add(var("gen", file_path="/work/build/gen.c"))
        tu.add(var("src", file_path="/work/src/main.c"))

        assert names(traverse(tu, ("/work/build",))) == ["src"]

    def test_deeply_nested_tree(self):
        """深くネストした式の下にある宣言も再帰上限に関係なく報告する。"""
        tu = translation_unit()
        tu.add(var("total"))
        current = tu
        for _ in range(5000):
            current = current.add(FakeNode(NodeKind.OTHER, spelling="+"))
        current.add(var("innermost", parent=tu))
        tu.add(var("after"))

        assert names(traverse(tu, DEFAULT_EXCLUDE_PATHS)) == [
            "total", "innermost", "after"
        ]
