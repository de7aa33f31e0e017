"""グローバル変数検出結果の指摘情報モデル。"""

from dataclasses import dataclass


@dataclass(frozen=True)
class SourceLocation:
    """ソースコードの位置情報。"""
    file_path: str
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.file_path}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Finding:
    """検出されたグローバル変数1件。"""
    identifier: str
    location: SourceLocation

    @classmethod
    def from_node(cls, node) -> "Finding":
        """宣言ノードからFindingを生成する。

        Args:
            node: 変数宣言ノード（DeclarationNodeインターフェース）

        Returns:
            Findingインスタンス
        """
        return cls(
            identifier=node.spelling,
            location=SourceLocation(
                file_path=node.file_path,
                line=node.line,
                column=node.column
            )
        )

    def __str__(self) -> str:
        return f"{self.identifier} at {self.location}"
