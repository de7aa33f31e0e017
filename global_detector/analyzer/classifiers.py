"""宣言ノードの分類器。

グローバル変数の判定は次の3つの分類器を順に適用して行う。

- スコープ分類器: 意味上の親が関数宣言であれば引数またはローカル変数
- トークン分類器: 宣言の字句範囲に ``const`` が含まれていれば定数
- パスフィルタ: 宣言のファイルパスが除外リストに該当すれば無視

トークン分類器は型の意味解析ではなく字句の走査で判定する。
そのため初期化子に ``const`` が現れる非const変数も定数とみなし、
typedefで隠れたconst修飾は検出できない。この挙動は既知の制限として
そのまま維持する。
"""

from typing import Iterable

from ..models.node import DeclarationNode, NodeKind

# C/C++の定数修飾キーワード
CONST_KEYWORD = "const"


def is_global(node: DeclarationNode) -> bool:
    """宣言がグローバル変数の候補かどうかを判定する。

    Args:
        node: 変数宣言ノード

    Returns:
        意味上の親が関数宣言でなければTrue（親がない場合もTrue）
    """
    parent = node.semantic_parent
    if parent is None:
        return True
    return parent.kind != NodeKind.FUNCTION_DECLARATION


def has_const_qualifier(node: DeclarationNode) -> bool:
    """宣言の字句範囲にconstキーワードが含まれるかを判定する。

    Args:
        node: 変数宣言ノード

    Returns:
        いずれかのトークンが完全一致でconstならTrue
    """
    return any(spelling == CONST_KEYWORD for spelling in node.token_spellings())


def is_excluded(path: str, exclusions: Iterable[str]) -> bool:
    """パスが除外リストのいずれかを部分文字列として含むかを判定する。

    Args:
        path: 宣言のファイルパス
        exclusions: 除外する部分文字列

    Returns:
        いずれかに一致すればTrue
    """
    return any(entry in path for entry in exclusions)
