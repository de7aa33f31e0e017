"""C/C++ソースファイルのグローバル変数検出ツール。"""

__version__ = "0.1.0"
