"""libclangを使用したC/C++ソースコード解析のラッパー。"""

from contextlib import contextmanager
from typing import Iterator, List, Optional
from pathlib import Path
import glob
import os
import logging

from .cursor_node import CursorNode

logger = logging.getLogger(__name__)


class ClangParseError(Exception):
    """Clangパース時のエラー。"""
    pass


class ClangSetupError(Exception):
    """libclangの読み込みに失敗した場合のエラー。"""
    pass


class ClangAnalyzer:
    """libclangを使用したC/C++解析のメインクラス。

    libclangをラップし、ファイル単位でTranslationUnitを開いて
    ルートノードを提供する。TranslationUnitはキャッシュせず、
    ファイルごとに生成して解析後すぐに解放する。
    """

    # libclangが見つからない場合に探索するディレクトリ
    COMMON_LIBRARY_PATTERNS: List[str] = [
        "/usr/lib/llvm-*/lib",
        "/usr/lib64/llvm*/lib64",
        "/usr/local/opt/llvm/lib",
        "/opt/homebrew/opt/llvm/lib",
        "/Library/Developer/CommandLineTools/usr/lib",
    ]

    def __init__(
        self,
        include_paths: Optional[List[str]] = None,
        additional_args: Optional[List[str]] = None,
        library_path: Optional[str] = None
    ):
        """Clangアナライザーを初期化する。

        Args:
            include_paths: インクルードディレクトリのリスト
            additional_args: 追加のコンパイラ引数
            library_path: libclangライブラリのパス（任意、未指定時は自動検出）
        """
        self._setup_libclang(library_path)

        import clang.cindex as ci
        self._ci = ci

        self.include_paths = include_paths or []
        self.additional_args = additional_args or []

        logger.debug(
            f"ClangAnalyzer initialized with {len(self.include_paths)} include paths"
        )

    def _setup_libclang(self, library_path: Optional[str] = None) -> None:
        """libclangライブラリパスを設定する。

        Args:
            library_path: libclangへの明示的なパス（任意）

        Raises:
            ClangSetupError: libclangを読み込めなかった場合
        """
        import clang.cindex as ci

        # 一度読み込まれた後はパスを変更できない
        if library_path and not ci.Config.loaded:
            ci.Config.set_library_path(library_path)

        try:
            # libclangにアクセス可能かテスト
            ci.Index.create()
            logger.debug("libclang loaded successfully")
            return
        except Exception as e:
            if library_path or ci.Config.loaded:
                raise ClangSetupError(f"Failed to load libclang: {e}")
            first_error = e

        # 一般的なLLVMのインストール先を試す
        for pattern in self.COMMON_LIBRARY_PATTERNS:
            for path in sorted(glob.glob(pattern), reverse=True):
                if any(Path(path).glob("libclang*")):
                    ci.Config.set_library_path(path)
                    logger.info(f"Using libclang from: {path}")
                    return

        raise ClangSetupError(
            f"Failed to load libclang: {first_error}. "
            "Please install libclang with 'pip install libclang' or install LLVM."
        )

    def _build_compiler_args(self) -> List[str]:
        """パース用のコンパイラ引数を構築する。

        言語はファイル拡張子からlibclangが判定する。

        Returns:
            コンパイラ引数のリスト
        """
        args: List[str] = []

        # インクルードパスを追加
        for inc_path in self.include_paths:
            args.extend(["-I", inc_path])

        # 追加の引数を追加
        args.extend(self.additional_args)

        return args

    @contextmanager
    def translation_unit_root(self, file_path: str) -> Iterator[CursorNode]:
        """ファイルをパースし、TranslationUnitのルートノードを提供する。

        IndexとTranslationUnitはwithブロックを抜けた時点で解放される。

        Args:
            file_path: ソースファイルのパス

        Yields:
            TranslationUnitカーソルをラップしたCursorNode

        Raises:
            ClangParseError: TranslationUnitを生成できなかった場合
        """
        index = self._ci.Index.create()
        try:
            tu = index.parse(
                file_path,
                args=self._build_compiler_args(),
                options=self._ci.TranslationUnit.PARSE_NONE
            )
        except self._ci.TranslationUnitLoadError as e:
            del index
            raise ClangParseError(f"Failed to parse {file_path}: {e}")

        # 致命的でない診断情報はログ出力のみ
        for diag in tu.diagnostics:
            if diag.severity >= self._ci.Diagnostic.Error:
                logger.warning(f"Parse error in {file_path}: {diag.spelling}")

        try:
            yield CursorNode(tu.cursor)
        finally:
            # cindexはオブジェクト解放時にdispose関数を呼び出す
            del tu
            del index
            logger.debug(f"Disposed translation unit: {os.path.basename(file_path)}")
