"""グローバル変数検出ツールのメインエントリーポイント。"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence
from dataclasses import dataclass
import logging

import yaml

from .config import Config, parse_exclusion_list
from .io.report_writer import ReportWriter
from .analyzer.clang_analyzer import ClangAnalyzer, ClangParseError, ClangSetupError
from .analyzer.traversal import traverse
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class ProcessingStats:
    """処理統計情報。"""
    files_checked: int = 0
    globals_found: int = 0


class GlobalVariableDetector:
    """入力ファイルを順に解析し、グローバル変数の有無を判定する。"""

    def __init__(
        self,
        config: Config,
        analyzer=None,
        writer: Optional[ReportWriter] = None
    ):
        """検出器を初期化する。

        Args:
            config: アプリケーション設定
            analyzer: translation_unit_root()を持つ解析器（省略時はClangAnalyzer）
            writer: レポート出力先（省略時は標準出力）
        """
        self.config = config
        self.exclusions = config.get_exclusions()
        self.writer = writer or ReportWriter()
        self.stats = ProcessingStats()

        if analyzer is None:
            analyzer = ClangAnalyzer(
                include_paths=config.include_paths,
                additional_args=config.compiler_args,
                library_path=config.library_path
            )
        self.analyzer = analyzer

        logger.debug(f"Exclusions: {list(self.exclusions)}")

    def run(self, files: Sequence[str]) -> int:
        """全ファイルを解析して終了コードを返す。

        パースに失敗したファイルがあれば残りは処理せずに終了する。

        Args:
            files: 解析するファイルパス（指定順に処理）

        Returns:
            グローバル変数が見つかれば1、なければ0。パース失敗時も1
        """
        self.stats = ProcessingStats()
        global_found = False

        for position, file_path in enumerate(files, 1):
            try:
                found = self.check_file(file_path)
            except ClangParseError as e:
                logger.error(str(e))
                self.writer.write_parse_error()
                return 1

            global_found = global_found or found > 0
            logger.info(
                f"[{position}/{len(files)}] {file_path}: {found} global variable(s)"
            )

        self._log_statistics()

        return 1 if global_found else 0

    def check_file(self, file_path: str) -> int:
        """1ファイルを解析し、見つかったグローバル変数を出力する。

        Args:
            file_path: ソースファイルのパス

        Returns:
            検出したグローバル変数の数

        Raises:
            ClangParseError: TranslationUnitを生成できなかった場合
        """
        self.writer.write_header(file_path)

        count = 0
        with self.analyzer.translation_unit_root(file_path) as root:
            for finding in traverse(root, self.exclusions):
                self.writer.write_finding(finding)
                count += 1

        self.stats.files_checked += 1
        self.stats.globals_found += count
        return count

    def _log_statistics(self) -> None:
        """処理統計をログ出力する。"""
        logger.info("Processing Statistics:")
        logger.info(f"  Files checked: {self.stats.files_checked}")
        logger.info(f"  Global variables: {self.stats.globals_found}")


class _ArgumentParser(argparse.ArgumentParser):
    """不正な呼び出しを終了コード1で報告するパーサー。"""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    """コマンドライン引数パーサーを構築する。"""
    parser = _ArgumentParser(
        description="C/C++ソースファイル中のグローバル変数検出ツール"
    )
    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="解析するソースファイル"
    )
    parser.add_argument(
        "-e", "--exclude",
        metavar="PATHS",
        help="除外するパスのコロン区切りリスト（デフォルトの除外パスを置き換える）"
    )
    parser.add_argument(
        "-c", "--config",
        help="設定ファイルパス（YAML）"
    )
    parser.add_argument(
        "-I", "--include-path",
        action="append",
        default=[],
        help="パース時のインクルードディレクトリ（複数指定可）"
    )
    parser.add_argument(
        "--library-path",
        help="libclangライブラリのディレクトリ"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="詳細ログを有効にする"
    )
    parser.add_argument(
        "--log-file",
        help="ログファイルパス"
    )
    parser.add_argument(
        "--write-config",
        metavar="PATH",
        help="有効な設定をYAMLファイルに書き出して終了"
    )
    return parser


def load_config(args: argparse.Namespace) -> Config:
    """設定ファイルとコマンドライン引数から設定を構築する。

    優先順位: コマンドライン > 設定ファイル > デフォルト

    Args:
        args: パース済みのコマンドライン引数

    Returns:
        Configインスタンス

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合
        ValueError: 設定ファイルの内容が不正な場合
        yaml.YAMLError: 設定ファイルがYAMLとして読めない場合
    """
    if args.config:
        if not Path(args.config).exists():
            raise FileNotFoundError(f"設定ファイルが見つかりません: {args.config}")
        config = Config.from_yaml(args.config)
    else:
        config = Config()

    if args.exclude is not None:
        config.exclude_paths = parse_exclusion_list(args.exclude)
    if args.include_path:
        config.include_paths = config.include_paths + args.include_path
    if args.library_path:
        config.library_path = args.library_path
    if args.log_file:
        config.log_file = args.log_file
    if args.verbose:
        config.log_level = "DEBUG"

    return config


def main(argv: Optional[List[str]] = None) -> int:
    """メインエントリーポイント。

    Args:
        argv: コマンドライン引数（省略時はsys.argv）

    Returns:
        終了コード
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # --help は0、不正な引数は1
        return e.code

    try:
        config = load_config(args)
    except (FileNotFoundError, yaml.YAMLError, ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(level=config.log_level, log_file=config.log_file)

    if args.write_config:
        config.save_yaml(args.write_config)
        return 0

    writer = ReportWriter()

    # 入力ファイルが必要
    if not args.files:
        writer.write_usage_error()
        return 1

    # 設定を検証
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(f"Configuration error: {error}")
        return 1

    try:
        detector = GlobalVariableDetector(config, writer=writer)
    except ClangSetupError as e:
        logger.error(str(e))
        return 1

    return detector.run(args.files)


if __name__ == "__main__":
    sys.exit(main())
