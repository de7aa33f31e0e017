"""設定管理モジュール。"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, Tuple
from pathlib import Path
import logging

import yaml

logger = logging.getLogger(__name__)

# 除外パスが指定されない場合のシステム/SDKインクルードパス
DEFAULT_EXCLUDE_PATHS: Tuple[str, ...] = (
    "/usr/include",
    "/Library/Developer/CommandLineTools/SDKs",
)


def parse_exclusion_list(value: str) -> List[str]:
    """コロン区切りの除外パス文字列を分割する。

    空の要素はすべてのパスに一致してしまうため取り除く。

    Args:
        value: "a:b:c" 形式の文字列

    Returns:
        除外パスのリスト
    """
    return [entry for entry in value.split(":") if entry]


@dataclass
class Config:
    """アプリケーション設定。"""

    # 除外パス（Noneの場合はデフォルトを使用）
    exclude_paths: Optional[List[str]] = None

    # パース用インクルードパス
    include_paths: List[str] = field(default_factory=list)

    # 追加のコンパイラ引数
    compiler_args: List[str] = field(default_factory=list)

    # libclangライブラリのディレクトリ
    library_path: Optional[str] = None

    # ロギング設定
    log_level: str = "WARNING"
    log_file: Optional[str] = None

    @classmethod
    def from_yaml(cls, file_path: str) -> "Config":
        """YAMLファイルから設定を読み込む。

        Args:
            file_path: YAML設定ファイルのパス

        Returns:
            Configインスタンス

        Raises:
            ValueError: トップレベルがマッピングでない場合
        """
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(
                f"設定ファイルのトップレベルはマッピングである必要があります: {file_path}"
            )

        config = cls()

        # 除外パス（リストまたはコロン区切り文字列）
        exclude_paths = data.get("exclude_paths")
        if isinstance(exclude_paths, str):
            exclude_paths = parse_exclusion_list(exclude_paths)
        config.exclude_paths = exclude_paths

        # パース設定
        config.include_paths = data.get("include_paths") or []
        config.compiler_args = data.get("compiler_args") or []
        config.library_path = data.get("library_path")

        # ロギング
        config.log_level = data.get("log_level", config.log_level)
        config.log_file = data.get("log_file")

        logger.info(f"Configuration loaded from {file_path}")
        return config

    def get_exclusions(self) -> Tuple[str, ...]:
        """有効な除外パスを取得する。

        明示的な指定はデフォルトを置き換え、マージはしない。

        Returns:
            除外パスのタプル
        """
        if self.exclude_paths is None:
            return DEFAULT_EXCLUDE_PATHS
        return tuple(entry for entry in self.exclude_paths if entry)

    def validate(self) -> List[str]:
        """設定を検証する。

        Returns:
            検証エラーのリスト（有効な場合は空）
        """
        errors = []

        if self.library_path and not Path(self.library_path).is_dir():
            errors.append(f"libclangのディレクトリが存在しません: {self.library_path}")

        # インクルードパスは警告のみ
        for path in self.include_paths:
            if not Path(path).exists():
                logger.warning(f"Include path does not exist: {path}")

        return errors

    def to_dict(self) -> Dict[str, Any]:
        """設定を辞書に変換する。

        Returns:
            辞書形式の設定
        """
        return {
            "exclude_paths": list(self.get_exclusions()),
            "include_paths": self.include_paths,
            "compiler_args": self.compiler_args,
            "library_path": self.library_path,
            "log_level": self.log_level,
            "log_file": self.log_file,
        }

    def save_yaml(self, file_path: str) -> None:
        """設定をYAMLファイルに保存。

        Args:
            file_path: 保存先パス
        """
        # 出力先ディレクトリが存在しない場合は作成
        output_path = Path(file_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        data = self.to_dict()
        if not self.library_path:
            del data["library_path"]
        if not self.log_file:
            del data["log_file"]

        with open(file_path, "w", encoding="utf-8") as f:
            yaml.dump(
                data,
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False
            )

        logger.info(f"Configuration saved to {file_path}")
