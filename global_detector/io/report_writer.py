"""検出結果のテキスト出力。"""

from typing import Optional, TextIO
import sys

from ..models.finding import Finding


class ReportWriter:
    """検出結果をテキストストリームに書き出す。

    出力形式:
        Checking file: <path>
        Variable: <name>
          Location: <path>:<line>:<column>
    """

    USAGE_MESSAGE = "Please provide one or more file names as command-line arguments."
    PARSE_ERROR_MESSAGE = "Error parsing translation unit."

    def __init__(self, stream: Optional[TextIO] = None):
        """ライターを初期化する。

        Args:
            stream: 出力先（省略時は標準出力）
        """
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # 標準出力の差し替え（pytestのcapsysなど）に追従する
        return self._stream or sys.stdout

    def write_header(self, file_path: str) -> None:
        self._write(f"Checking file: {file_path}")

    def write_finding(self, finding: Finding) -> None:
        self._write(f"Variable: {finding.identifier}")
        self._write(f"  Location: {finding.location}")

    def write_parse_error(self) -> None:
        self._write(self.PARSE_ERROR_MESSAGE)

    def write_usage_error(self) -> None:
        self._write(self.USAGE_MESSAGE)

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")
