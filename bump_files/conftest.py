from pathlib import Path

import pytest
from zero_3rdparty.file_utils import ensure_parents_write_text

from bump_files.settings import BumpSettings

VERSION_GO = """\
package stream_chat

import (
	"fmt"
)

const (
	versionMajor = 8
	versionMinor = 1
	versionPatch = 1
)

func fmtVersion() string {
	return fmt.Sprintf("%d.%d.%d",
		versionMajor,
		versionMinor,
		versionPatch)
}
"""

GO_MOD = """\
module github.com/GetStream/stream-chat-go/v8

go 1.22

require github.com/stretchr/testify v1.9.0
"""

README_MD = """\
# stream-chat-go

go get github.com/GetStream/stream-chat-go/v8

import stream "github.com/GetStream/stream-chat-go/v8"
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ["REPO_ROOT", "CONFIG_PATH", "STRICT_WRITE", "DRY_RUN", "LOG_LEVEL"]:
        monkeypatch.delenv(f"BUMP_FILES_{name}", raising=False)


@pytest.fixture()
def repo_root(tmp_path) -> Path:
    ensure_parents_write_text(tmp_path / "version.go", VERSION_GO)
    ensure_parents_write_text(tmp_path / "go.mod", GO_MOD)
    ensure_parents_write_text(tmp_path / "README.md", README_MD)
    return tmp_path


@pytest.fixture()
def settings(repo_root) -> BumpSettings:
    return BumpSettings(repo_root=repo_root)
