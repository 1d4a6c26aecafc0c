import pytest

from bump_files.bump import bump_files, current_version, read_file_versions
from bump_files.config import default_config
from bump_files.conftest import GO_MOD, README_MD, VERSION_GO
from bump_files.errors import (
    BumpFileNotFoundError,
    InvalidVersionError,
    MissingFieldError,
)
from bump_files.settings import BumpSettings
from bump_files.version import BumpType, PkgVersion


def test_read_file_versions(settings):
    file_versions = read_file_versions(settings, default_config())
    assert [fv.version for fv in file_versions] == ["8.1.1", "8", "8"]
    assert current_version(file_versions) == PkgVersion(8, 1, 1)


def test_bump_major(settings, repo_root):
    result = bump_files(settings, default_config(), BumpType.MAJOR)
    assert str(result.old_version) == "8.1.1"
    assert str(result.new_version) == "9.0.0"
    assert len(result.changed_paths) == 3
    version_go = (repo_root / "version.go").read_text()
    assert "versionMajor = 9\n\tversionMinor = 0\n\tversionPatch = 0\n" in version_go
    assert (repo_root / "go.mod").read_text() == GO_MOD.replace("/v8", "/v9")
    assert (repo_root / "README.md").read_text() == README_MD.replace("/v8", "/v9")


def test_bump_minor_leaves_module_files_unchanged(settings, repo_root):
    result = bump_files(settings, default_config(), BumpType.MINOR)
    assert str(result.new_version) == "8.2.0"
    assert result.changed_paths == [repo_root / "version.go"]
    assert result.unchanged_paths == [repo_root / "go.mod", repo_root / "README.md"]
    assert (repo_root / "go.mod").read_text() == GO_MOD


def test_explicit_version(settings, repo_root):
    bump_files(settings, default_config(), new_version="10.0.3")
    file_versions = read_file_versions(settings, default_config())
    assert [fv.version for fv in file_versions] == ["10.0.3", "10", "10"]


def test_dry_run_writes_nothing(repo_root):
    settings = BumpSettings(repo_root=repo_root, dry_run=True)
    result = bump_files(settings, default_config(), BumpType.MAJOR)
    assert len(result.changed_paths) == 3
    assert (repo_root / "version.go").read_text() == VERSION_GO


def test_missing_field_aborts_before_any_write(settings, repo_root):
    (repo_root / "README.md").write_text("no module path here")
    with pytest.raises(MissingFieldError):
        bump_files(settings, default_config(), BumpType.MAJOR)
    assert (repo_root / "version.go").read_text() == VERSION_GO
    assert (repo_root / "go.mod").read_text() == GO_MOD


def test_missing_file(settings, repo_root):
    (repo_root / "go.mod").unlink()
    with pytest.raises(BumpFileNotFoundError) as exc:
        read_file_versions(settings, default_config())
    assert exc.value.path == repo_root / "./go.mod"


def test_inconsistent_major_is_logged(settings, repo_root, caplog):
    (repo_root / "go.mod").write_text(GO_MOD.replace("/v8", "/v7"))
    file_versions = read_file_versions(settings, default_config())
    assert str(current_version(file_versions)) == "8.1.1"
    assert "go.mod has version 7" in caplog.text


def test_bump_types_only_touch_digits(settings, repo_root):
    assert {bump.value for bump in BumpType} == {"major", "minor", "patch"}
    for _ in range(2):
        result = bump_files(settings, default_config(), BumpType.PATCH)
    assert str(result.new_version) == "8.1.3"
    file_versions = read_file_versions(settings, default_config())
    assert file_versions[0].version == "8.1.3"
    assert "versionPatch = 3\n" in (repo_root / "version.go").read_text()


def test_pre_release_version_leaves_files_untouched(settings, repo_root):
    with pytest.raises(InvalidVersionError):
        bump_files(settings, default_config(), new_version="8.1.1rc1")
    assert (repo_root / "version.go").read_text() == VERSION_GO
