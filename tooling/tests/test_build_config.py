"""Tests for apiserver_boot.build.config."""

from pathlib import Path

import pytest

from apiserver_boot.build.config import (
    DEFAULT_BUILD_CONFIG,
    load_build_config,
    resolve_build_config,
)


class TestResolveBuildConfig:
    def test_defaults(self) -> None:
        cfg = resolve_build_config(None)
        assert cfg == DEFAULT_BUILD_CONFIG
        assert cfg["goos"] == ""
        assert cfg["output"] == "bin"
        assert cfg["targets"] == ["apiserver", "controller"]

    def test_targets_not_shared_with_defaults(self) -> None:
        cfg = resolve_build_config()
        cfg["targets"].append("x")
        assert DEFAULT_BUILD_CONFIG["targets"] == ["apiserver", "controller"]

    def test_overrides_applied_unknown_and_none_ignored(self) -> None:
        cfg = resolve_build_config(
            {"goos": "linux", "goarch": None, "bazel": True, "nope": "x", "targets": "controller"}
        )
        assert cfg["goos"] == "linux"
        assert cfg["goarch"] == ""
        assert cfg["bazel"] is True
        assert "nope" not in cfg
        assert cfg["targets"] == ["controller"]


class TestLoadBuildConfig:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert load_build_config(tmp_path / "apiserver-boot.yaml") == {}

    def test_reads_build_section(self, tmp_path: Path) -> None:
        p = tmp_path / "apiserver-boot.yaml"
        p.write_text("build:\n  goarch: arm64\n  targets: [apiserver]\nother: 1\n")
        assert load_build_config(p) == {"goarch": "arm64", "targets": ["apiserver"]}

    def test_empty_file(self, tmp_path: Path) -> None:
        p = tmp_path / "apiserver-boot.yaml"
        p.write_text("")
        assert load_build_config(p) == {}

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        p = tmp_path / "apiserver-boot.yaml"
        p.write_text("build: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_build_config(p)

    def test_non_mapping_build_section_raises(self, tmp_path: Path) -> None:
        p = tmp_path / "apiserver-boot.yaml"
        p.write_text("build:\n  - goos\n")
        with pytest.raises(ValueError, match="'build' to be a mapping"):
            load_build_config(p)

    def test_bad_targets_raises(self, tmp_path: Path) -> None:
        p = tmp_path / "apiserver-boot.yaml"
        p.write_text("build:\n  targets: {apiserver: true}\n")
        with pytest.raises(ValueError, match="build.targets"):
            load_build_config(p)

    def test_non_bool_mode_flag_rejected(self) -> None:
        with pytest.raises(ValueError, match="'bazel' must be true or false"):
            resolve_build_config({"bazel": "false"})
        with pytest.raises(ValueError, match="'gazelle' must be true or false"):
            resolve_build_config({"gazelle": 1})


class TestLoadBuildConfigModeFlags:
    @pytest.mark.parametrize("text", ['build:\n  bazel: "false"\n', 'build:\n  gazelle: "no"\n'])
    def test_quoted_bool_raises(self, tmp_path: Path, text: str) -> None:
        p = tmp_path / "apiserver-boot.yaml"
        p.write_text(text)
        with pytest.raises(ValueError, match="must be true or false"):
            load_build_config(p)

    def test_yaml_bools_kept(self, tmp_path: Path) -> None:
        p = tmp_path / "apiserver-boot.yaml"
        p.write_text("build:\n  bazel: false\n  gazelle: true\n")
        cfg = resolve_build_config(load_build_config(p))
        assert cfg["bazel"] is False
        assert cfg["gazelle"] is True
