import logging
from pathlib import Path

import pytest
from create_component.config import ScaffoldConfig
from create_component.dialects import get_dialect
from create_component.emitter import emit, plan_artifact
from create_component.models import UnitType


def test_plan_component(tmp_path: Path) -> None:
    config = ScaffoldConfig(project_root=tmp_path)
    artifact = plan_artifact("UserCard", "user-card", UnitType.COMPONENT, get_dialect("vue"), config)

    assert artifact.path == tmp_path.resolve() / "src" / "components" / "UserCard" / "UserCard.vue"
    assert artifact.relative_path == str(Path("src/components/UserCard/UserCard.vue"))
    assert "<!-- 组件: UserCard -->" in artifact.content


def test_plan_page_english_label(tmp_path: Path) -> None:
    config = ScaffoldConfig(project_root=tmp_path, locale="en")
    artifact = plan_artifact("Settings", "settings", UnitType.PAGE, get_dialect("react"), config)

    assert artifact.path.parent == tmp_path.resolve() / "src" / "views" / "Settings"
    assert artifact.file_name == "Settings.jsx"
    assert "{/* Page: Settings */}" in artifact.content


def test_emit_creates_directories(tmp_path: Path) -> None:
    config = ScaffoldConfig(project_root=tmp_path)
    artifact = plan_artifact("UserCard", "user-card", UnitType.COMPONENT, get_dialect("vue"), config)

    assert emit(artifact) is True
    assert artifact.path.read_text("utf-8") == artifact.content


def test_emit_never_overwrites(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    config = ScaffoldConfig(project_root=tmp_path)
    artifact = plan_artifact("UserCard", "user-card", UnitType.COMPONENT, get_dialect("vue"), config)
    artifact.directory.mkdir(parents=True)
    artifact.path.write_text("hand written", "utf-8")

    with caplog.at_level(logging.WARNING, logger="create_component"):
        assert emit(artifact) is False

    assert artifact.path.read_text("utf-8") == "hand written"
    assert "File already exists, skipping" in caplog.text


def test_emit_propagates_os_errors(tmp_path: Path) -> None:
    # A file where the source directory should be makes mkdir fail
    (tmp_path / "src").write_text("", "utf-8")
    config = ScaffoldConfig(project_root=tmp_path)
    artifact = plan_artifact("UserCard", "user-card", UnitType.COMPONENT, get_dialect("vue"), config)

    with pytest.raises(OSError):
        emit(artifact)


def test_plan_localizes_style_comment(tmp_path: Path) -> None:
    vue = get_dialect("vue")
    zh = plan_artifact("UserCard", "user-card", UnitType.COMPONENT, vue, ScaffoldConfig(project_root=tmp_path))
    en = plan_artifact(
        "UserCard", "user-card", UnitType.COMPONENT, vue, ScaffoldConfig(project_root=tmp_path, locale="en")
    )

    assert "/* 样式 */" in zh.content
    assert "/* styles */" in en.content
