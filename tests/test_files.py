# tests/test_files.py
"""
Testes do adapter de arquivo (`load_project` / `save_project`).

Os testes asseguram que:
- o formato é inferido pela extensão (YAML preferencial, JSON alternativo)
- arquivos ausentes e extensões não suportadas levantam erros tipados
- erros do Codec propagam sem alteração
"""

from pathlib import Path

import pytest

from shrub import load_project, save_project
from shrub.core.codec import MalformedDocument, SchemaMismatch
from shrub.core.config import CodecOptions
from shrub.files import ProjectFileError, ProjectFileNotFoundError, UnsupportedProjectFormatError


@pytest.mark.parametrize("name", ["project.yml", "project.yaml", "project.JSON"])
def test_save_then_load(tmp_path: Path, full_project, name: str):
    written = save_project(full_project, tmp_path / name)
    assert written.exists()
    assert load_project(written) == full_project


def test_load_yaml_fixture(tmp_path: Path, compile_project_yaml):
    p = tmp_path / "evergreen.yml"
    p.write_text(compile_project_yaml, encoding="utf-8")
    project = load_project(str(p))
    assert [t.name for t in project.tasks] == ["compile"]
    assert project.get_variant("ubuntu").task_names() == ["compile"]


def test_save_creates_parent_dirs_and_uses_options(tmp_path: Path, full_project):
    target = tmp_path / "out" / "nested" / "project.yaml"
    save_project(full_project, target, CodecOptions(explicit_start=True))
    assert target.read_text(encoding="utf-8").startswith("---")


def test_missing_file(tmp_path: Path):
    """
    Verifica que a ausência do arquivo é erro tipado.

    Invariantes:
        - `ProjectFileNotFoundError` é subclasse de `ProjectFileError`
    """
    with pytest.raises(ProjectFileNotFoundError):
        load_project(tmp_path / "missing.yml")
    assert issubclass(ProjectFileNotFoundError, ProjectFileError)


@pytest.mark.parametrize("name", ["project.toml", "project"])
def test_unsupported_extension(tmp_path: Path, full_project, name: str):
    with pytest.raises(UnsupportedProjectFormatError):
        save_project(full_project, tmp_path / name)
    with pytest.raises(UnsupportedProjectFormatError):
        load_project(tmp_path / name)


def test_codec_errors_propagate(tmp_path: Path):
    broken = tmp_path / "broken.json"
    broken.write_text('{"tasks": ', encoding="utf-8")
    with pytest.raises(MalformedDocument):
        load_project(broken)

    mismatched = tmp_path / "mismatched.yml"
    mismatched.write_text("tasks: not-a-list\n", encoding="utf-8")
    with pytest.raises(SchemaMismatch):
        load_project(mismatched)
