import json
import subprocess
from pathlib import Path
from unittest import mock

from rustdrill.project import Crate, RustAnalyzerProject


def test_path_to_json_adds_rust_files_only():
    project = RustAnalyzerProject()
    project.path_to_json("exercises/intro/intro1.rs")
    project.path_to_json("exercises/clippy/Cargo.toml")
    project.path_to_json("exercises/intro")
    assert [c.root_module for c in project.crates] == ["exercises/intro/intro1.rs"]
    crate = project.crates[0]
    assert crate.edition == "2021"
    assert crate.cfg == ["test"]
    assert crate.deps == []


def test_path_to_json_splits_at_first_dot():
    project = RustAnalyzerProject()
    project.path_to_json("exercises/a.b.rs")
    assert project.crates == []


def test_exercises_to_json(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "exercises" / "intro").mkdir(parents=True)
    (tmp_path / "exercises" / "clippy").mkdir()
    (tmp_path / "exercises" / "intro" / "intro1.rs").write_text("fn main() {}\n")
    (tmp_path / "exercises" / "clippy" / "clippy1.rs").write_text("fn main() {}\n")
    (tmp_path / "exercises" / "README.md").write_text("notes\n")
    project = RustAnalyzerProject()
    project.exercises_to_json()
    roots = sorted(c.root_module for c in project.crates)
    assert roots == sorted(
        [str(Path("exercises/intro/intro1.rs")), str(Path("exercises/clippy/clippy1.rs"))]
    )


def test_empty_project_json():
    assert RustAnalyzerProject().to_json() == '{"sysroot_src":"","crates":[]}'


def test_json_round_trip_and_write(tmp_path):
    project = RustAnalyzerProject(sysroot_src="lib", crates=[Crate("exercises/x.rs")])
    target = tmp_path / "rust-project.json"
    project.write_to_disk(target)
    data = json.loads(target.read_text(encoding="utf-8"))
    assert data == json.loads(project.to_json())
    assert list(data) == ["sysroot_src", "crates"]
    assert list(data["crates"][0]) == ["root_module", "edition", "deps", "cfg"]
    assert data["crates"][0]["root_module"] == "exercises/x.rs"


def test_get_sysroot_src(capsys):
    completed = subprocess.CompletedProcess([], 0, b"/opt/rust\n", b"")
    with mock.patch("subprocess.run", return_value=completed):
        project = RustAnalyzerProject()
        project.get_sysroot_src()
    expected = Path("/opt/rust") / "lib" / "rustlib" / "src" / "rust" / "library"
    assert project.sysroot_src == str(expected)
    assert "Determined toolchain: /opt/rust" in capsys.readouterr().out