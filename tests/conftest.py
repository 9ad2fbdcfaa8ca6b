from typing import Dict, List, Optional, Sequence

import pytest


class FakeFileSystem:
    def __init__(self, files: Dict[str, Optional[str]], target_dir: str = ".") -> None:
        self.files = files
        self.target_dir = target_dir
        self.requested_patterns: List[List[str]] = []
        self.reads: List[str] = []

    async def find_all_files(self, patterns: Sequence[str]) -> List[str]:
        self.requested_patterns.append(list(patterns))
        return list(self.files)

    async def get_file_contents(self, path: str) -> Optional[str]:
        self.reads.append(path)
        return self.files.get(path)


class FakeGit:
    def branch_local(self):
        return {"current": "master"}

    def get_remotes(self):
        return [{"name": "origin"}]

    def add_config(self, key, value):
        return None

    def remote(self, args):
        return None

    def branch(self, args):
        return {"all": ["master"]}

    def checkout(self, ref):
        return None


@pytest.fixture
def make_fs():
    def _make(files: Dict[str, Optional[str]], target_dir: str = ".") -> FakeFileSystem:
        return FakeFileSystem(files, target_dir=target_dir)

    return _make


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def write_file(tmp_path):
    def _write(relative: str, text: str):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
