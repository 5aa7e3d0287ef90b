from pathlib import Path

import pytest

TREE = {
    "": ["root1.txt", "root2.txt"],
    "subdir1": ["file1.txt", "file2.txt"],
    "subdir2": ["file3.txt"],
    "subdir1/nesteddir": ["file4.txt", "file5.txt"],
}


def write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def tree(tmp_path) -> Path:
    """Root with two files of its own and five spread over nested folders."""
    root = tmp_path / "root"
    root.mkdir()
    for folder, names in TREE.items():
        for name in names:
            write(root / folder / name, f"content of {folder}/{name}")
    return root


class SleepRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)


@pytest.fixture
def no_sleep():
    return SleepRecorder()
