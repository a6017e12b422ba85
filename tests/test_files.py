import io
import os

import pytest

from kudoctl.files import copy_operator, full_path_to_target, sha256_sum


def test_full_path_to_target_joins(tmp_path):
    target = full_path_to_target(str(tmp_path), "index.yaml", False)
    assert target == os.path.join(str(tmp_path), "index.yaml")


def test_full_path_to_target_is_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    target = full_path_to_target(".", "index.yaml", False)
    assert os.path.isabs(target)
    assert os.path.dirname(target) == os.path.abspath(str(tmp_path))


def test_full_path_to_target_existing_without_overwrite(tmp_path):
    (tmp_path / "index.yaml").write_text("x")
    with pytest.raises(FileExistsError) as info:
        full_path_to_target(str(tmp_path), "index.yaml", False)
    assert "already exists" in str(info.value)


def test_full_path_to_target_existing_with_overwrite(tmp_path):
    (tmp_path / "index.yaml").write_text("x")
    target = full_path_to_target(str(tmp_path), "index.yaml", True)
    assert target == str(tmp_path / "index.yaml")


def test_full_path_to_target_not_a_directory(tmp_path):
    afile = tmp_path / "plain"
    afile.write_text("x")
    with pytest.raises(NotADirectoryError) as info:
        full_path_to_target(str(afile), "index.yaml", False)
    assert "is not a proper directory" in str(info.value)


def test_full_path_to_target_missing_directory(tmp_path):
    with pytest.raises(NotADirectoryError):
        full_path_to_target(str(tmp_path / "missing"), "index.yaml", False)


def test_full_path_to_target_expands_tilde(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    target = full_path_to_target("~", "pkg.tgz", False)
    assert target == os.path.join(str(tmp_path), "pkg.tgz")


def test_sha256_sum_known_vector():
    assert (
        sha256_sum(io.BytesIO(b"abc"))
        == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_sha256_sum_same_content_same_digest():
    data = b"operator" * 20000
    assert sha256_sum(io.BytesIO(data)) == sha256_sum(io.BytesIO(bytes(data)))
    assert sha256_sum(io.BytesIO(data)) != sha256_sum(io.BytesIO(data + b"!"))


def test_copy_operator_directory(tmp_path):
    src = tmp_path / "zk"
    (src / "templates").mkdir(parents=True)
    (src / "operator.yaml").write_text("name: zookeeper\n")
    (src / "templates" / "service.yaml").write_text("kind: Service\n")
    base = tmp_path / "opt"

    target = copy_operator(str(src), str(base))

    assert target == str(base / "zk")
    assert (base / "zk" / "operator.yaml").read_text() == "name: zookeeper\n"
    assert (base / "zk" / "templates" / "service.yaml").read_text() == "kind: Service\n"


def test_copy_operator_file(tmp_path):
    src = tmp_path / "zk.tgz"
    src.write_bytes(b"\x1f\x8b payload")
    base = tmp_path / "opt"

    target = copy_operator(str(src), str(base))

    assert target == str(base / "zk.tgz")
    assert (base / "zk.tgz").read_bytes() == b"\x1f\x8b payload"