from __future__ import annotations

from richhdr.core.file_validator import FileValidator, has_dos_magic


def test_valid_file(sample_file):
    validator = FileValidator(sample_file)
    assert validator.validate()
    assert validator.errors == []


def test_missing_file(tmp_path):
    validator = FileValidator(tmp_path / "missing.exe")
    assert not validator.validate()
    assert "does not exist" in validator.errors[0]


def test_directory(tmp_path):
    validator = FileValidator(tmp_path)
    assert not validator.validate()
    assert "Not a regular file" in validator.errors[0]


def test_empty_file(tmp_path):
    path = tmp_path / "empty.exe"
    path.write_bytes(b"")
    validator = FileValidator(path)
    assert not validator.validate()
    assert "empty" in validator.errors[0]


def test_too_large(tmp_path):
    path = tmp_path / "big.exe"
    path.write_bytes(b"\0" * (1024 * 1024 + 1))
    validator = FileValidator(path, max_file_size_mb=1)
    assert not validator.validate()
    assert "too large" in validator.errors[0]


def test_tiny_file_is_accepted(tmp_path):
    path = tmp_path / "tiny.bin"
    path.write_bytes(b"M")
    assert FileValidator(path).validate()


def test_errors_reset_between_runs(tmp_path):
    path = tmp_path / "later.exe"
    validator = FileValidator(path)
    assert not validator.validate()
    path.write_bytes(b"MZ")
    assert validator.validate()
    assert validator.errors == []


def test_has_dos_magic():
    assert has_dos_magic(b"MZ\x90\x00")
    assert has_dos_magic(memoryview(bytearray(b"MZ")))
    assert not has_dos_magic(b"ZM")
    assert not has_dos_magic(b"M")
    assert not has_dos_magic(b"")
