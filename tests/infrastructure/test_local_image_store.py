"""Tests for the filesystem image store."""

from storefront.infrastructure.persistence.local_image_store import LocalImageStore


def test_upload_writes_file_under_unique_name(tmp_path):
    store = LocalImageStore(tmp_path / "uploads")
    first = store.upload(b"one", "Apple.PNG")
    second = store.upload(b"two", "Apple.PNG")

    assert first.startswith("/uploads/")
    assert first.endswith(".png")
    assert first != second
    assert store.resolve(first).read_bytes() == b"one"


def test_owns_only_uploaded_paths(tmp_path):
    store = LocalImageStore(tmp_path)
    assert store.owns("/uploads/1-2.png")
    assert not store.owns("https://picsum.photos/400/300")


def test_remove_deletes_file(tmp_path):
    store = LocalImageStore(tmp_path)
    path = store.upload(b"data", "a.jpg")
    store.remove(path)
    assert not store.resolve(path).exists()


def test_remove_missing_file_is_quiet(tmp_path):
    LocalImageStore(tmp_path).remove("/uploads/gone.png")


def test_resolve_stays_inside_upload_dir(tmp_path):
    store = LocalImageStore(tmp_path / "uploads")
    assert store.resolve("/uploads/../../etc/passwd") == tmp_path / "uploads" / "passwd"
