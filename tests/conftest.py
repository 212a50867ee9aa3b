import pytest
import tempfile
import shutil


@pytest.fixture(scope="session")
def test_storage_dir():
    """Create temporary storage directory for tests."""
    tmpdir = tempfile.mkdtemp(prefix="otpkey_test_")
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def clean_storage(test_storage_dir, monkeypatch):
    """Keep the CLI log file out of the home directory."""
    monkeypatch.setattr(
        "otpkey.ui.cli.get_storage_directory", lambda: test_storage_dir
    )
    yield test_storage_dir
