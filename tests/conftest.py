import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    # setenv first so teardown removes whatever load_env writes
    for key in ('ATLAS_SLICER_OUT_DIR', 'ATLAS_SLICER_LOG_LEVEL'):
        monkeypatch.setenv(key, '')
        monkeypatch.delenv(key)
