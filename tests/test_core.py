import pytest

from mcml import core, log
from mcml.core import CoreInitError, CoreInitObj


def test_core_init_obj_new():
    obj = CoreInitObj("/path/to/local", "oauth_key_123", "curseforge_key_456")
    assert obj.local == "/path/to/local"
    assert obj.oauth_key == "oauth_key_123"
    assert obj.curseforge_key == "curseforge_key_456"


def test_empty_local_rejected():
    with pytest.raises(CoreInitError):
        core.init(CoreInitObj("", "placeholder", "placeholder"))


def test_init_lifecycle(tmp_path):
    assert core.base_dir() is None
    assert core.core_arg() is None
    arg = CoreInitObj(str(tmp_path), "placeholder", "placeholder")
    core.init(arg)
    try:
        assert core.base_dir() == str(tmp_path)
        assert core.core_arg() == arg
        with pytest.raises(CoreInitError):
            core.init(arg)
        log.info("started")
    finally:
        log.stop()
    text = (tmp_path / log.LOG_FILE_NAME).read_text(encoding="utf-8")
    assert "[Info]started" in text