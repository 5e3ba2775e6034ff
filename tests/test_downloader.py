import io

from mcml import events
from mcml.downloader import (
    AddItem,
    DownloadItem,
    DownloadItemState,
    DownloadManager,
    DownloadTask,
    DownloadThread,
)


def _item(name="file", url="https://example.com/file", local="/tmp/file"):
    return DownloadItem(name, url, local)


def test_download_item_new():
    item = DownloadItem("test_file.zip", "https://example.com/test.zip", "/downloads/test.zip")
    assert item.name == "test_file.zip"
    assert item.url == "https://example.com/test.zip"
    assert item.local == "/downloads/test.zip"
    assert item.state == DownloadItemState.INIT
    assert item.overwrite is False
    assert item.all_size == 0
    assert item.now_size == 0
    assert item.error == 0
    assert item.md5 is None
    assert item.sha1 is None
    assert item.sha256 is None
    assert item.later is None


def test_download_item_progress_zero():
    assert _item("empty", "https://example.com/empty", "/dev/null").progress() == 0.0


def test_download_item_progress_partial():
    item = _item("partial")
    item.all_size = 100
    item.now_size = 50
    assert item.progress() == 50.0


def test_download_item_progress_complete():
    item = _item("complete")
    item.all_size = 200
    item.now_size = 200
    assert item.progress() == 100.0


def test_download_item_with_md5():
    item = _item("with_md5").with_md5("d41d8cd98f00b204e9800998ecf8427e")
    assert item.md5 == "d41d8cd98f00b204e9800998ecf8427e"


def test_download_item_with_overwrite():
    assert _item("overwrite_test").with_overwrite(True).overwrite is True


def test_download_item_with_later():
    class Collect:
        def __init__(self):
            self.data = b""

        def run(self, reader):
            self.data = reader.read()

    later = Collect()
    item = _item().with_later(later)
    item.later.run(io.BytesIO(b"abc"))
    assert later.data == b"abc"


def test_download_item_state_transitions():
    item = _item("state_test")
    assert item.state == DownloadItemState.INIT
    for state in (DownloadItemState.WAIT, DownloadItemState.DOWNLOAD, DownloadItemState.DONE, DownloadItemState.ERROR):
        item.state = state
        assert item.state == state


def test_download_item_state_names():
    item = _item("names")
    assert item.state.value == "Init"
    seen = []
    for state in DownloadItemState:
        item.state = state
        seen.append(item.state.value)
    assert seen == ["Wait", "Download", "GetInfo", "Pause", "Init", "Action", "Done", "Error"]


def test_download_item_error_count():
    item = _item("error_count")
    assert item.error == 0
    item.error += 1
    assert item.error == 1
    item.error += 1
    assert item.error == 2


def test_download_item_with_sha():
    item = _item("sha_test").with_md5("md5_hash")
    item2 = _item("sha_test2", "https://example.com/file2", "/tmp/file2")
    item2.sha1 = "da39a3ee5e6b4b0d3255bfef95601890afd80709"
    item2.sha256 = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    assert item.md5 == "md5_hash"
    assert item2.sha1 == "da39a3ee5e6b4b0d3255bfef95601890afd80709"
    assert item2.sha256 == "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"


def test_update_type_carries_count():
    assert AddItem(3).count == 3


def test_task_add_item_and_progress():
    task = DownloadTask()
    assert task.progress() == 0.0
    first = _item("a")
    first.all_size = 300
    second = _item("b")
    second.all_size = 100
    task.add_item(first)
    task.add_item(second)
    assert task.total_size == 400
    assert task.items == [first, second]
    task.downloaded_size = 100
    assert task.progress() == 25.0


def test_task_cancel():
    task = DownloadTask()
    assert task.cancelled is False
    task.cancel()
    assert task.cancelled is True


def test_thread_download_stop():
    thread = DownloadThread(1)
    assert thread.stopped is False
    thread.download_stop()
    assert thread.stopped is True


def test_manager_stop_clears_everything():
    task = DownloadTask()
    thread = DownloadThread(0)
    manager = DownloadManager(threads=[thread], tasks=[task])
    manager.pending.append(_item())
    assert manager.get_state() is True
    manager.stop()
    assert len(manager.pending) == 0
    assert task.cancelled is True
    assert thread.stopped is True
    assert manager.get_state() is False


def test_manager_without_threads_is_idle():
    assert DownloadManager().get_state() is False


def test_manager_stops_on_core_stop():
    task = DownloadTask()
    manager = DownloadManager(tasks=[task])
    manager.init()
    events.invoke_stop()
    assert task.cancelled is True