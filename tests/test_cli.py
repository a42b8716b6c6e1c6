"""
Tests for the cvdemo command line.
"""

import pytest

from cvdemo import cli
from cvdemo.cv.errors import CaptureError
from cvdemo.cv.fourcc import FourCC
from cvdemo.utils.config import SETTINGS, Settings, resolve_input


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def fake_transcode(source, output, fourcc, transform=None):
        recorded.append({"source": source, "output": output, "fourcc": fourcc, "transform": transform})

    monkeypatch.setattr(cli, "transcode", fake_transcode)
    monkeypatch.setattr(cli, "capture_main", lambda url: recorded.append({"url": url}) or 0)
    monkeypatch.setattr(cli, "setup_logger", lambda path=None: None)
    return recorded


class TestDefaults:

    def test_canny_default_source(self, calls):
        assert cli.main(["canny"]) == 0
        call = calls[0]
        assert call["source"] == SETTINGS.default_source
        assert call["output"] == SETTINGS.canny_output
        assert call["fourcc"] == FourCC("DIVX")
        assert call["transform"] is cli.colour_edges

    def test_writer_default_source(self, calls):
        assert cli.main(["writer"]) == 0
        call = calls[0]
        assert call["source"] == SETTINGS.default_source
        assert call["output"] == SETTINGS.writer_output
        assert call["fourcc"] == FourCC("XVID")
        assert call["transform"] is None

    def test_capture_default_camera(self, calls):
        assert cli.main(["capture"]) == 0
        assert calls == [{"url": "-1"}]

    def test_explicit_source(self, calls):
        cli.main(["writer", "clip.mp4"])
        cli.main(["capture", "2"])
        assert calls[0]["source"] == "clip.mp4"
        assert calls[1] == {"url": "2"}


def test_capture_error_exit_status(monkeypatch):
    def fail(*args, **kwargs):
        raise CaptureError("Unable to open source: nope.mp4")

    monkeypatch.setattr(cli, "transcode", fail)
    monkeypatch.setattr(cli, "setup_logger", lambda path=None: None)
    assert cli.main(["canny", "nope.mp4"]) == 1


def test_capture_exit_status_passthrough(calls, monkeypatch):
    monkeypatch.setattr(cli, "capture_main", lambda url: 1)
    assert cli.main(["capture", "5"]) == 1


def test_requires_subcommand():
    with pytest.raises(SystemExit):
        cli.main([])


def test_end_to_end_writer(sample_video, tmp_path, monkeypatch):
    settings = Settings(output_dir=tmp_path / "out", writer_fourcc="MJPG")
    monkeypatch.setattr(cli, "SETTINGS", settings)
    monkeypatch.setattr(cli, "setup_logger", lambda path=None: None)

    assert cli.main(["writer", sample_video.path]) == 0
    assert settings.writer_output.exists()


class TestSettings:

    def test_derived_outputs(self, tmp_path):
        settings = Settings(output_dir=tmp_path)
        assert settings.canny_output == tmp_path / "canny-python.avi"
        assert settings.writer_output == tmp_path / "writer-python.avi"

    def test_output_dir_coerced(self):
        assert Settings(output_dir="somewhere").canny_output.parent.name == "somewhere"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_resolve_input_default(self, value):
        assert resolve_input(value, "resources/traffic.mp4") == "resources/traffic.mp4"

    def test_resolve_input_given(self):
        assert resolve_input("0", "-1") == "0"
