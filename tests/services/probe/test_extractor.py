import threading

import pytest

from mediaconv.domain.policies.fields import ProbeFields
from mediaconv.services.probe.errors import ProbeCancelled
from mediaconv.services.probe.extractor import MediaExtractor, read_general


def test_read_general_facts(fake_probe):
    fp = fake_probe(
        {"Format": "Flash Video", "Duration": "61000.5", "FileSize": "1048576", "BitRate": "812499", "MenuCount": "1"},
        [{}],
        [{}, {}],
    )
    g = read_general(ProbeFields(fp))
    assert g.container == "flv"
    assert g.duration == 61000
    assert g.size == 1048576
    assert g.bitrate == 812
    assert g.menu_count == 1
    assert (g.video_count, g.audio_count, g.text_count) == (1, 2, 0)


def test_read_general_missing_fields(fake_probe):
    g = read_general(ProbeFields(fake_probe({})))
    assert g.container is None
    assert g.duration == 0
    assert g.size is None
    assert g.bitrate is None


def test_extract_full_pipeline(fake_probe):
    fp = fake_probe(
        {"Format": "AVI", "Duration": "5000", "BitRate": "1500000"},
        [{"ID": "0", "Codec": "XVID", "Width": "640", "Height": "480", "Format_Profile": "Advanced Simple@L5",
          "Duration": "5200", "FrameRate": "29.970", "ScanType": "Interlaced"}],
        [{"ID": "1", "Codec": "MPA1L3", "BitRate": "192000", "Channel(s)": "2", "Format_Profile": "Layer 3",
          "Language/String3": "jpn", "Language/String1": "Japanese"}],
        [{"ID": "2", "CodecID": "S_TEXT/UTF8", "Subtitle": "Signs", "Forced": "Yes",
          "Language/String3": "eng"}],
    )
    d = MediaExtractor(resolution=lambda w, h: f"{h}p").extract(fp, "movie.avi")

    assert d is not None
    assert d.container == "avi"
    assert d.duration == 5200
    assert (d.width, d.height) == (640, 480)
    assert d.video_resolution == "480p"
    assert d.aspect_ratio == 1.33
    assert d.video_frame_rate == "NTSC"
    assert d.video_codec == "mpeg4"
    assert d.audio_codec == "mp3"
    assert d.audio_channels == 2

    video, audio, text = d.part.video_streams[0], d.part.audio_streams[0], d.part.text_streams[0]
    assert video.profile == "asp"
    assert video.level == 5
    assert video.bitrate == 1500 - 192
    assert audio.profile is None
    assert audio.language == "japanese"
    assert text.format == "srt"
    assert text.title == "Signs"
    assert text.language_code == "eng"
    assert text.forced == 0
    assert [s.index for s in d.part.streams] == [0, 1, 2]


def test_extract_returns_none_when_open_fails(fake_probe):
    fp = fake_probe({"Format": "AVI"}, opens=False)
    assert MediaExtractor().extract(fp, "x.avi") is None
    assert fp.opened == ["x.avi"]


def test_extract_stops_when_cancelled(fake_probe):
    stop = threading.Event()
    stop.set()
    fp = fake_probe({"Format": "AVI"}, [{}])
    with pytest.raises(ProbeCancelled):
        MediaExtractor(stop).extract(fp, "x.avi")
    assert fp.opened == []


def test_cancel_between_streams(fake_probe):
    stop = threading.Event()

    class _Cancelling(fake_probe):
        def get(self, kind, index, field):
            if kind == "Video" and field == "Width":
                stop.set()
            return super().get(kind, index, field)

    fp = _Cancelling({"Format": "AVI"}, [{"Width": "640"}, {"Width": "640"}])
    with pytest.raises(ProbeCancelled):
        MediaExtractor(stop).extract(fp, "x.avi")
