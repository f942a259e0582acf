import dataclasses

import pytest

from mediaconv.domain.entities.media import (
    AudioStream,
    MediaDescriptor,
    Part,
    TextStream,
    VideoStream,
)
from mediaconv.domain.enums.stream_kind import StreamKind


def test_stream_defaults_and_kind():
    v = VideoStream()
    assert v.kind is StreamKind.video
    assert v.stream_type == 1
    assert v.pixel_aspect == 1.0
    assert v.default is None and v.forced is None
    assert AudioStream().stream_type == 2
    assert TextStream().stream_type == 3


def test_descriptor_is_immutable():
    d = MediaDescriptor(container="mkv", parts=(Part(),))
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.container = "mp4"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        d.part.size = 1  # type: ignore[misc]


def test_part_views_split_by_kind():
    p = Part(streams=(VideoStream(index=0), AudioStream(index=1), AudioStream(index=2), TextStream(index=3)))
    assert len(p.video_streams) == 1
    assert [a.index for a in p.audio_streams] == [1, 2]
    assert p.text_streams[0].index == 3
