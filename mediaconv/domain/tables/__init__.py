from mediaconv.domain.tables.codecs import CODEC_IDS, translate_codec
from mediaconv.domain.tables.containers import (
    FILE_CONTAINERS,
    SUBTITLE_FORMATS,
    subtitle_format,
    translate_container,
)
from mediaconv.domain.tables.languages import (
    CODE3_POST,
    LANGUAGE_POST,
    LANGUAGES,
    code3_from_code2,
    language_from_code3,
    post_translate_code3,
    post_translate_language,
)
__all__ = [
    "CODEC_IDS",
    "translate_codec",
    "FILE_CONTAINERS",
    "SUBTITLE_FORMATS",
    "subtitle_format",
    "translate_container",
    "CODE3_POST",
    "LANGUAGE_POST",
    "LANGUAGES",
    "code3_from_code2",
    "language_from_code3",
    "post_translate_code3",
    "post_translate_language",
]
