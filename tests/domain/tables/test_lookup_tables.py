from mediaconv.domain.tables import (
    CODEC_IDS,
    LANGUAGES,
    code3_from_code2,
    language_from_code3,
    post_translate_code3,
    post_translate_language,
    subtitle_format,
    translate_codec,
    translate_container,
)


def test_every_codec_token_normalizes_case_insensitively():
    for token, canonical in CODEC_IDS.items():
        assert translate_codec(token) == canonical
        assert translate_codec(token.upper()) == canonical


def test_unknown_codec_passes_through_lowercased():
    assert translate_codec("HEVC") == "hevc"
    assert translate_codec("") == ""
    assert translate_codec(None) == ""


def test_codec_lookup_is_exact_not_substring():
    # "avc" is a key, "avc1x" is not
    assert translate_codec("AVC1X") == "avc1x"


def test_tables_are_read_only():
    try:
        CODEC_IDS["new"] = "x"  # type: ignore[index]
    except TypeError:
        pass
    else:
        raise AssertionError("CODEC_IDS must be immutable")


def test_container_substring_first_match_wins():
    assert translate_container("Matroska") == "mkv"
    assert translate_container("MPEG-4") == "mp4"
    assert translate_container("CDXA/MPEG-PS") == "mpeg"
    assert translate_container("Windows Media") == "asf"
    assert translate_container("WebM") == "webm"


def test_quicktime_codec_id_forces_mov():
    assert translate_container("MPEG-4", "qt  ") == "mov"
    assert translate_container("MPEG-4", "isom") == "mp4"


def test_subtitle_formats():
    assert subtitle_format("S_TEXT/UTF8", "UTF-8") == "srt"
    assert subtitle_format("S_TEXT/ASS", "ASS") == "ass"
    assert subtitle_format("S_HDMV/PGS", "PGS") == "pgs"
    assert subtitle_format("", "Apple text") == "ttxt"
    assert subtitle_format(None, "Timed Text") is None


def test_language_triplets():
    assert len(LANGUAGES) >= 180
    assert language_from_code3("eng") == "english"
    assert language_from_code3("ZUL") == "zulu"
    assert language_from_code3("chi") == language_from_code3("zho") == "chinese"
    assert language_from_code3("xyz", "Klingon") == "Klingon"
    assert language_from_code3("", "") == ""
    assert code3_from_code2("zh") == "chi"
    assert code3_from_code2("en") == "eng"
    assert code3_from_code2("qq") is None


def test_code3_aliases_substring_first_match():
    assert post_translate_code3("ces") == "cz"
    assert post_translate_code3("DEU") == "ger"
    assert post_translate_code3("fra") == "fre"
    assert post_translate_code3("ron") == "rum"
    assert post_translate_code3("eng") == "eng"


def test_language_name_aliases():
    assert post_translate_language("Dutch") == "Nederlands"
    assert post_translate_language("dutch; flemish") == "Nederlands"
    assert post_translate_language("English") == "english"
