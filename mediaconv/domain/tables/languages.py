# mediaconv/domain/tables/languages.py
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional, Tuple

# 3-letter code fragment -> catalog code. Substring match, first entry wins.
CODE3_POST: Mapping[str, str] = MappingProxyType({
    "ces": "cz",
    "deu": "ger",
    "fra": "fre",
    "ron": "rum",
})

# Resolved language name fragment -> catalog name. Substring match, first entry wins.
LANGUAGE_POST: Mapping[str, str] = MappingProxyType({
    "dutch": "Nederlands",
})

# (name, ISO 639-1, ISO 639-2) triplets. Some names carry both the B and T 3-letter forms.
LANGUAGES: Tuple[Tuple[str, str, str], ...] = (
    ("abkhazian", "ab", "abk"),
    ("afar", "aa", "aar"),
    ("afrikaans", "af", "afr"),
    ("akan", "ak", "aka"),
    ("albanian", "sq", "sqi"),
    ("amharic", "am", "amh"),
    ("arabic", "ar", "ara"),
    ("aragonese", "an", "arg"),
    ("armenian", "hy", "hye"),
    ("assamese", "as", "asm"),
    ("avaric", "av", "ava"),
    ("avestan", "ae", "ave"),
    ("aymara", "ay", "aym"),
    ("azerbaijani", "az", "aze"),
    ("bambara", "bm", "bam"),
    ("bashkir", "ba", "bak"),
    ("basque", "eu", "eus"),
    ("belarusian", "be", "bel"),
    ("bengali", "bn", "ben"),
    ("bihari languages", "bh", "bih"),
    ("bislama", "bi", "bis"),
    ("bosnian", "bs", "bos"),
    ("breton", "br", "bre"),
    ("bulgarian", "bg", "bul"),
    ("burmese", "my", "mya"),
    ("catalan", "ca", "cat"),
    ("chamorro", "ch", "cha"),
    ("chechen", "ce", "che"),
    ("chinese", "zh", "chi"),
    ("chinese", "zh", "zho"),
    ("church slavic", "cu", "chu"),
    ("chuvash", "cv", "chv"),
    ("cornish", "kw", "cor"),
    ("corsican", "co", "cos"),
    ("cree", "cr", "cre"),
    ("croatian", "hr", "hrv"),
    ("czech", "cs", "ces"),
    ("danish", "da", "dan"),
    ("dhivehi", "dv", "div"),
    ("dutch", "nl", "nld"),
    ("dzongkha", "dz", "dzo"),
    ("english", "en", "eng"),
    ("esperanto", "eo", "epo"),
    ("estonian, eesti keel", "et", "est"),
    ("ewe", "ee", "ewe"),
    ("faroese", "fo", "fao"),
    ("fijian", "fj", "fij"),
    ("finnish", "fi", "fin"),
    ("french", "fr", "fra"),
    ("fulah", "ff", "ful"),
    ("galician", "gl", "glg"),
    ("ganda", "lg", "lug"),
    ("georgian", "ka", "kat"),
    ("german", "de", "deu"),
    ("guarani", "gn", "grn"),
    ("gujarati", "gu", "guj"),
    ("haitian", "ht", "hat"),
    ("hausa", "ha", "hau"),
    ("hebrew", "he", "heb"),
    ("herero", "hz", "her"),
    ("hindi", "hi", "hin"),
    ("hiri motu", "ho", "hmo"),
    ("hungarian", "hu", "hun"),
    ("icelandic", "is", "ice"),
    ("icelandic", "is", "isl"),
    ("ido", "io", "ido"),
    ("igbo", "ig", "ibo"),
    ("indonesian", "id", "ind"),
    ("interlingua", "ia", "ina"),
    ("interlingue", "ie", "ile"),
    ("inuktitut", "iu", "iku"),
    ("inupiaq", "ik", "ipk"),
    ("irish", "ga", "gle"),
    ("italian", "it", "ita"),
    ("japanese", "ja", "jpn"),
    ("javanese", "jv", "jav"),
    ("kalaallisut", "kl", "kal"),
    ("kannada", "kn", "kan"),
    ("kanuri", "kr", "kau"),
    ("kashmiri", "ks", "kas"),
    ("kazakh", "kk", "kaz"),
    ("kentral khmer", "km", "khm"),
    ("kikuyu", "ki", "kik"),
    ("kinyarwanda", "rw", "kin"),
    ("kirghiz", "ky", "kir"),
    ("komi", "kv", "kom"),
    ("kongo", "kg", "kon"),
    ("korean", "ko", "kor"),
    ("kuanyama", "kj", "kua"),
    ("kurdish", "ku", "kur"),
    ("lao", "lo", "lao"),
    ("latin", "la", "lat"),
    ("latvian", "lv", "lav"),
    ("limburgan", "li", "lim"),
    ("lingala", "ln", "lin"),
    ("lithuanian", "lt", "lit"),
    ("luba-katanga", "lu", "lub"),
    ("luxembourgish", "lb", "ltz"),
    ("macedonian", "mk", "mkd"),
    ("malagasy", "mg", "mlg"),
    ("malay", "ms", "msa"),
    ("malayalam", "ml", "mal"),
    ("maltese", "mt", "mlt"),
    ("manx", "gv", "glv"),
    ("maori", "mi", "mri"),
    ("marathi", "mr", "mar"),
    ("marshallese", "mh", "mah"),
    ("modern greek", "el", "ell"),
    ("mongolian", "mn", "mon"),
    ("nauru", "na", "nau"),
    ("navajo", "nv", "nav"),
    ("ndonga", "ng", "ndo"),
    ("nepali", "ne", "nep"),
    ("norsk bokmål", "nb", "nob"),
    ("north ndebele", "nd", "nde"),
    ("northern sami", "se", "sme"),
    ("norwegian nynorsk", "nn", "nno"),
    ("norwegian", "no", "nor"),
    ("nyanja", "ny", "nya"),
    ("occitan", "oc", "oci"),
    ("ojibwa", "oj", "oji"),
    ("oriya", "or", "ori"),
    ("oromo", "om", "orm"),
    ("ossetian", "os", "oss"),
    ("pali", "pi", "pli"),
    ("panjabi", "pa", "pan"),
    ("persian", "fa", "fas"),
    ("polish", "pl", "pol"),
    ("portuguese", "pt", "por"),
    ("pushto", "ps", "pus"),
    ("quechua", "qu", "que"),
    ("romanian", "ro", "ron"),
    ("romansh", "rm", "roh"),
    ("rundi", "rn", "run"),
    ("russian", "ru", "rus"),
    ("samoan", "sm", "smo"),
    ("sango", "sg", "sag"),
    ("sanskrit", "sa", "san"),
    ("sardinian", "sd", "snd"),
    ("sardu", "sc", "srd"),
    ("scottish gaelic", "gd", "gla"),
    ("serbian", "sr", "srp"),
    ("shona", "sn", "sna"),
    ("sichuan yi", "ii", "iii"),
    ("sinhala", "si", "sin"),
    ("slovak", "sk", "slk"),
    ("slovenian", "sl", "slv"),
    ("somali", "so", "som"),
    ("south ndebele", "nr", "nbl"),
    ("southern sotho", "st", "sot"),
    ("spanish", "es", "spa"),
    ("sundanese", "su", "sun"),
    ("swahili", "sw", "swa"),
    ("swati", "ss", "ssw"),
    ("swedish", "sv", "swe"),
    ("tagalog", "tl", "tgl"),
    ("tahitian", "ty", "tah"),
    ("tajik", "tg", "tgk"),
    ("tamil", "ta", "tam"),
    ("tatar", "tt", "tat"),
    ("telugu", "te", "tel"),
    ("thai", "th", "tha"),
    ("tibetan", "bo", "bod"),
    ("tigrinya", "ti", "tir"),
    ("tonga", "to", "ton"),
    ("tsonga", "ts", "tso"),
    ("tswana", "tn", "tsn"),
    ("turkish", "tr", "tur"),
    ("turkmen", "tk", "tuk"),
    ("twi", "tw", "twi"),
    ("uighur", "ug", "uig"),
    ("ukrainian", "uk", "ukr"),
    ("urdu", "ur", "urd"),
    ("uzbek", "uz", "uzb"),
    ("venda", "ve", "ven"),
    ("vietnamese", "vi", "vie"),
    ("volapük", "vo", "vol"),
    ("walloon", "wa", "wln"),
    ("welsh", "cy", "cym"),
    ("western frisian", "fy", "fry"),
    ("wolof", "wo", "wol"),
    ("xhosa", "xh", "xho"),
    ("yiddish", "yi", "yid"),
    ("yoruba", "yo", "yor"),
    ("zhuang", "za", "zha"),
    ("zulu", "zu", "zul"),
)

_BY_CODE3: Mapping[str, str] = MappingProxyType({c3: name for name, _, c3 in reversed(LANGUAGES)})
_CODE2_TO_CODE3: Mapping[str, str] = MappingProxyType({c2: c3 for _, c2, c3 in reversed(LANGUAGES)})


def language_from_code3(code3: Optional[str], full: Optional[str] = None) -> str:
    """Language name for a 3-letter code, else whatever full name the probe reported."""
    return _BY_CODE3.get((code3 or "").strip().lower(), full or "")


def code3_from_code2(code2: Optional[str]) -> Optional[str]:
    return _CODE2_TO_CODE3.get((code2 or "").strip().lower())


def post_translate_code3(code3: Optional[str]) -> str:
    c = (code3 or "").lower()
    for key, value in CODE3_POST.items():
        if key in c:
            return value
    return c


def post_translate_language(name: Optional[str]) -> str:
    c = (name or "").lower()
    for key, value in LANGUAGE_POST.items():
        if key in c:
            return value
    return c
