"""
Language catalog

The closed set of ISO 639-1 language codes the negotiation engine knows about,
each with its English and native display name, plus RTL helpers.

``LangCode`` members are ``str`` enum values, so they hash, sort and compare
like their lowercase code:

    >>> LangCode.parse("es") is LangCode.ES
    True
    >>> LangCode.FR.english_name, LangCode.DE.native_name
    ('French', 'Deutsch')
"""

from __future__ import annotations

from enum import Enum

from fastapi_lang.exceptions import NotAcceptableError

# ── Constants ─────────────────────────────────────────────────────────────────

# ISO 639-1 base codes whose scripts read right-to-left
RTL_LOCALES: frozenset[str] = frozenset({"ar", "dv", "fa", "ha", "he", "ks", "ku", "ps", "sd", "ug", "ur", "yi"})


class LangCode(str, Enum):
    """A known language code: ``MEMBER = (code, English name, native name)``."""

    english_name: str
    native_name: str

    AA = ("aa", "Afar", "Afaraf")
    AB = ("ab", "Abkhaz", "аҧсуа бызшәа")
    AF = ("af", "Afrikaans", "Afrikaans")
    AK = ("ak", "Akan", "Akan")
    SQ = ("sq", "Albanian", "Shqip")
    AM = ("am", "Amharic", "አማርኛ")
    AR = ("ar", "Arabic", "العربية")
    AN = ("an", "Aragonese", "aragonés")
    HY = ("hy", "Armenian", "Հայերեն")
    AS = ("as", "Assamese", "অসমীয়া")
    AV = ("av", "Avaric", "авар мацӀ")
    AE = ("ae", "Avestan", "avesta")
    AY = ("ay", "Aymara", "aymar aru")
    AZ = ("az", "Azerbaijani", "azərbaycan dili")
    BM = ("bm", "Bambara", "bamanankan")
    BA = ("ba", "Bashkir", "башҡорт теле")
    EU = ("eu", "Basque", "euskara")
    BE = ("be", "Belarusian", "беларуская мова")
    BN = ("bn", "Bengali", "বাংলা")
    BH = ("bh", "Bihari", "भोजपुरी")
    BI = ("bi", "Bislama", "Bislama")
    BS = ("bs", "Bosnian", "bosanski jezik")
    BR = ("br", "Breton", "brezhoneg")
    BG = ("bg", "Bulgarian", "български език")
    MY = ("my", "Burmese", "ဗမာစာ")
    CA = ("ca", "Catalan", "català")
    CH = ("ch", "Chamorro", "Chamoru")
    CE = ("ce", "Chechen", "нохчийн мотт")
    NY = ("ny", "Chichewa", "chiCheŵa")
    ZH = ("zh", "Chinese", "中文")
    CV = ("cv", "Chuvash", "чӑваш чӗлхи")
    KW = ("kw", "Cornish", "Kernewek")
    CO = ("co", "Corsican", "corsu")
    CR = ("cr", "Cree", "ᓀᐦᐃᔭᐍᐏᐣ")
    HR = ("hr", "Croatian", "hrvatski jezik")
    CS = ("cs", "Czech", "čeština")
    DA = ("da", "Danish", "dansk")
    DV = ("dv", "Divehi", "ދިވެހި")
    NL = ("nl", "Dutch", "Nederlands")
    DZ = ("dz", "Dzongkha", "རྫོང་ཁ")
    EN = ("en", "English", "English")
    EO = ("eo", "Esperanto", "Esperanto")
    ET = ("et", "Estonian", "eesti")
    EE = ("ee", "Ewe", "Eʋegbe")
    FO = ("fo", "Faroese", "føroyskt")
    FJ = ("fj", "Fijian", "vosa Vakaviti")
    FI = ("fi", "Finnish", "suomi")
    FR = ("fr", "French", "français")
    FF = ("ff", "Fula", "Fulfulde")
    GL = ("gl", "Galician", "galego")
    KA = ("ka", "Georgian", "ქართული")
    DE = ("de", "German", "Deutsch")
    EL = ("el", "Greek", "ελληνικά")
    GN = ("gn", "Guaraní", "Avañe'ẽ")
    GU = ("gu", "Gujarati", "ગુજરાતી")
    HT = ("ht", "Haitian", "Kreyòl ayisyen")
    HA = ("ha", "Hausa", "(Hausa) هَوُسَ")
    HE = ("he", "Hebrew", "עברית")
    HZ = ("hz", "Herero", "Otjiherero")
    HI = ("hi", "Hindi", "हिन्दी")
    HO = ("ho", "Hiri Motu", "Hiri Motu")
    HU = ("hu", "Hungarian", "magyar")
    IA = ("ia", "Interlingua", "Interlingua")
    ID = ("id", "Indonesian", "Bahasa Indonesia")
    IE = ("ie", "Interlingue", "Interlingue")
    GA = ("ga", "Irish", "Gaeilge")
    IG = ("ig", "Igbo", "Asụsụ Igbo")
    IK = ("ik", "Inupiaq", "Iñupiaq")
    IO = ("io", "Ido", "Ido")
    IS = ("is", "Icelandic", "Íslenska")
    IT = ("it", "Italian", "Italiano")
    IU = ("iu", "Inuktitut", "ᐃᓄᒃᑎᑐᑦ")
    JA = ("ja", "Japanese", "日本語 (にほんご)")
    JV = ("jv", "Javanese", "ꦧꦱꦗꦮ")
    KL = ("kl", "Kalaallisut", "kalaallisut")
    KN = ("kn", "Kannada", "ಕನ್ನಡ")
    KR = ("kr", "Kanuri", "Kanuri")
    KS = ("ks", "Kashmiri", "कश्मीरी")
    KK = ("kk", "Kazakh", "қазақ тілі")
    KM = ("km", "Khmer", "ខ្មែរ")
    KI = ("ki", "Kikuyu", "Gĩkũyũ")
    RW = ("rw", "Kinyarwanda", "Ikinyarwanda")
    KY = ("ky", "Kyrgyz", "Кыргызча")
    KV = ("kv", "Komi", "коми кыв")
    KG = ("kg", "Kongo", "Kikongo")
    KO = ("ko", "Korean", "한국어")
    KU = ("ku", "Kurdish", "Kurdî")
    KJ = ("kj", "Kwanyama", "Kuanyama")
    LA = ("la", "Latin", "lingua latina")
    LB = ("lb", "Luxembourgish", "Lëtzebuergesch")
    LG = ("lg", "Ganda", "Luganda")
    LI = ("li", "Limburgish", "Limburgs")
    LN = ("ln", "Lingala", "Lingála")
    LO = ("lo", "Lao", "ພາສາລາວ")
    LT = ("lt", "Lithuanian", "lietuvių kalba")
    LU = ("lu", "Luba-Katanga", "Tshiluba")
    LV = ("lv", "Latvian", "latviešu valoda")
    GV = ("gv", "Manx", "Gaelg")
    MK = ("mk", "Macedonian", "македонски јазик")
    MG = ("mg", "Malagasy", "fiteny malagasy")
    MS = ("ms", "Malay", "bahasa Melayu")
    ML = ("ml", "Malayalam", "മലയാളം")
    MT = ("mt", "Maltese", "Malti")
    MI = ("mi", "Māori", "te reo Māori")
    MR = ("mr", "Marathi", "मराठी")
    MH = ("mh", "Marshallese", "Kajin M̧ajeļ")
    MN = ("mn", "Mongolian", "Монгол хэл")
    NA = ("na", "Nauruan", "Dorerin Naoero")
    NV = ("nv", "Navajo", "Diné bizaad")
    ND = ("nd", "Northern Ndebele", "isiNdebele")
    NE = ("ne", "Nepali", "नेपाली")
    NG = ("ng", "Ndonga", "Owambo")
    NB = ("nb", "Norwegian Bokmål", "Norsk bokmål")
    NN = ("nn", "Norwegian Nynorsk", "Norsk nynorsk")
    NO = ("no", "Norwegian", "Norsk")
    II = ("ii", "Nuosu", "ꆈꌠ꒿ Nuosuhxop")
    NR = ("nr", "Southern Ndebele", "isiNdebele")
    OC = ("oc", "Occitan", "occitan")
    OJ = ("oj", "Ojibwe", "ᐊᓂᔑᓈᐯᒧᐎᓐ")
    CU = ("cu", "Old Church Slavonic", "ѩзыкъ словѣньскъ")
    OM = ("om", "Oromo", "Afaan Oromoo")
    OR = ("or", "Oriya", "ଓଡ଼ିଆ")
    OS = ("os", "Ossetian", "ирон æвзаг")
    PA = ("pa", "Punjabi", "ਪੰਜਾਬੀ")
    PI = ("pi", "Pāli", "पाऴि")
    FA = ("fa", "Persian", "فارسی")
    PL = ("pl", "Polish", "język polski")
    PS = ("ps", "Pashto", "پښتو")
    PT = ("pt", "Portuguese", "Português")
    QU = ("qu", "Quechua", "Runa Simi")
    RM = ("rm", "Romansh", "rumantsch grischun")
    RN = ("rn", "Kirundi", "Ikirundi")
    RO = ("ro", "Romanian", "Română")
    RU = ("ru", "Russian", "Русский")
    SA = ("sa", "Sanskrit", "संस्कृतम्")
    SC = ("sc", "Sardinian", "sardu")
    SD = ("sd", "Sindhi", "सिन्धी")
    SE = ("se", "Northern Sami", "Davvisámegiella")
    SM = ("sm", "Samoan", "gagana fa'a Samoa")
    SG = ("sg", "Sango", "yângâ tî sängö")
    SR = ("sr", "Serbian", "српски језик")
    GD = ("gd", "Gaelic", "Gàidhlig")
    SN = ("sn", "Shona", "chiShona")
    SI = ("si", "Sinhalese", "සිංහල")
    SK = ("sk", "Slovak", "slovenčina")
    SL = ("sl", "Slovene", "slovenski jezik")
    SO = ("so", "Somali", "Soomaaliga")
    ST = ("st", "Southern Sotho", "Sesotho")
    ES = ("es", "Spanish", "Español")
    SU = ("su", "Sundanese", "Basa Sunda")
    SW = ("sw", "Swahili", "Kiswahili")
    SS = ("ss", "Swati", "SiSwati")
    SV = ("sv", "Swedish", "svenska")
    TA = ("ta", "Tamil", "தமிழ்")
    TE = ("te", "Telugu", "తెలుగు")
    TG = ("tg", "Tajik", "тоҷикӣ")
    TH = ("th", "Thai", "ไทย")
    TI = ("ti", "Tigrinya", "ትግርኛ")
    BO = ("bo", "Tibetan", "བོད་ཡིག")
    TK = ("tk", "Turkmen", "Türkmen")
    TL = ("tl", "Tagalog", "Wikang Tagalog")
    TN = ("tn", "Tswana", "Setswana")
    TO = ("to", "Tonga", "faka Tonga")
    TR = ("tr", "Turkish", "Türkçe")
    TS = ("ts", "Tsonga", "Xitsonga")
    TT = ("tt", "Tatar", "татар теле")
    TW = ("tw", "Twi", "Twi")
    TY = ("ty", "Tahitian", "Reo Tahiti")
    UG = ("ug", "Uyghur", "ئۇيغۇرچە")
    UK = ("uk", "Ukrainian", "Українська")
    UR = ("ur", "Urdu", "اردو")
    UZ = ("uz", "Uzbek", "Oʻzbek")
    VE = ("ve", "Venda", "Tshivenḓa")
    VI = ("vi", "Vietnamese", "Tiếng Việt")
    VO = ("vo", "Volapük", "Volapük")
    WA = ("wa", "Walloon", "walon")
    CY = ("cy", "Welsh", "Cymraeg")
    WO = ("wo", "Wolof", "Wollof")
    FY = ("fy", "Western Frisian", "Frysk")
    XH = ("xh", "Xhosa", "isiXhosa")
    YI = ("yi", "Yiddish", "ייִדיש")
    YO = ("yo", "Yoruba", "Yorùbá")
    ZA = ("za", "Zhuang", "Saɯ cueŋƅ")
    ZU = ("zu", "Zulu", "isiZulu")

    def __new__(cls, code: str, english_name: str, native_name: str):
        obj = str.__new__(cls, code)
        obj._value_ = code
        obj.english_name = english_name
        obj.native_name = native_name
        return obj

    def __str__(self) -> str:
        return self.value

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    @property
    def is_rtl(self) -> bool:
        return self.value in RTL_LOCALES

    @classmethod
    def get(cls, text: str) -> LangCode | None:
        """Return the member whose code is exactly ``text``, or None."""
        return cls._value2member_map_.get(text)

    @classmethod
    def parse(cls, text: str) -> LangCode:
        """Return the member whose code is exactly ``text``.

        Matching is case-sensitive: codes are lowercase.

        Raises:
            NotAcceptableError: ``text`` is not a known language code.
        """
        code = cls.get(text)
        if code is None:
            raise NotAcceptableError()
        return code


# Every member in table order
ALL_CODES: tuple[LangCode, ...] = tuple(LangCode)

# (code, English name, native name) rows, for consumers that want plain data
LANGUAGE_TABLE: tuple[tuple[str, str, str], ...] = tuple(
    (lang.value, lang.english_name, lang.native_name) for lang in ALL_CODES
)


# ── Public helpers ────────────────────────────────────────────────────────────


def is_rtl_locale(locale: str) -> bool:
    """Return True when the given locale tag is right-to-left.

    Compares only the base language tag (before the first hyphen), so
    both "ar" and "ar-SA" are correctly identified as RTL.
    """
    base = locale.split("-")[0].lower()
    return base in RTL_LOCALES


def get_language_info(code: LangCode) -> dict[str, str | bool]:
    """Return a metadata dict describing the given language.

    Args:
        code: A catalog member, e.g. ``LangCode.AR``.

    Returns:
        Dict with keys: ``code``, ``english_name``, ``native_name``, ``is_rtl``.
    """
    return {
        "code": code.value,
        "english_name": code.english_name,
        "native_name": code.native_name,
        "is_rtl": code.is_rtl,
    }
