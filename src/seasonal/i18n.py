"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "vernal_equinox": {
        "ko": "춘분",
        "en": "Vernal equinox",
    },
    "summer_solstice": {
        "ko": "하지",
        "en": "Summer solstice",
    },
    "autumnal_equinox": {
        "ko": "추분",
        "en": "Autumnal equinox",
    },
    "winter_solstice": {
        "ko": "동지",
        "en": "Winter solstice",
    },
    "header": {
        "ko": "{year}년 계절 ({hemisphere})",
        "en": "Seasons of {year} ({hemisphere})",
    },
    "hemisphere_north": {
        "ko": "북반구",
        "en": "northern hemisphere",
    },
    "hemisphere_south": {
        "ko": "남반구",
        "en": "southern hemisphere",
    },
    "label_midpoint": {
        "ko": "중간점",
        "en": "Midpoint",
    },
    "error_address": {
        "ko": "주소를 찾을 수 없어요. ({error})",
        "en": "Address not found. Try a more specific address. ({error})",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key
