"""Supported locales and the language names used in directives."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class Locale:
    code: str
    label: str
    group: str


LOCALES: Tuple[Locale, ...] = (
    Locale("en-US", "English (US)", "English"),
    Locale("en-GB", "English (UK)", "English"),
    Locale("en-CA", "English (CA)", "English"),
    Locale("en-AU", "English (AU)", "English"),
    Locale("es-ES", "Español (España)", "Español"),
    Locale("es-MX", "Español (México)", "Español"),
    Locale("es-AR", "Español (Argentina)", "Español"),
    Locale("es-CL", "Español (Chile)", "Español"),
    Locale("fr-FR", "Français (France)", "Français"),
    Locale("fr-CA", "Français (Canada)", "Français"),
    Locale("de-DE", "Deutsch (Deutschland)", "Deutsch"),
    Locale("it-IT", "Italiano (Italia)", "Italiano"),
    Locale("pt-PT", "Português (Portugal)", "Português"),
    Locale("pt-BR", "Português (Brasil)", "Português"),
    Locale("nl-NL", "Nederlands (Nederland)", "Nederlands"),
    Locale("sv-SE", "Svenska (Sverige)", "Nordic"),
    Locale("no-NO", "Norsk (Norge)", "Nordic"),
    Locale("da-DK", "Dansk (Danmark)", "Nordic"),
    Locale("fi-FI", "Suomi (Suomi)", "Nordic"),
    Locale("pl-PL", "Polski (Polska)", "Central/Eastern Europe"),
    Locale("cs-CZ", "Čeština (Česko)", "Central/Eastern Europe"),
    Locale("sk-SK", "Slovenčina (Slovensko)", "Central/Eastern Europe"),
    Locale("ro-RO", "Română (România)", "Central/Eastern Europe"),
    Locale("hu-HU", "Magyar (Magyarország)", "Central/Eastern Europe"),
    Locale("ru-RU", "Русский (Россия)", "Cyrillic"),
    Locale("uk-UA", "Українська (Україна)", "Cyrillic"),
    Locale("tr-TR", "Türkçe (Türkiye)", "Middle East"),
    Locale("ar-SA", "العربية (السعودية)", "Arabic/RTL"),
    Locale("he-IL", "עברית (ישראל)", "Arabic/RTL"),
    Locale("hi-IN", "हिन्दी (भारत)", "South Asia"),
    Locale("bn-BD", "বাংলা (বাংলাদেশ)", "South Asia"),
    Locale("ur-PK", "اردو (پاکستان)", "South Asia"),
    Locale("id-ID", "Bahasa Indonesia", "SEA"),
    Locale("ms-MY", "Bahasa Malaysia", "SEA"),
    Locale("th-TH", "ไทย (ไทย)", "SEA"),
    Locale("vi-VN", "Tiếng Việt (Việt Nam)", "SEA"),
    Locale("zh-CN", "简体中文 (中国)", "Chinese"),
    Locale("zh-TW", "繁體中文 (台灣)", "Chinese"),
    Locale("ja-JP", "日本語 (日本)", "East Asia"),
    Locale("ko-KR", "한국어 (대한민국)", "East Asia"),
)

# English names keyed by full tag; regional variants that need a
# distinct name are listed explicitly, the rest resolve via PRIMARY_NAMES.
LANGUAGE_NAMES: Dict[str, str] = {
    "en-US": "English",
    "en-GB": "English",
    "en-CA": "English",
    "en-AU": "English",
    "es-ES": "Spanish",
    "es-MX": "Spanish",
    "es-AR": "Spanish",
    "es-CL": "Spanish",
    "fr-FR": "French",
    "fr-CA": "French",
    "de-DE": "German",
    "it-IT": "Italian",
    "pt-PT": "Portuguese",
    "pt-BR": "Brazilian Portuguese",
    "nl-NL": "Dutch",
    "sv-SE": "Swedish",
    "no-NO": "Norwegian",
    "da-DK": "Danish",
    "fi-FI": "Finnish",
    "pl-PL": "Polish",
    "cs-CZ": "Czech",
    "sk-SK": "Slovak",
    "ro-RO": "Romanian",
    "hu-HU": "Hungarian",
    "ru-RU": "Russian",
    "uk-UA": "Ukrainian",
    "tr-TR": "Turkish",
    "ar-SA": "Arabic",
    "he-IL": "Hebrew",
    "hi-IN": "Hindi",
    "bn-BD": "Bengali",
    "ur-PK": "Urdu",
    "id-ID": "Indonesian",
    "ms-MY": "Malay",
    "th-TH": "Thai",
    "vi-VN": "Vietnamese",
    "zh-CN": "Simplified Chinese",
    "zh-TW": "Traditional Chinese",
    "ja-JP": "Japanese",
    "ko-KR": "Korean",
}

PRIMARY_NAMES: Dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "nl": "Dutch",
    "sv": "Swedish",
    "no": "Norwegian",
    "nb": "Norwegian",
    "da": "Danish",
    "fi": "Finnish",
    "pl": "Polish",
    "cs": "Czech",
    "sk": "Slovak",
    "ro": "Romanian",
    "hu": "Hungarian",
    "ru": "Russian",
    "uk": "Ukrainian",
    "tr": "Turkish",
    "ar": "Arabic",
    "he": "Hebrew",
    "hi": "Hindi",
    "bn": "Bengali",
    "ur": "Urdu",
    "id": "Indonesian",
    "ms": "Malay",
    "th": "Thai",
    "vi": "Vietnamese",
    "zh": "Chinese",
    "ja": "Japanese",
    "ko": "Korean",
}


def _canonical_tag(code: str) -> str:
    parts = code.strip().replace("_", "-").split("-")
    if len(parts) == 1:
        return parts[0].lower()
    return f"{parts[0].lower()}-{parts[1].upper()}"


def language_name(code: Optional[str]) -> Optional[str]:
    """Return the English language name for ``code`` or ``None``.

    The full tag is tried first (``pt-BR``), then the primary subtag
    (``fr-BE`` resolves through ``fr``).
    """

    if not code or not code.strip():
        return None
    tag = _canonical_tag(code)
    if tag in LANGUAGE_NAMES:
        return LANGUAGE_NAMES[tag]
    return PRIMARY_NAMES.get(tag.split("-", 1)[0])


def is_english(code: str) -> bool:
    return code.strip().lower().startswith("en")


def locale_groups() -> Dict[str, Tuple[Locale, ...]]:
    """Group the supported locales for display, preserving order."""

    grouped: Dict[str, list[Locale]] = {}
    for locale in LOCALES:
        grouped.setdefault(locale.group, []).append(locale)
    return {group: tuple(items) for group, items in grouped.items()}


__all__ = [
    "LANGUAGE_NAMES",
    "LOCALES",
    "Locale",
    "PRIMARY_NAMES",
    "is_english",
    "language_name",
    "locale_groups",
]
