"""
Supported languages.

Maps language codes to the English names used in prompts.
"""

from typing import Dict

AUTO_DETECT = "auto"

LANGUAGE_MAP: Dict[str, str] = {
    AUTO_DETECT: "Auto-detect",
    "en": "English",
    "ar": "Arabic",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese (Simplified)",
    "zh-TW": "Chinese (Traditional)",
    "hi": "Hindi",
    "tr": "Turkish",
    "nl": "Dutch",
    "pl": "Polish",
    "sv": "Swedish",
    "da": "Danish",
    "no": "Norwegian",
    "fi": "Finnish",
    "el": "Greek",
    "he": "Hebrew",
    "th": "Thai",
    "vi": "Vietnamese",
    "id": "Indonesian",
    "ms": "Malay",
    "cs": "Czech",
    "hu": "Hungarian",
    "ro": "Romanian",
    "uk": "Ukrainian",
}


def language_name(code: str) -> str:
    """Get the English name for a language code.

    Raises:
        ValueError: If the code is not supported
    """
    if code not in LANGUAGE_MAP:
        raise ValueError(f"Unsupported language: {code}")
    return LANGUAGE_MAP[code]
