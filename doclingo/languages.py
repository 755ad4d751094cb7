"""Target language metadata for translation prompts."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import MissingLanguageError

FALLBACK_INSTRUCTIONS = (
    "Use a clear, neutral and professional tone suitable for technical documentation."
)

# Presets keyed by normalized code: (display name, style instructions)
LANGUAGE_PRESETS: dict[str, tuple[str, str]] = {
    "en": (
        "English",
        "Use clear, concise technical English with an active voice.",
    ),
    "ja": (
        "Japanese",
        "Use natural technical Japanese in the polite です/ます style. "
        "Keep established katakana loanwords for technical terms.",
    ),
    "ko": (
        "Korean",
        "Use formal technical Korean in the 합니다 style.",
    ),
    "zh": (
        "Chinese (Simplified)",
        "Use Simplified Chinese characters and terminology common in mainland China.",
    ),
    "zh-cn": (
        "Chinese (Simplified)",
        "Use Simplified Chinese characters and terminology common in mainland China.",
    ),
    "zh-tw": (
        "Chinese (Traditional)",
        "Use Traditional Chinese characters and terminology common in Taiwan.",
    ),
    "zh-hk": (
        "Chinese (Hong Kong)",
        "Use Traditional Chinese characters and terminology common in Hong Kong.",
    ),
    "es": (
        "Spanish",
        "Use neutral international Spanish and address the reader with \"tú\".",
    ),
    "fr": (
        "French",
        "Use formal technical French, address the reader with \"vous\", and "
        "apply French typographic spacing rules.",
    ),
    "de": (
        "German",
        "Use formal technical German and address the reader with \"Sie\".",
    ),
    "it": (
        "Italian",
        "Use clear technical Italian and address the reader informally.",
    ),
    "pt": (
        "Portuguese",
        "Use European Portuguese spelling and technical terminology.",
    ),
    "pt-br": (
        "Portuguese (Brazil)",
        "Use Brazilian Portuguese spelling and address the reader with \"você\".",
    ),
    "ru": (
        "Russian",
        "Use formal technical Russian and address the reader with \"вы\".",
    ),
    "uk": (
        "Ukrainian",
        "Use standard technical Ukrainian terminology.",
    ),
    "nl": (
        "Dutch",
        "Use clear technical Dutch and address the reader with \"je\".",
    ),
    "pl": (
        "Polish",
        "Use formal technical Polish.",
    ),
    "tr": (
        "Turkish",
        "Use formal technical Turkish.",
    ),
    "vi": (
        "Vietnamese",
        "Use natural technical Vietnamese with full diacritics.",
    ),
    "id": (
        "Indonesian",
        "Use standard technical Indonesian (Bahasa Indonesia).",
    ),
    "th": (
        "Thai",
        "Use polite, formal technical Thai.",
    ),
    "hi": (
        "Hindi",
        "Use technical Hindi in Devanagari script; keep widely used English technical terms.",
    ),
    "ar": (
        "Arabic",
        "Use Modern Standard Arabic suitable for technical documentation.",
    ),
}


@dataclass(frozen=True)
class LanguageMetadata:
    """Display name and style instructions for a target language."""

    code: str
    display_name: str
    instructions: str


def normalize_language_code(code: str) -> str:
    """
    Normalize a language code for preset lookup.

    Lowercases and replaces underscores with hyphens, so ``ZH_TW`` and
    ``zh-TW`` map to the same key.
    """
    return code.strip().lower().replace("_", "-")


def resolve_language(code: str | None) -> LanguageMetadata:
    """
    Return metadata for a target language code.

    Known codes get their preset; any other non-blank code is accepted with
    the code itself as display name and neutral instructions.

    Args:
        code: Language code as typed by the user

    Returns:
        LanguageMetadata carrying the code verbatim

    Raises:
        MissingLanguageError: If the code is absent or blank
    """
    if code is None or not code.strip():
        raise MissingLanguageError()

    preset = LANGUAGE_PRESETS.get(normalize_language_code(code))
    if preset is not None:
        display_name, instructions = preset
        return LanguageMetadata(code=code, display_name=display_name, instructions=instructions)

    return LanguageMetadata(code=code, display_name=code.strip(), instructions=FALLBACK_INSTRUCTIONS)


def list_languages() -> dict[str, str]:
    """Return all preset languages as {code: name} dict."""
    return {code: name for code, (name, _) in LANGUAGE_PRESETS.items()}
