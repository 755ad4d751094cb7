"""Translation prompt construction."""

from __future__ import annotations

from .languages import LanguageMetadata

SOURCE_MARKER = "----- BEGIN MARKDOWN -----"


def build_prompt(language: LanguageMetadata, source_text: str) -> str:
    """
    Build the instruction string sent to the model.

    The source text is embedded verbatim after ``SOURCE_MARKER``; nothing
    after the marker is part of the instructions.

    Args:
        language: Target language metadata
        source_text: Markdown document to translate

    Returns:
        Prompt string
    """
    lines = [
        "You are a professional translator specializing in technical documentation.",
        f"Translate the Markdown document below into {language.display_name} "
        f"(language code: {language.code}).",
        "",
        f"Style: {language.instructions}",
        "",
        "Rules:",
        "- Preserve the Markdown structure exactly: headings, lists, tables, "
        "block quotes, links, images and front matter.",
        "- Do not translate code blocks, inline code, URLs, file paths or HTML tags.",
        "- Output only the translated Markdown. Do not add commentary, notes, "
        "explanations or a restatement of these instructions.",
        "",
        SOURCE_MARKER,
        source_text,
    ]
    return "\n".join(lines)
