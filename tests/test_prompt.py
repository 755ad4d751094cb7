"""Tests for prompt construction."""

from doclingo.languages import resolve_language
from doclingo.prompt import SOURCE_MARKER, build_prompt


class TestBuildPrompt:
    """Test build_prompt."""

    def test_role_statement(self, sample_markdown):
        """Test the prompt identifies the technical documentation task."""
        prompt = build_prompt(resolve_language("ja"), sample_markdown)
        assert "technical documentation" in prompt.splitlines()[0]

    def test_target_language(self, sample_markdown):
        """Test display name and verbatim code are embedded."""
        prompt = build_prompt(resolve_language("ZH_TW"), sample_markdown)

        assert "Chinese (Traditional)" in prompt
        assert "ZH_TW" in prompt

    def test_style_instructions(self, sample_markdown):
        """Test the style instruction is embedded."""
        meta = resolve_language("de")
        prompt = build_prompt(meta, sample_markdown)
        assert meta.instructions in prompt

    def test_formatting_and_output_rules(self, sample_markdown):
        """Test structure preservation and output-only rules are present."""
        prompt = build_prompt(resolve_language("fr"), sample_markdown)

        assert "Preserve the Markdown structure" in prompt
        assert "Output only the translated Markdown" in prompt
        assert "commentary" in prompt

    def test_source_verbatim_after_marker(self, sample_markdown):
        """Test the source text follows the marker untouched."""
        prompt = build_prompt(resolve_language("ja"), sample_markdown)

        before, after = prompt.split(SOURCE_MARKER + "\n", 1)
        assert after == sample_markdown
        assert sample_markdown not in before

    def test_whitespace_preserved(self):
        """Test leading and trailing whitespace of the source is kept."""
        source = "\n\n  # Title  \n\n"
        prompt = build_prompt(resolve_language("ja"), source)
        assert prompt.endswith(SOURCE_MARKER + "\n" + source)

    def test_deterministic(self, sample_markdown):
        """Test identical inputs produce identical prompts."""
        meta = resolve_language("ko")
        assert build_prompt(meta, sample_markdown) == build_prompt(meta, sample_markdown)

    def test_fallback_language(self, sample_markdown):
        """Test unknown codes still produce a complete prompt."""
        prompt = build_prompt(resolve_language("eo"), sample_markdown)

        assert "into eo (language code: eo)" in prompt
        assert "neutral" in prompt
