"""Tests for prompt template and JSON schema loading."""

from pathlib import Path

import pytest

from smartdocs.llm.exceptions import LlmError
from smartdocs.llm.prompt_loader import load_json_schema, load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_bundled_analysis_prompt(self) -> None:
        template = load_prompt_template("analysis_prompt.txt")
        assert "{filename}" in template
        assert "{json_schema}" in template

    def test_loads_bundled_search_prompt(self) -> None:
        template = load_prompt_template("search_prompt.txt")
        assert "{query}" in template
        assert "{documents}" in template

    def test_bundled_templates_format_cleanly(self) -> None:
        load_prompt_template("analysis_prompt.txt").format(filename="a.pdf", json_schema="{}")
        load_prompt_template("search_prompt.txt").format(
            query="q", documents="[]", json_schema="{}"
        )

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        (tmp_path / "custom.txt").write_text("Hello {filename}")
        assert load_prompt_template("custom.txt", tmp_path) == "Hello {filename}"

    def test_missing_file_raises_error(self, tmp_path: Path) -> None:
        with pytest.raises(LlmError, match="Failed to load prompt"):
            load_prompt_template("missing.txt", tmp_path)


class TestLoadJsonSchema:
    def test_analysis_schema_requires_all_fields(self) -> None:
        schema = load_json_schema("analysis_schema.json")
        assert set(schema["required"]) == set(schema["properties"])  # type: ignore[arg-type]

    def test_search_schema(self) -> None:
        schema = load_json_schema("search_schema.json")
        assert "relevantDocIds" in schema["properties"]  # type: ignore[operator]

    def test_non_object_schema_raises(self, tmp_path: Path) -> None:
        (tmp_path / "list.json").write_text("[]")
        with pytest.raises(LlmError, match="must be an object"):
            load_json_schema("list.json", tmp_path)

    def test_invalid_json_raises(self, tmp_path: Path) -> None:
        (tmp_path / "bad.json").write_text("{")
        with pytest.raises(LlmError, match="Failed to load JSON schema"):
            load_json_schema("bad.json", tmp_path)
