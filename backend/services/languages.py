"""
Language Catalog - Syntax languages offered to the renderer
"""

from __future__ import annotations

from typing import NamedTuple

DEFAULT_LANGUAGE = "plaintext"


class LanguageInfo(NamedTuple):
    label: str
    extension: str


LANGUAGES: dict[str, LanguageInfo] = {
    "bash": LanguageInfo("Bash", "sh"),
    "c": LanguageInfo("C", "c"),
    "cpp": LanguageInfo("C++", "cpp"),
    "csharp": LanguageInfo("C#", "cs"),
    "css": LanguageInfo("CSS", "css"),
    "dart": LanguageInfo("Dart", "dart"),
    "dockerfile": LanguageInfo("Dockerfile", "dockerfile"),
    "elixir": LanguageInfo("Elixir", "ex"),
    "go": LanguageInfo("Go", "go"),
    "html": LanguageInfo("HTML", "html"),
    "java": LanguageInfo("Java", "java"),
    "javascript": LanguageInfo("JavaScript", "js"),
    "json": LanguageInfo("JSON", "json"),
    "kotlin": LanguageInfo("Kotlin", "kt"),
    "lua": LanguageInfo("Lua", "lua"),
    "makefile": LanguageInfo("Makefile", "makefile"),
    "markdown": LanguageInfo("Markdown", "md"),
    "perl": LanguageInfo("Perl", "pl"),
    "php": LanguageInfo("PHP", "php"),
    "plaintext": LanguageInfo("Plain Text", "txt"),
    "psql": LanguageInfo("PostgreSQL", "sql"),
    "python": LanguageInfo("Python", "py"),
    "ruby": LanguageInfo("Ruby", "rb"),
    "rust": LanguageInfo("Rust", "rs"),
    "sql": LanguageInfo("SQL", "sql"),
    "swift": LanguageInfo("Swift", "swift"),
    "typescript": LanguageInfo("TypeScript", "ts"),
    "xml": LanguageInfo("XML", "xml"),
    "yaml": LanguageInfo("YAML", "yml"),
}


def get_language(key: str) -> LanguageInfo:
    """Look up a language, raising KeyError for unknown keys"""
    try:
        return LANGUAGES[key]
    except KeyError:
        raise KeyError(f"Unknown language: {key}") from None


def language_options() -> list[dict[str, str]]:
    """Dropdown entries in catalog order"""
    return [
        {"value": key, "label": info.label, "extension": info.extension}
        for key, info in LANGUAGES.items()
    ]


def file_names(key: str) -> tuple[str, str]:
    """Old/new file names used when exporting a unified diff"""
    extension = get_language(key).extension
    return f"old_file.{extension}", f"new_file.{extension}"
