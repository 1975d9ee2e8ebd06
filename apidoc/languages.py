"""Source languages a project can be documented in."""

from collections.abc import Iterable
from dataclasses import dataclass, replace

from apidoc.errors import UnexpectedLanguageError


@dataclass(frozen=True)
class LanguageInfo:
    """Display and filename details for a source language."""

    sort: int
    ext: str
    filename_suffix: str
    name: str


LANGUAGES: dict[str, LanguageInfo] = {
    "clojure": LanguageInfo(sort=1, ext="clj", filename_suffix=".clj", name="Clojure"),
    "clojurescript": LanguageInfo(
        sort=2, ext="cljs", filename_suffix=".cljs", name="ClojureScript"
    ),
}


def language_info(
    language: str | None,
    base_language: str | None = None,
) -> LanguageInfo | None:
    """Look up a language, dropping the filename suffix for the base language."""
    if language is None:
        return None
    info = LANGUAGES.get(language)
    if info is None:
        raise UnexpectedLanguageError(language)
    if language == base_language:
        return replace(info, filename_suffix="")
    return info


def sorted_languages(languages: Iterable[str]) -> list[str]:
    """Order languages by their fixed display priority."""
    return sorted(languages, key=lambda lang: language_info(lang).sort)
