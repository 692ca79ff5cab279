"""TextService — word occurrence counting."""

from __future__ import annotations

from katactl.domain.errors import InvalidArgument
from katactl.domain.words import count_word_occurrences
from katactl.services.base import BaseService
from katactl.services.result import ServiceResult
from katactl.services.telemetry import traced


class TextService(BaseService):
    """Counts whole-word occurrences in free text."""

    @traced
    def count(self, text: str, word: str) -> ServiceResult:
        try:
            occurrences = count_word_occurrences(text, word)
        except InvalidArgument as exc:
            return self._reject("count_words", exc)

        warnings: list[str] = []
        if not word.isascii() or not word.isalnum():
            warnings.append(
                f"'{word}' contains characters that never appear inside a word; "
                "it cannot match"
            )
        return ServiceResult.success(
            "count_words",
            {"word": word.lower(), "occurrences": occurrences},
            warnings=warnings,
        )
