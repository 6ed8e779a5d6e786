"""
Selection translation.

Reads the selection, validates it, calls the API and writes the result back.

Modes:
1. Text - the whole selection replaced by one translation
2. Paragraphs - one call for all paragraphs, fonts restored per paragraph
3. Tables - one call per non-empty cell, failures skipped and counted
"""

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union

from .document import BLANK_LINE, Selection
from .errors import (
    AlignmentMismatchError,
    NoSelectionError,
    SameLanguageError,
    TranslationInProgressError,
    TranslatorError,
)
from .languages import AUTO_DETECT
from .logger import translator_logger as logger
from .prompts import BALANCED_STYLE, GENERAL_DOMAIN, TranslationRequest
from .token_counter import TokenUsage, count_words
from .usage import UsageTracker
from ..sdk.openai_client import TranslationClient

PARAGRAPH_SEPARATOR = "\n\n"


@dataclass
class TranslationSettings:
    """User-selected options for translate actions."""
    source_language: str = AUTO_DETECT
    target_language: str = "en"
    domain: str = GENERAL_DOMAIN
    style: str = BALANCED_STYLE


@dataclass
class SelectionResult:
    """Outcome of a text or paragraph translation."""
    translation: str
    word_count: int
    detected_language: Optional[str] = None
    paragraphs: int = 1


@dataclass
class TableTranslationResult:
    """Outcome of a table translation; partial when some cells failed."""
    attempted: int = 0
    translated: int = 0
    word_count: int = 0
    detected_language: Optional[str] = None
    errors: List[str] = field(default_factory=list)

    @property
    def partial(self) -> bool:
        return self.translated < self.attempted


class SelectionTranslator:
    """Drives translate actions against a document selection.

    Holds the usage tracker and refuses to start an action while another one
    is still running.
    """

    def __init__(
        self,
        client: TranslationClient,
        tracker: UsageTracker,
        settings: Optional[TranslationSettings] = None
    ):
        self.client = client
        self.tracker = tracker
        self.settings = settings or TranslationSettings()
        self._in_flight = threading.Lock()

    @property
    def busy(self) -> bool:
        return self._in_flight.locked()

    @contextmanager
    def _action(self) -> Iterator[None]:
        if not self._in_flight.acquire(blocking=False):
            raise TranslationInProgressError()
        try:
            yield
        finally:
            self._in_flight.release()

    def _check_languages(self) -> None:
        source = self.settings.source_language
        if source != AUTO_DETECT and source == self.settings.target_language:
            raise SameLanguageError(source)

    def _request(self, text: str) -> TranslationRequest:
        return TranslationRequest(
            text=text,
            source_language=self.settings.source_language,
            target_language=self.settings.target_language,
            domain=self.settings.domain,
            style=self.settings.style,
            model=self.client.model
        )

    def translate_selection(
        self, selection: Selection
    ) -> Union[SelectionResult, TableTranslationResult]:
        """Translate a selection, picking table or paragraph mode."""
        if selection.tables():
            return self.translate_tables(selection)
        return self.translate_paragraphs(selection)

    def translate_text(self, selection: Selection) -> SelectionResult:
        """Replace the whole selection with its translation.

        Raises:
            SameLanguageError: Source equals target and source is not auto
            NoSelectionError: Selection is empty or whitespace only
        """
        with self._action():
            self._check_languages()
            text = selection.text
            if not text or not text.strip():
                raise NoSelectionError()

            result = self.client.translate(self._request(text))
            selection.replace_text(result.translation)

            word_count = count_words(text)
            self.tracker.record(word_count, result.usage, self.client.model)
            return SelectionResult(
                translation=result.translation,
                word_count=word_count,
                detected_language=result.detected_language
            )

    def translate_paragraphs(self, selection: Selection) -> SelectionResult:
        """Translate paragraph by paragraph, restoring each paragraph's font.

        Multiple paragraphs go out as one call joined by blank lines and the
        reply is split back on blank lines.

        Raises:
            SameLanguageError: Source equals target and source is not auto
            NoSelectionError: No paragraph holds any text
            AlignmentMismatchError: Reply chunks don't match the paragraph count
        """
        with self._action():
            self._check_languages()
            paragraphs = [p for p in selection.paragraphs() if p.text and p.text.strip()]
            if not paragraphs:
                raise NoSelectionError()

            fonts = [paragraph.font for paragraph in paragraphs]
            texts = [paragraph.text.strip() for paragraph in paragraphs]
            source_text = PARAGRAPH_SEPARATOR.join(texts)

            result = self.client.translate(self._request(source_text))
            word_count = count_words(source_text)

            if len(paragraphs) == 1:
                chunks = [result.translation]
            else:
                chunks = [c.strip() for c in BLANK_LINE.split(result.translation) if c.strip()]
                if len(chunks) != len(paragraphs):
                    # Counted as a successful call even though nothing is written
                    self.tracker.record(word_count, result.usage, self.client.model)
                    raise AlignmentMismatchError(expected=len(paragraphs), actual=len(chunks))

            for paragraph, chunk, font in zip(paragraphs, chunks, fonts):
                paragraph.replace_text(chunk)
                paragraph.apply_font(font)

            self.tracker.record(word_count, result.usage, self.client.model)
            return SelectionResult(
                translation=PARAGRAPH_SEPARATOR.join(chunks),
                word_count=word_count,
                detected_language=result.detected_language,
                paragraphs=len(paragraphs)
            )

    def translate_tables(self, selection: Selection) -> TableTranslationResult:
        """Translate every non-empty table cell independently.

        A failing cell is logged and skipped; the rest continue.

        Raises:
            SameLanguageError: Source equals target and source is not auto
        """
        with self._action():
            self._check_languages()
            outcome = TableTranslationResult()
            total_usage = TokenUsage(prompt_tokens=0, completion_tokens=0)

            for table in selection.tables():
                for row in table.rows:
                    for cell in row:
                        cell_text = (cell.text or "").strip()
                        if not cell_text:
                            continue

                        outcome.attempted += 1
                        try:
                            result = self.client.translate(self._request(cell_text))
                        except TranslatorError as e:
                            logger.error(f"Error translating cell {outcome.attempted}: {e}")
                            outcome.errors.append(str(e))
                            continue

                        cell.replace_text(result.translation)
                        outcome.translated += 1
                        outcome.word_count += count_words(cell_text)
                        if outcome.detected_language is None:
                            outcome.detected_language = result.detected_language
                        if result.usage is not None:
                            total_usage = total_usage + result.usage

            if outcome.translated:
                self.tracker.record(outcome.word_count, total_usage, self.client.model)
            logger.info(f"Translated {outcome.translated}/{outcome.attempted} cells")
            return outcome
