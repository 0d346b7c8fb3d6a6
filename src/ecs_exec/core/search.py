"""Searchable selection prompt with live substring filtering."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

import questionary
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from .types import Choice

FALLBACK_NOTE = "no matches, showing all"


def get_questionary_style() -> questionary.Style:
    """Consistent questionary styling across all prompts."""
    return questionary.Style(
        [
            ("qmark", "fg:cyan bold"),
            ("question", "bold"),
            ("answer", "fg:cyan"),
            ("pointer", "fg:cyan bold"),
            ("highlighted", "fg:cyan"),
            ("selected", "fg:green"),
        ]
    )


def filter_choices(choices: Sequence[Choice], text: str) -> list[Choice]:
    """Choices whose label contains text, case-insensitively, in original order."""
    if not text:
        return list(choices)
    needle = text.lower()
    return [choice for choice in choices if needle in choice["name"].lower()]


def visible_choices(choices: Sequence[Choice], text: str) -> tuple[list[Choice], bool]:
    """Choices to show for the current input. Returns (choices, fell_back).

    A non-empty input matching nothing falls back to the full list so the
    picker is never empty.
    """
    matches = filter_choices(choices, text)
    if text and not matches:
        return list(choices), True
    return matches, False


class SearchCompleter(Completer):
    """Completer offering the visible choices for the whole input line."""

    def __init__(self, choices: Sequence[Choice]) -> None:
        self.choices = choices

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        matches, fell_back = visible_choices(self.choices, document.text)
        for choice in matches:
            yield Completion(
                choice["name"],
                start_position=-document.cursor_position,
                display_meta=FALLBACK_NOTE if fell_back else None,
            )


def pin_cursor_to_end(buffer: Buffer) -> None:
    """Keep the cursor at the end of the line so a completion replaces all of it."""

    def _move_to_end(buf: Buffer) -> None:
        if buf.cursor_position != len(buf.text):
            buf.cursor_position = len(buf.text)

    buffer.on_cursor_position_changed.add_handler(_move_to_end)


def _build_lookup(choices: Sequence[Choice]) -> dict[str, Any]:
    lookup: dict[str, Any] = {}
    for choice in choices:
        lookup.setdefault(choice["name"], choice["value"])
    return lookup


def searchable_select(prompt: str, choices: Sequence[Choice]) -> Any:  # noqa: ANN401
    """Ask the operator to pick one of choices. Returns its value, or None if aborted."""
    lookup = _build_lookup(choices)

    def _validate(text: str) -> bool | str:
        return text in lookup or "Pick one of the listed choices (Tab shows the list)"

    question = questionary.autocomplete(
        prompt,
        choices=list(lookup),
        completer=SearchCompleter(choices),
        validate=_validate,
        style=get_questionary_style(),
    )

    if hasattr(question, "application"):
        app = question.application

        def _prepare_buffer() -> None:
            pin_cursor_to_end(app.current_buffer)
            # Open the candidate list straight away instead of waiting for the first keystroke
            app.current_buffer.start_completion(select_first=False)

        app.pre_run_callables.append(_prepare_buffer)

    selected = question.ask()
    if selected is None:
        return None
    return lookup[selected]
