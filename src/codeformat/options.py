"""Per-request highlight options."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from codeformat.languages import Language, resolve_language


def _is_on(value: str | None) -> bool:
    return value is not None and value.strip().lower() == "on"


@dataclass(frozen=True, slots=True)
class HighlightOptions:
    """Options for one highlighting request.

    Attributes:
        language: Language tag as supplied by the caller (e.g. "c#", "html")
        code: The literal body to highlight
        display_line_numbers: Prefix each output line with its number
        alternate_line_numbers: Zebra-stripe output lines
        title: Caption rendered above the block (never tokenized)

    """

    language: str
    code: str
    display_line_numbers: bool = False
    alternate_line_numbers: bool = False
    title: str = ""

    @property
    def resolved_language(self) -> Language:
        return resolve_language(self.language)

    @classmethod
    def from_marker_attributes(cls, attributes: Mapping[str, str], code: str) -> HighlightOptions:
        """Build options from a block marker's attributes.

        Recognized keys: ``lang``, ``linenumbers`` and ``altlinenumbers``
        (enabled only by the value ``on``) and ``title``. Other keys are
        ignored.

        Example:
            >>> HighlightOptions.from_marker_attributes({"lang": "js", "linenumbers": "on"}, "x")
            HighlightOptions(language='js', code='x', display_line_numbers=True, alternate_line_numbers=False, title='')
        """
        return cls(
            language=attributes.get("lang", ""),
            code=code,
            display_line_numbers=_is_on(attributes.get("linenumbers")),
            alternate_line_numbers=_is_on(attributes.get("altlinenumbers")),
            title=attributes.get("title", ""),
        )


__all__ = ["HighlightOptions"]
