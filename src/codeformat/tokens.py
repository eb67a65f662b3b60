"""Token and TokenType definitions for the codeformat scanners.

A formatter's tokenize() produces a stream of Token objects covering the
scanned text left to right, without gaps or overlap. Rendering maps each
token type to a span class (or, for embedded regions, to a delegated
sub-formatter).

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Token classifications.

    The first four come from code-language master patterns, the markup
    tokenizer produces the tag/entity/embedded types, and the attribute pass
    splits ATTRIBUTE_REGION into names and values.

    """

    # Code languages
    COMMENT = auto()
    STRING = auto()
    PREPROCESSOR = auto()
    KEYWORD = auto()

    # Markup
    TAG_DELIMITER = auto()  # <, </, />, >
    TAG_NAME = auto()
    ATTRIBUTE_REGION = auto()  # everything between tag name and closing delimiter
    ENTITY = auto()  # &amp; &#160;
    DIRECTIVE_TAG = auto()  # <%@ ... %>, <%, %>
    EMBEDDED_SCRIPT = auto()  # <script> body
    EMBEDDED_CODE = auto()  # <% %> body

    # Attribute pass
    ATTRIBUTE_NAME = auto()
    ATTRIBUTE_VALUE = auto()

    PLAIN_TEXT = auto()


# Public styling contract: renaming any of these breaks consumer CSS.
SPAN_CLASSES: dict[TokenType, str] = {
    TokenType.COMMENT: "rem",
    TokenType.STRING: "str",
    TokenType.PREPROCESSOR: "preproc",
    TokenType.KEYWORD: "kwrd",
    TokenType.TAG_DELIMITER: "kwrd",
    TokenType.TAG_NAME: "html",
    TokenType.ENTITY: "attr",
    TokenType.DIRECTIVE_TAG: "asp",
    TokenType.ATTRIBUTE_NAME: "attr",
    TokenType.ATTRIBUTE_VALUE: "kwrd",
}


@dataclass(frozen=True, slots=True)
class Token:
    """A classified substring of the scanned text.

    Attributes:
        type: Classification
        value: The matched text, verbatim
        offset: Start offset in the scanned text

    """

    type: TokenType
    value: str
    offset: int

    @property
    def end(self) -> int:
        """Offset just past the token."""
        return self.offset + len(self.value)

    @property
    def css_class(self) -> str | None:
        """Span class for this token, or None when it renders unwrapped."""
        return SPAN_CLASSES.get(self.type)

    def __repr__(self) -> str:
        value_repr = self.value[:20] + "..." if len(self.value) > 20 else self.value
        return f"Token({self.type.name}, {value_repr!r}, {self.offset})"
