"""JavaScript language descriptor.

Also used for the bodies of <script> blocks inside markup.
"""

from codeformat.languages.descriptor import LanguageDescriptor

JAVASCRIPT = LanguageDescriptor(
    name="JavaScript",
    keywords=(
        "abstract async await boolean break byte case catch char class const "
        "continue debugger default delete do double else enum export extends "
        "false final finally float for function goto if implements import in "
        "instanceof int interface let long native new null of package private "
        "protected public return short static super switch synchronized this "
        "throw throws transient true try typeof undefined var void volatile "
        "while with yield"
    ),
    string_pattern=(
        r'"(?:\\.|[^"\\\n])*"|\'(?:\\.|[^\'\\\n])*\'|`(?:\\.|[^`\\])*`'
    ),
    comment_pattern=r"/\*.*?\*/|//[^\n]*",
)
