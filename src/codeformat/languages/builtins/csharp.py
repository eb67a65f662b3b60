"""C# language descriptor."""

from codeformat.languages.descriptor import LanguageDescriptor

CSHARP = LanguageDescriptor(
    name="C#",
    keywords=(
        "abstract as async await base bool break byte case catch char checked "
        "class const continue decimal default delegate do double else enum event "
        "explicit extern false finally fixed float for foreach get goto if "
        "implicit in int interface internal is lock long namespace new null "
        "object operator out override params partial private protected public "
        "readonly ref return sbyte sealed set short sizeof stackalloc static "
        "string struct switch this throw true try typeof uint ulong unchecked "
        "unsafe ushort using value var virtual void volatile where while yield"
    ),
    preprocessors=(
        "#if #else #elif #endif #define #undef #warning #error #line "
        "#region #endregion #pragma #nullable"
    ),
    # verbatim strings, regular strings, char literals
    string_pattern=r'@"(?:[^"]|"")*"|"(?:\\.|[^"\\\n])*"|\'(?:\\.|[^\'\\\n])*\'',
    comment_pattern=r"/\*.*?\*/|//[^\n]*",
)
