"""MSH (Monad shell / PowerShell) language descriptor.

Comparison operators are listed as preprocessor words: they are
whitespace-delimited and render with the ``preproc`` class.
"""

from codeformat.languages.descriptor import LanguageDescriptor

MSH = LanguageDescriptor(
    name="MSH",
    keywords=(
        "function filter global script local private if else elseif for "
        "foreach in while switch continue break return default param begin "
        "process end throw trap"
    ),
    preprocessors=(
        "-band -bor -match -notmatch -like -notlike -eq -ne -gt -ge -lt -le "
        "-is -imatch -inotmatch -ilike -inotlike -ieq -ine -igt -ige -ilt -ile"
    ),
    # backtick escapes the closing quote
    string_pattern=r'@?"(?:`.|[^"`])*"|\'[^\']*\'',
    comment_pattern=r"#[^\n]*",
    case_sensitive=False,
)
