"""Built-in code language descriptors.

One module per language, pure data. Markup languages have no descriptor:
they use the fixed pattern in codeformat.markup.
"""

from codeformat.languages.builtins.csharp import CSHARP
from codeformat.languages.builtins.javascript import JAVASCRIPT
from codeformat.languages.builtins.msh import MSH
from codeformat.languages.builtins.tsql import TSQL
from codeformat.languages.builtins.visual_basic import VISUAL_BASIC

__all__ = [
    "CSHARP",
    "JAVASCRIPT",
    "MSH",
    "TSQL",
    "VISUAL_BASIC",
]
