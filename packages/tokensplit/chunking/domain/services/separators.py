#!/usr/bin/env python3
"""
Separator presets for recursive chunking.

Each document family maps to a hand-curated list of literal separators,
most coarse-grained first. Code and markup lists are followed by the common
line/word/character tail, so every list ends in the empty string and any
input can eventually be split down to single characters.
"""

import logging

from tokensplit.chunking.types import DOC_TYPE_ALIASES, DocType, resolve_doc_type

logger = logging.getLogger(__name__)

COMMON_TAIL: tuple[str, ...] = ("\n\n", "\n", " ", "")

DEFAULT_SEPARATORS: tuple[str, ...] = COMMON_TAIL

_PRESETS: dict[DocType, tuple[str, ...]] = {
    DocType.CPP: (
        # Class definitions
        "\nclass ",
        # Function definitions
        "\nvoid ",
        "\nint ",
        "\nfloat ",
        "\ndouble ",
        # Control flow
        "\nif ",
        "\nfor ",
        "\nwhile ",
        "\nswitch ",
        "\ncase ",
        *COMMON_TAIL,
    ),
    DocType.GO: (
        "\nfunc ",
        "\nvar ",
        "\nconst ",
        "\ntype ",
        "\nif ",
        "\nfor ",
        "\nswitch ",
        "\ncase ",
        *COMMON_TAIL,
    ),
    DocType.JAVA: (
        "\nclass ",
        # Method definitions
        "\npublic ",
        "\nprotected ",
        "\nprivate ",
        "\nstatic ",
        "\nif ",
        "\nfor ",
        "\nwhile ",
        "\nswitch ",
        "\ncase ",
        *COMMON_TAIL,
    ),
    DocType.JS: (
        "\nclass ",
        "\nfunction ",
        "\nconst ",
        "\nlet ",
        "\nvar ",
        "\nif ",
        "\nfor ",
        "\nwhile ",
        "\nswitch ",
        "\ncase ",
        "\ndefault ",
        *COMMON_TAIL,
    ),
    DocType.PHP: (
        "\nfunction ",
        "\nclass ",
        "\nif ",
        "\nforeach ",
        "\nwhile ",
        "\ndo ",
        "\nswitch ",
        "\ncase ",
        *COMMON_TAIL,
    ),
    DocType.PROTO: (
        "\nmessage ",
        "\nservice ",
        "\nenum ",
        "\noption ",
        "\nimport ",
        "\nsyntax ",
        *COMMON_TAIL,
    ),
    DocType.PYTHON: (
        "\nclass ",
        "\ndef ",
        "\n\tdef ",
        *COMMON_TAIL,
    ),
    DocType.RST: (
        # Section titles
        "\n===\n",
        "\n---\n",
        "\n***\n",
        # Directives
        "\n.. ",
        *COMMON_TAIL,
    ),
    DocType.RUBY: (
        "\ndef ",
        "\nclass ",
        "\nif ",
        "\nunless ",
        "\nwhile ",
        "\nfor ",
        "\ndo ",
        "\nbegin ",
        "\nrescue ",
        *COMMON_TAIL,
    ),
    DocType.RUST: (
        "\nfn ",
        "\nconst ",
        "\nlet ",
        "\nif ",
        "\nwhile ",
        "\nfor ",
        "\nloop ",
        "\nmatch ",
        *COMMON_TAIL,
    ),
    DocType.SCALA: (
        "\nclass ",
        "\nobject ",
        "\ndef ",
        "\nval ",
        "\nvar ",
        "\nif ",
        "\nfor ",
        "\nwhile ",
        "\nmatch ",
        "\ncase ",
        *COMMON_TAIL,
    ),
    DocType.SWIFT: (
        "\nfunc ",
        "\nclass ",
        "\nstruct ",
        "\nenum ",
        "\nif ",
        "\nfor ",
        "\nwhile ",
        "\ndo ",
        "\nswitch ",
        "\ncase ",
        *COMMON_TAIL,
    ),
    DocType.MARKDOWN: (
        # Headings, starting at level 2. Setext headings are not handled.
        "\n## ",
        "\n### ",
        "\n#### ",
        "\n##### ",
        "\n###### ",
        # End of code block
        "```\n\n",
        # Horizontal rules (exactly three characters only)
        "\n\n***\n\n",
        "\n\n---\n\n",
        "\n\n___\n\n",
        *COMMON_TAIL,
    ),
    DocType.LATEX: (
        # Sections
        "\n\\chapter{",
        "\n\\section{",
        "\n\\subsection{",
        "\n\\subsubsection{",
        # Environments
        "\n\\begin{enumerate}",
        "\n\\begin{itemize}",
        "\n\\begin{description}",
        "\n\\begin{list}",
        "\n\\begin{quote}",
        "\n\\begin{quotation}",
        "\n\\begin{verse}",
        "\n\\begin{verbatim}",
        # Math
        "\n\\begin{align}",
        "$$",
        "$",
        *COMMON_TAIL,
    ),
    DocType.HTML: (
        "<body>",
        "<div>",
        "<p>",
        "<br>",
        "<li>",
        "<h1>",
        "<h2>",
        "<h3>",
        "<h4>",
        "<h5>",
        "<h6>",
        "<span>",
        "<table>",
        "<tr>",
        "<td>",
        "<th>",
        "<ul>",
        "<ol>",
        "<header>",
        "<footer>",
        "<nav>",
        # Head
        "<head>",
        "<style>",
        "<script>",
        "<meta>",
        "<title>",
        " ",
        "",
    ),
    DocType.SOL: (
        # Compiler directives
        "\npragma ",
        "\nusing ",
        # Contracts
        "\ncontract ",
        "\ninterface ",
        "\nlibrary ",
        # Members
        "\nconstructor ",
        "\ntype ",
        "\nfunction ",
        "\nevent ",
        "\nmodifier ",
        "\nerror ",
        "\nstruct ",
        "\nenum ",
        "\nif ",
        "\nfor ",
        "\nwhile ",
        "\ndo while ",
        "\nassembly ",
        *COMMON_TAIL,
    ),
}


def get_separators(doc_type: str | None = None) -> list[str]:
    """
    Return the separator list for a document-type tag.

    Unknown or missing tags fall back to the default paragraph/line/word/
    character cascade. The returned list is a fresh copy.

    Args:
        doc_type: Free-form tag such as "python", "markdown" or "ts"

    Returns:
        Ordered list of literal separators ending in the empty string
    """
    resolved = resolve_doc_type(doc_type)
    if resolved is None:
        if doc_type:
            logger.debug(f"No separator preset for doc_type '{doc_type}', using default separators")
        return list(DEFAULT_SEPARATORS)
    return list(_PRESETS[resolved])


def supported_doc_types() -> list[str]:
    """List every tag (canonical names and aliases) with a dedicated preset."""
    return sorted({doc_type.value for doc_type in _PRESETS} | set(DOC_TYPE_ALIASES))
