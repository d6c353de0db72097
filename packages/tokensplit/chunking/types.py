"""
Shared chunking types.

Document-type tags understood by the separator presets, plus the aliases
callers commonly pass for them.
"""

from enum import Enum


class DocType(str, Enum):
    """Document families that have a dedicated separator preset."""

    CPP = "cpp"
    GO = "go"
    JAVA = "java"
    JS = "js"
    PHP = "php"
    PROTO = "proto"
    PYTHON = "python"
    RST = "rst"
    RUBY = "ruby"
    RUST = "rust"
    SCALA = "scala"
    SWIFT = "swift"
    MARKDOWN = "markdown"
    LATEX = "latex"
    HTML = "html"
    SOL = "sol"


# Alternative spellings mapped onto their preset
DOC_TYPE_ALIASES: dict[str, DocType] = {
    "c#": DocType.JAVA,
    "csharp": DocType.JAVA,
    "cs": DocType.JAVA,
    "ts": DocType.JAVA,
    "tsx": DocType.JAVA,
    "typescript": DocType.JAVA,
    "jsx": DocType.JS,
    "javascript": DocType.JS,
    "py": DocType.PYTHON,
}


def resolve_doc_type(tag: str | None) -> DocType | None:
    """Map a free-form document-type tag onto a known DocType, or None."""
    if not tag:
        return None
    key = tag.strip().lower()
    if key in DOC_TYPE_ALIASES:
        return DOC_TYPE_ALIASES[key]
    try:
        return DocType(key)
    except ValueError:
        return None
