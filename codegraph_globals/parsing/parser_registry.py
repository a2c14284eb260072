"""
Parser Registry

Tree-sitter grammars for the ECMAScript dialects the rewriter accepts.
Grammars are loaded once per process; parsers are built on first use.
"""

from pathlib import Path

from tree_sitter import Language, Parser
from tree_sitter_language_pack import get_language

from codegraph_globals.common.observability import get_logger

logger = get_logger(__name__)

# grammar name → accepted aliases
GRAMMARS: dict[str, tuple[str, ...]] = {
    "javascript": ("js", "jsx", "mjs", "cjs"),
    "typescript": ("ts", "mts", "cts"),
    "tsx": (),
}

EXTENSION_LANGUAGES = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".mjs": "javascript",
    ".cjs": "javascript",
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}


class ParserRegistry:
    """
    Grammar name (or alias) → tree-sitter Parser.

    A grammar that fails to load is logged and left out, so the registry
    answers None for it and AstTree.parse reports a ParsingError.
    """

    def __init__(self, grammars: dict[str, tuple[str, ...]] = GRAMMARS):
        self._languages: dict[str, Language] = {}
        self._aliases: dict[str, str] = {}
        self._parsers: dict[str, Parser] = {}

        for name, aliases in grammars.items():
            self._load(name, aliases)

    def _load(self, name: str, aliases: tuple[str, ...]) -> None:
        try:
            language = get_language(name)
        except Exception as e:
            logger.warning("parser_load_failed", language=name, error=str(e))
            return

        self._languages[name] = language
        for alias in aliases:
            self._aliases[alias] = name
        logger.debug("parser_loaded", language=name, aliases=list(aliases))

    def canonical_name(self, language: str) -> str | None:
        """Loaded grammar behind a name or alias ("JS" → "javascript")."""
        key = language.lower()
        key = self._aliases.get(key, key)
        return key if key in self._languages else None

    def get_parser(self, language: str) -> Parser | None:
        """
        Parser for a grammar name or alias.

        Returns:
            Cached Parser, or None if the grammar is unknown or failed to load
        """
        name = self.canonical_name(language)
        if name is None:
            return None
        if name not in self._parsers:
            self._parsers[name] = Parser(self._languages[name])
        return self._parsers[name]

    def detect_language(self, file_path: str | Path) -> str | None:
        """Grammar for a file extension, None for non-ECMAScript files."""
        return EXTENSION_LANGUAGES.get(Path(file_path).suffix.lower())

    def language_for(self, file_path: str | Path, default: str) -> str:
        """Grammar for a file: its extension's, else `default`."""
        return self.detect_language(file_path) or default

    def supports_language(self, language: str) -> bool:
        return self.canonical_name(language) is not None

    @property
    def supported_languages(self) -> list[str]:
        """Loaded grammar names (aliases excluded)"""
        return sorted(self._languages)


_registry: ParserRegistry | None = None


def get_registry() -> ParserRegistry:
    """Process-wide registry, created on first call"""
    global _registry
    if _registry is None:
        _registry = ParserRegistry()
    return _registry
