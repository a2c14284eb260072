"""
Host pipeline

Applies import_to_globals to source files: filters files, parses them with
tree-sitter, runs the rewrite and renders the result.

Example:
    ```python
    transformer = GlobalsTransformer({"react": "React"})
    result = transformer.transform(code, "src/app.js")
    if result and result.touched:
        write(result.code)
    ```
"""

from collections.abc import Mapping
from fnmatch import fnmatch
from pathlib import Path, PurePath

from codegraph_globals.common.exceptions import InvalidConfigurationError, ParsingError
from codegraph_globals.common.observability import get_logger, setup_logging
from codegraph_globals.config.settings import GlobalsSettings
from codegraph_globals.config.settings import settings as default_settings
from codegraph_globals.models import TransformResult
from codegraph_globals.parsing import AstTree, SourceFile, get_registry
from codegraph_globals.rewrite import EditBuffer, import_to_globals

logger = get_logger(__name__)


class GlobalsTransformer:
    """
    Rewrites module imports of configured specifiers into global references.

    Thread-Safety: Safe (per-file state lives inside transform())
    """

    def __init__(self, names: Mapping[str, str] | None = None, settings: GlobalsSettings | None = None):
        """
        Args:
            names: Module specifier → global name (defaults to settings.names)
            settings: Settings instance (defaults to the module-level settings)

        Raises:
            InvalidConfigurationError: If a specifier or global name is empty
        """
        self.settings = settings or default_settings
        self.names = dict(names if names is not None else self.settings.names)

        for specifier, global_name in self.names.items():
            if not specifier or not global_name:
                raise InvalidConfigurationError(
                    "Specifiers and global names must be non-empty",
                    {"specifier": specifier, "global_name": global_name},
                )

    @classmethod
    def from_settings(cls, settings: GlobalsSettings | None = None) -> "GlobalsTransformer":
        """Build a transformer from settings alone and configure logging from them."""
        settings = settings or default_settings
        setup_logging(level=settings.log_level, format=settings.log_format)
        return cls(settings=settings)

    def should_transform(self, file_path: str | Path) -> bool:
        """Apply include/exclude glob patterns (empty include means every file)."""
        path = PurePath(file_path).as_posix()
        if self.settings.include and not any(fnmatch(path, pattern) for pattern in self.settings.include):
            return False
        return not any(fnmatch(path, pattern) for pattern in self.settings.exclude)

    def transform(self, code: str, file_path: str) -> TransformResult | None:
        """
        Transform one file's code.

        Args:
            code: Source code
            file_path: Path used for filtering and language detection

        Returns:
            TransformResult, or None if the file is filtered out

        Raises:
            ParsingError: If the code cannot be parsed (or has syntax errors
                and strict_parse is enabled)
        """
        if not self.should_transform(file_path):
            return None

        language = get_registry().language_for(file_path, self.settings.language)
        return self._transform_source(SourceFile.from_content(file_path, code, language))

    def transform_file(self, path: str | Path) -> TransformResult | None:
        """Read a UTF-8 file and transform it (filtered files are not read)."""
        if not self.should_transform(path):
            return None

        language = get_registry().language_for(path, self.settings.language)
        return self._transform_source(SourceFile.from_file(path, language=language))

    def _transform_source(self, source: SourceFile) -> TransformResult:
        code = source.content
        if not any(specifier in code for specifier in self.names):
            return TransformResult(file_path=source.file_path, code=code, touched=False)

        ast_tree = AstTree.parse(source)
        self._check_errors(ast_tree)

        buffer = EditBuffer(code, source.encoding)
        touched = import_to_globals(ast_tree.root, buffer, self.names)

        logger.info("transform_complete", file=source.file_path, language=source.language, touched=touched)
        return TransformResult(
            file_path=source.file_path,
            code=buffer.to_string() if touched else code,
            touched=touched,
        )

    def _check_errors(self, ast_tree: AstTree) -> None:
        if not ast_tree.has_error():
            return

        errors = ast_tree.get_errors()
        first = errors[0] if errors else None
        details = {
            "file": ast_tree.source.file_path,
            "error_count": len(errors),
            "first_error_line": first.start_point[0] + 1 if first is not None else None,
            "first_error_text": ast_tree.get_text(first)[:40] if first is not None else None,
        }
        if self.settings.strict_parse:
            raise ParsingError("Source has syntax errors", details)
        logger.warning("parse_errors_found", **details)
