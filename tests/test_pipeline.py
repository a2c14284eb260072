"""
Host pipeline tests.
"""

from unittest.mock import patch

import pytest

from codegraph_globals import GlobalsTransformer, TransformResult
from codegraph_globals.common.exceptions import InvalidConfigurationError, ParsingError
from codegraph_globals.config import GlobalsSettings


def make_settings(**overrides) -> GlobalsSettings:
    return GlobalsSettings(_env_file=None, **overrides)


class TestGlobalsTransformer:
    @pytest.fixture
    def transformer(self):
        return GlobalsTransformer({"lib": "Lib"}, settings=make_settings())

    def test_transform(self, transformer):
        result = transformer.transform('import {x} from "lib";\nx();\n', "src/app.js")

        assert result == TransformResult(file_path="src/app.js", code="\nLib.x();\n", touched=True)

    def test_untouched_returns_original(self, transformer):
        source = 'import {x} from "lib-extra";\nx();\n'
        result = transformer.transform(source, "src/app.js")

        assert result.touched is False
        assert result.code == source

    def test_precheck_skips_parsing(self, transformer):
        """Test files that never mention a specifier are not parsed."""
        with patch("codegraph_globals.pipeline.AstTree.parse") as mock_parse:
            result = transformer.transform("const x = 1;\n", "src/app.js")

        mock_parse.assert_not_called()
        assert result.touched is False

    def test_typescript_detected_from_extension(self, transformer):
        result = transformer.transform('import {x} from "lib";\nconst n: number = x;\n', "src/mod.ts")

        assert result.code == "\nconst n: number = Lib.x;\n"

    def test_names_default_to_settings(self):
        transformer = GlobalsTransformer(settings=make_settings(names={"lib": "Lib"}))

        assert transformer.names == {"lib": "Lib"}

    def test_empty_global_name_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            GlobalsTransformer({"lib": ""}, settings=make_settings())

    def test_transform_file(self, transformer, tmp_path):
        path = tmp_path / "entry.mjs"
        path.write_text('import Lib2 from "lib";\nLib2.go();\n', encoding="utf-8")

        result = transformer.transform_file(path)

        assert result.touched is True
        assert result.code == "\nLib.go();\n"
        assert result.file_path == str(path)

    def test_transform_file_uses_extension_grammar(self, transformer, tmp_path):
        path = tmp_path / "entry.cts"
        path.write_text('import fs = require("lib");\nconst n: number = fs.size;\n', encoding="utf-8")

        result = transformer.transform_file(path)

        assert result.code == "\nconst n: number = Lib.size;\n"

    def test_filtered_file_is_not_read(self, tmp_path):
        transformer = GlobalsTransformer({"lib": "Lib"}, settings=make_settings(exclude=["*.min.js"]))

        assert transformer.transform_file(tmp_path / "missing.min.js") is None

    def test_from_settings_configures_logging(self):
        settings = make_settings(names={"lib": "Lib"}, log_level="DEBUG", log_format="json")

        with patch("codegraph_globals.pipeline.setup_logging") as mock_setup:
            transformer = GlobalsTransformer.from_settings(settings)

        mock_setup.assert_called_once_with(level="DEBUG", format="json")
        assert transformer.names == {"lib": "Lib"}


class TestFileFilter:
    def test_include(self):
        transformer = GlobalsTransformer({"lib": "Lib"}, settings=make_settings(include=["src/*"]))

        assert transformer.should_transform("src/app.js") is True
        assert transformer.transform('import "lib";', "vendor/app.js") is None

    def test_exclude(self):
        transformer = GlobalsTransformer({"lib": "Lib"}, settings=make_settings(exclude=["*.min.js"]))

        assert transformer.should_transform("dist/app.min.js") is False
        assert transformer.should_transform("dist/app.js") is True


class TestParseErrors:
    SOURCE = 'import {x} from "lib";\nconst = ;\nx();\n'

    def test_strict_parse_raises(self):
        transformer = GlobalsTransformer({"lib": "Lib"}, settings=make_settings())

        with pytest.raises(ParsingError, match="syntax errors") as exc_info:
            transformer.transform(self.SOURCE, "broken.js")

        details = exc_info.value.details
        assert details["file"] == "broken.js"
        assert details["error_count"] >= 1
        assert isinstance(details["first_error_text"], str)

    def test_lenient_parse_rewrites_best_effort(self):
        transformer = GlobalsTransformer({"lib": "Lib"}, settings=make_settings(strict_parse=False))

        result = transformer.transform(self.SOURCE, "broken.js")

        assert result.touched is True
        assert 'from "lib"' not in result.code
