"""
End-to-end properties of import_to_globals.
"""

from codegraph_globals.rewrite import EditBuffer, import_to_globals


class TestImportToGlobals:
    def test_unmapped_file_is_untouched(self, parse):
        """Test a file without mapped specifiers yields no edits at all."""
        source = (
            'import {x} from "b";\n'
            'export {y} from "c";\n'
            "const A = require('a');\n"
            'import("d").then(A);\n'
        )
        tree = parse(source)
        code = EditBuffer(source)

        touched = import_to_globals(tree.root, code, {"a": "A"})

        assert touched is False
        assert code.has_changed() is False
        assert str(code) == source

    def test_mixed_module(self, rewrite):
        source = (
            'import React, {useState} from "react";\n'
            'import {render} from "react-dom";\n'
            'export {memo} from "react";\n'
            "\n"
            "function App() {\n"
            "  const [count] = useState(0);\n"
            "  return <React.Fragment>{count}</React.Fragment>;\n"
            "}\n"
            "\n"
            'render(<App />, document.getElementById("root"));\n'
            'export const lazy = () => import("react-dom");\n'
        )
        names = {"react": "React", "react-dom": "ReactDOM"}

        code, touched = rewrite(source, names)

        assert touched is True
        assert code == (
            "\n"
            "\n"
            "const _global_React_memo = React.memo;\n"
            "export {_global_React_memo as memo};\n"
            "\n"
            "function App() {\n"
            "  const [count] = React.useState(0);\n"
            "  return <React.Fragment>{count}</React.Fragment>;\n"
            "}\n"
            "\n"
            'ReactDOM.render(<App />, document.getElementById("root"));\n'
            "export const lazy = () => Promise.resolve(ReactDOM);\n"
        )

    def test_specifier_map_is_not_mutated(self, rewrite):
        names = {"a": "A"}
        rewrite('import {x} from "a";\nx;', names)

        assert names == {"a": "A"}
