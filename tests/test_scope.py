"""
Scope attachment tests.
"""

from codegraph_globals.analysis.scope import Scope, attach_scopes


class TestScope:
    """Scope objects on their own."""

    def test_contains_walks_ancestors(self):
        root = Scope()
        root.add_declaration(["a"], block=True)
        child = Scope(parent=root, block=True)

        assert child.contains("a") is True
        assert child.contains("b") is False

    def test_non_block_declaration_hoists_out_of_block(self):
        root = Scope()
        block = Scope(parent=root, block=True)
        block.add_declaration(["v"], block=False)
        block.add_declaration(["l"], block=True)

        assert root.declarations == {"v"}
        assert block.declarations == {"l"}


class TestAttachScopes:
    """Scopes attached to a parsed program."""

    def test_var_hoists_to_function_scope(self, parse, find):
        tree = parse("function f() { { var a = 1; let b = 2; } }")
        scopes = attach_scopes(tree.root)

        function_scope = scopes.scope_for(find(tree.root, "function_declaration")[0])
        body, inner = find(tree.root, "statement_block")
        block_scope = scopes.scope_for(inner)

        assert "f" in scopes.root.declarations
        assert function_scope.declarations == {"a"}
        assert scopes.scope_for(body) is None
        assert block_scope.is_block_scope is True
        assert block_scope.declarations == {"b"}
        assert block_scope.parent is function_scope

    def test_parameters_and_patterns(self, parse, find):
        tree = parse("const g = (x, {y, z: w}, [v], a = 1, ...rest) => x;")
        scopes = attach_scopes(tree.root)

        arrow_scope = scopes.scope_for(find(tree.root, "arrow_function")[0])

        assert arrow_scope.declarations == {"x", "y", "w", "v", "a", "rest"}
        assert scopes.root.declarations == {"g"}

    def test_single_arrow_parameter(self, parse, find):
        tree = parse("const g = item => item;")
        scopes = attach_scopes(tree.root)

        assert scopes.scope_for(find(tree.root, "arrow_function")[0]).declarations == {"item"}

    def test_named_function_expression(self, parse, find):
        """Test a function expression's name is visible only inside it."""
        tree = parse("const h = function inner(p) {};")
        scopes = attach_scopes(tree.root)

        function_scope = scopes.scope_for(find(tree.root, "function_expression")[0])

        assert function_scope.declarations == {"inner", "p"}
        assert scopes.root.declarations == {"h"}

    def test_catch_clause(self, parse, find):
        tree = parse("try {} catch (err) { let q; }")
        scopes = attach_scopes(tree.root)

        catch_scope = scopes.scope_for(find(tree.root, "catch_clause")[0])
        catch_body = find(tree.root, "statement_block")[-1]

        assert catch_scope.declarations == {"err"}
        assert scopes.scope_for(catch_body).declarations == {"q"}
        assert scopes.scope_for(catch_body).parent is catch_scope

    def test_for_of_declaration(self, parse):
        tree = parse("for (const item of list) {}")
        scopes = attach_scopes(tree.root)

        assert scopes.root.declarations == {"item"}

    def test_class_declaration_hoists(self, parse):
        tree = parse("{ class K {} }")
        scopes = attach_scopes(tree.root)

        assert "K" in scopes.root.declarations

    def test_method_opens_function_scope(self, parse, find):
        tree = parse("class C { m(arg) { return arg; } }")
        scopes = attach_scopes(tree.root)

        assert scopes.scope_for(find(tree.root, "method_definition")[0]).declarations == {"arg"}

    def test_imports_are_not_declarations(self, parse):
        tree = parse('import x, {y} from "a";\nx(y);')
        scopes = attach_scopes(tree.root)

        assert scopes.root.declarations == set()
