"""
S-expression parser End-to-End Example (Python)

Demonstrates the full lifecycle:
1. Parse a document into an AST
2. Walk the AST as plain Python values
3. Render it back to canonical text
4. Inspect rule-level results and remainders
5. Report rejected documents with their position
6. Tighten the parser configuration

Run: pip install -e . && python examples/e2e/e2e.py
"""

from sexpr import ParseError, parse, parse_element, to_native, unparse

print("=== S-expression E2E Demo ===\n")

# 1. Parse
source = """(service web
  (listen 8080)
  (routes (get index) (post submit)))"""

ast = parse(source)
print("1. Parsed document")
print(f"   Root children: {len(ast)}\n")

# 2. Native values
native = to_native(ast)
print("2. As Python values")
print(f"   {native}\n")
assert native == ["service", "web", ["listen", 8080], ["routes", ["get", "index"], ["post", "submit"]]]

# 3. Canonical text
text = unparse(ast)
print("3. Canonical text")
print(f"   {text}\n")
assert parse(text) == ast

# 4. Rule-level parse leaves the rest of the input
r = parse_element("(a b) (c d)")
print("4. Parse one element of '(a b) (c d)'")
print(f"   Value: {unparse(r.value)}, remainder: {r.rest!r}\n")
assert r.rest == " (c d)"

# 5. Rejected documents
for bad in ["(service web", "(a b))", "(a 99999999999)", "(café)"]:
    try:
        parse(bad)
    except ParseError as e:
        print(f"5. Reject {bad!r}")
        print(f"   {e.reason.name} at line {e.line}, column {e.column}\n")
    else:
        raise AssertionError(f"accepted {bad!r}")

# 6. Tighter configuration
try:
    parse("(a (b (c)))", {"max_depth": 2})
except ParseError as e:
    print("6. max_depth=2 on three nested lists")
    print(f"   {e.reason.name}\n")
else:
    raise AssertionError("depth limit not enforced")

print("=== All checks passed ===")
