"""Static tables shared by the node model, the walker and the resolver."""

# Raw parser tags (Ripper and parser-gem flavours) and the semantic kind used
# instead. Tags missing from this table pass through unchanged.
TYPE_MAPPING: dict[str, str] = {
    # Ripper scanner events
    "ident": "identifier",
    "gvar": "global_variable",
    "ivar": "instance_variable",
    "cvar": "class_variable",
    "const": "constant",
    "int": "integer",
    "float": "float",
    "tstring_content": "string",
    "label": "symbol",
    "kw": "keyword",
    # parser gem node types
    "lvar": "local_variable",
    "lvasgn": "assign",
    "ivasgn": "assign",
    "cvasgn": "assign",
    "gvasgn": "assign",
    "casgn": "assign",
    "str": "string",
    "dstr": "string",
    "xstr": "string",
    "sym": "symbol",
    "dsym": "symbol",
    "def": "method",
    "defs": "method",
    "arg": "argument",
    "optarg": "argument",
    "restarg": "argument",
    "kwarg": "argument",
    "kwoptarg": "argument",
    "kwrestarg": "argument",
    "blockarg": "argument",
    "colon2": "constant",
    "colon3": "constant",
    "csend": "send",
    "irange": "range",
    "erange": "range",
    "begin": "body",
    "kwbegin": "body",
}

# Literal kinds and the core class their values are instances of.
LITERAL_TYPES: dict[str, str] = {
    "integer": "Integer",
    "float": "Float",
    "string": "String",
    "symbol": "Symbol",
    "regexp": "Regexp",
    "array": "Array",
    "hash": "Hash",
    "range": "Range",
    "nil": "NilClass",
    "true": "TrueClass",
    "false": "FalseClass",
}

# Sends whose two operands are recorded for equality style checks.
COMPARISON_OPERATORS: frozenset[str] = frozenset({"==", "!=", "===", "eql?", "equal?"})

# Directories that conventionally hold Ruby sources, relative to the cwd.
RUBY_DIRECTORIES: tuple[str, ...] = ("app", "lib")

DEFAULT_EXTENSION: str = ".rb"

NAMESPACE_SEPARATOR: str = "::"

ROOT_NAME: str = "Object"

REPORT_LEVELS: tuple[str, ...] = ("error", "warning", "info")

# Kinds whose bodies may run conditionally or not at all. Variables assigned
# inside them lose their value when the branch ends with a different one.
BRANCH_KINDS: frozenset[str] = frozenset(
    {"if", "unless", "case", "when", "while", "until", "for", "rescue", "resbody", "ensure", "and", "or"}
)
