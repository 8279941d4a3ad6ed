from minilisp import SExpression
from minilisp.errors import MalformedSpecialForm
from minilisp.types.symbol import Symbol

# Names that can never be bound by let, fn or a parameter list
RESERVED_WORDS = frozenset(
    Symbol(s)
    for s in (
        "+", "-", "*", "/",
        "or", "and", "not",
        "=", "!=",
        "if", "let", "fn", "print",
        "True", "False",
    )
)


def check_binding_name(name: SExpression, form: str) -> Symbol:
    if not isinstance(name, Symbol):
        raise MalformedSpecialForm(f"{form}: cannot bind {name!r}, expected a symbol")
    if name in RESERVED_WORDS:
        raise MalformedSpecialForm(f"{form}: reserved variable or function name {name}")
    return name
