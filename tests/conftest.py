import pytest


@pytest.fixture
def chain_lines():
    """a -> b -> c -> d with a second parent x of b, wrapped in a digraph."""
    return [
        "digraph G {",
        "  rankdir=LR;",
        '  a [label="<name> Alpha|<out> a"];',
        '  b [label="<name> Beta"];',
        '  d [label="<name> Delta"];',
        "  a -> b;",
        "  b -> c;",
        "  c -> d;",
        "  x -> b;",
        "}",
    ]
