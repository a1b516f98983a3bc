import pytest

from arith.span import Located, Span


#merge yields the smallest span covering both inputs, in either order
def test_span_merge() -> None:
    assert Span(2, 3).merge(Span(8, 9)) == Span(2, 9)
    assert Span(8, 9).merge(Span(2, 3)) == Span(2, 9)
    assert Span(0, 10).merge(Span(4, 5)) == Span(0, 10)


def test_span_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        Span(5, 4)
    with pytest.raises(ValueError):
        Span(-1, 2)


def test_span_str_and_len() -> None:
    assert str(Span(14, 16)) == "14-16"
    assert len(Span(14, 16)) == 2


#located values compare and hash over both payload and span
def test_located_structural_equality() -> None:
    a = Located("x", Span(0, 1))
    assert a == Located("x", Span(0, 1))
    assert a != Located("x", Span(0, 2))
    assert a != Located("y", Span(0, 1))
    assert len({a, Located("x", Span(0, 1))}) == 1
