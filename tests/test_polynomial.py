import pytest

from dstructs.polynomial import Polynomial, Term

F_TERMS = [(5, 1000), (7, 387), (10, 0)]
G_TERMS = [(10, 400), (6, 387), (3, 2), (1, 0)]


def test_str_of_source_polynomials():
    assert str(Polynomial(F_TERMS)) == "5x^1000+7x^387+10"
    assert str(Polynomial(G_TERMS)) == "10x^400+6x^387+3x^2+1"


def test_add_source_example():
    h = Polynomial(F_TERMS) + Polynomial(G_TERMS)
    assert str(h) == "5x^1000+10x^400+13x^387+3x^2+11"


def test_sum_exponents_are_union_and_descending():
    h = Polynomial(F_TERMS) + Polynomial(G_TERMS)
    exps = [t.exponent for t in h]
    assert exps == sorted({e for _, e in F_TERMS + G_TERMS}, reverse=True)


def test_addition_is_commutative():
    f, g = Polynomial(F_TERMS), Polynomial(G_TERMS)
    assert f + g == g + f


def test_cancelling_terms_are_dropped():
    f = Polynomial([(4, 3), (2, 1)])
    g = Polynomial([(-4, 3), (5, 0)])
    assert list(f + g) == [Term(2, 1), Term(5, 0)]


def test_add_empty():
    f = Polynomial(F_TERMS)
    assert f + Polynomial() == f
    assert list(Polynomial() + Polynomial()) == []


def test_trailing_plus_when_no_constant():
    assert str(Polynomial([(3, 2)])) == "3x^2+"


def test_terms_accept_term_objects():
    p = Polynomial([Term(5, 1000), Term(10, 0)])
    assert [t.coef for t in p] == [5, 10]


def test_out_of_order_terms_rejected():
    with pytest.raises(ValueError):
        Polynomial([(1, 2), (3, 5)])
    with pytest.raises(ValueError):
        Polynomial([(1, 2), (3, 2)])


def test_clear():
    p = Polynomial(F_TERMS)
    p.clear()
    assert len(p) == 0
    assert str(p) == ""