import pytest

from dstructs.arrays import (
    SparseTerm,
    decrement_all,
    decrement_matrix,
    delete_element,
    insert_element,
    matrix_add,
    matrix_multiply,
    sparse_transpose,
    string_compare,
    string_concat,
    string_copy,
    string_length,
    transpose,
)

ARRAY = [2, 4, 6, 8, 10, 12, 14]
A23 = [[2, 5, 8], [3, 6, 9]]
A24 = [[1, 2, 2, 3], [4, 5, 1, 2]]
B24 = [[3, 2, 3, 0], [3, 2, 1, 4]]
B43 = [[2, 5, 1], [3, 2, 1], [2, 2, 4], [3, 5, 2]]


def test_decrement_all_reduces_by_one():
    original = [2, 5, 8]
    result = decrement_all(original)
    assert [v + 1 for v in result] == original
    assert original == [2, 5, 8]


def test_decrement_matrix_reduces_every_element():
    result = decrement_matrix(A23)
    assert [[v + 1 for v in row] for row in result] == A23


def test_insert_element_shifts_right():
    assert insert_element(9, 2, ARRAY) == [2, 4, 9, 6, 8, 10, 12]


def test_insert_element_keeps_length():
    assert len(insert_element(1, 0, ARRAY)) == len(ARRAY)


@pytest.mark.parametrize("location", [7, 10, -1])
def test_insert_element_out_of_range(location):
    with pytest.raises(IndexError):
        insert_element(9, location, ARRAY)


def test_delete_element_shifts_left_and_pads():
    assert delete_element(2, ARRAY) == [2, 4, 8, 10, 12, 14, 0]


def test_delete_last_element():
    assert delete_element(6, ARRAY) == [2, 4, 6, 8, 10, 12, 0]


def test_delete_element_out_of_range():
    with pytest.raises(IndexError):
        delete_element(7, ARRAY)


def test_string_length():
    assert string_length("Welcome") == len("Welcome")
    assert string_length("ab\0cd") == len("ab")


def test_string_copy_round_trip():
    assert string_copy("Welcome") == "Welcome"
    assert string_copy("Wel\0come") == "Wel"


def test_string_concat():
    assert string_concat("Wel", "come") == "Welcome"
    assert string_length(string_concat("Wel", "come")) == string_length("Wel") + string_length("come")


def test_string_compare():
    assert string_compare("Welcome", "Data") == 1
    assert string_compare("Data", "Welcome") == -1
    assert string_compare("Welcome", "Welcome") == 0


def test_string_compare_prefix_is_smaller():
    assert string_compare("Wel", "Welcome") == -1
    assert string_compare("Welcome", "Wel") == 1


def test_transpose():
    assert transpose(A23) == [[2, 3], [5, 6], [8, 9]]
    assert transpose(transpose(A23)) == A23


def test_transpose_ragged_raises():
    with pytest.raises(ValueError):
        transpose([[1, 2], [3]])


def test_matrix_add_commutes_and_zero_is_identity():
    zeros = [[0] * 4 for _ in range(2)]
    assert matrix_add(A24, zeros) == A24
    assert matrix_add(A24, B24) == matrix_add(B24, A24)


def test_matrix_add_shape_mismatch():
    with pytest.raises(ValueError):
        matrix_add(A24, A23)


def test_matrix_multiply_identity():
    identity = [[1 if i == j else 0 for j in range(4)] for i in range(4)]
    assert matrix_multiply(A24, identity) == A24


def test_matrix_multiply_shape_and_transpose_law():
    product = matrix_multiply(A24, B43)
    assert len(product) == len(A24)
    assert all(len(row) == len(B43[0]) for row in product)
    assert transpose(product) == matrix_multiply(transpose(B43), transpose(A24))


def test_matrix_multiply_dimension_mismatch():
    with pytest.raises(ValueError):
        matrix_multiply(A24, A24)


def _sample_sparse():
    return [
        SparseTerm(4, 3, 3),
        SparseTerm(1, 1, 2),
        SparseTerm(2, 3, 1),
        SparseTerm(3, 1, 7),
    ]


def test_sparse_transpose_example():
    assert sparse_transpose(_sample_sparse()) == [
        SparseTerm(3, 4, 3),
        SparseTerm(1, 1, 2),
        SparseTerm(1, 3, 7),
        SparseTerm(3, 2, 1),
    ]


def test_sparse_transpose_round_trip():
    terms = _sample_sparse()
    assert sparse_transpose(sparse_transpose(terms)) == terms


def test_sparse_transpose_requires_header():
    with pytest.raises(ValueError):
        sparse_transpose([])


def test_sparse_transpose_count_too_large():
    with pytest.raises(ValueError):
        sparse_transpose([SparseTerm(2, 2, 3), SparseTerm(1, 1, 5)])