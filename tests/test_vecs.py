from rustlings.solutions.vecs import array_and_vec, vec_loop, vec_map

EVENS = [2, 4, 6, 8, 10]
DOUBLED = [4, 8, 12, 16, 20]


def test_array_and_vec_similarity():
    array, vec = array_and_vec()
    assert list(array) == vec
    assert vec == [10, 20, 30, 40]


def test_vec_loop():
    assert vec_loop(list(EVENS)) == DOUBLED


def test_vec_loop_mutates_in_place():
    values = list(EVENS)
    result = vec_loop(values)
    assert result is values
    assert values == DOUBLED


def test_vec_map():
    assert vec_map(EVENS) == DOUBLED


def test_vec_map_leaves_input_alone():
    values = list(EVENS)
    vec_map(values)
    assert values == [2, 4, 6, 8, 10]


def test_empty():
    assert vec_loop([]) == []
    assert vec_map([]) == []