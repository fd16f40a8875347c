from rustdrill.lessons.sequences import Wrapper, array_and_vec, vec_loop, vec_map


def test_array_and_vec_similarity():
    a, v = array_and_vec()
    assert list(a) == v
    assert v == [10, 20, 30, 40]


def test_vec_loop():
    v = [2, 4, 6, 8, 10]
    ans = vec_loop(v)
    assert ans == [4, 8, 12, 16, 20]


def test_vec_map():
    v = [2, 4, 6, 8, 10]
    ans = vec_map(v)
    assert ans == [4, 8, 12, 16, 20]
    assert v == [2, 4, 6, 8, 10]


def test_store_u32_in_wrapper():
    assert Wrapper(42).value == 42


def test_store_str_in_wrapper():
    assert Wrapper("Foo").value == "Foo"