from bench_king.domain.result import Err, Ok, partition


class TestPartition:
    def test_splits_values_and_errors(self) -> None:
        outcomes = {1: Ok("a"), 2: Err(ValueError("boom")), 3: Ok("c")}
        values, errors = partition(outcomes)
        assert values == {1: "a", 3: "c"}
        assert list(errors) == [2]
        assert str(errors[2]) == "boom"

    def test_preserves_key_order(self) -> None:
        outcomes = {3: Ok(3), 1: Ok(1), 2: Ok(2)}
        values, errors = partition(outcomes)
        assert list(values) == [3, 1, 2]
        assert errors == {}

    def test_empty(self) -> None:
        assert partition({}) == ({}, {})
