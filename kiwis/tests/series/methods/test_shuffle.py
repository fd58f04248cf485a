import numpy as np
import pytest

from kiwis import Series
from kiwis.errors import InvalidArgument


class TestShuffle:
    def test_shuffle_is_permutation(self):
        s = Series(range(20))
        result = s.shuffle()
        assert sorted(result.to_array()) == list(range(20))
        assert s.to_array() == list(range(20))

    def test_shuffle_random_state(self):
        s = Series(range(20))
        first = s.shuffle(random_state=42)
        second = s.shuffle(random_state=42)
        assert first.to_array() == second.to_array()

        state = np.random.RandomState(42)
        assert s.shuffle(random_state=state).to_array() == first.to_array()

    def test_shuffle_generator(self):
        s = Series(range(10))
        result = s.shuffle(random_state=np.random.default_rng(0))
        assert sorted(result.to_array()) == list(range(10))

    def test_shuffle_inplace(self):
        s = Series(range(20))
        storage = s.to_array()
        expected = Series(range(20)).shuffle(random_state=1).to_array()

        assert s.inplace.shuffle(random_state=1) is s
        assert s.to_array() == expected
        assert s.to_array() is storage

    def test_shuffle_empty(self):
        assert Series().shuffle(random_state=0).empty

    @pytest.mark.parametrize("random_state", ["seed", 1.5, [1]])
    def test_invalid_random_state(self, random_state):
        with pytest.raises(InvalidArgument, match="argument 'random_state'"):
            Series([1, 2]).shuffle(random_state=random_state)
