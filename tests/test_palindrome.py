"""
Palindrome check tests
"""
import pytest

from recursion_exercises import InvalidArgumentError, check_palindrome, is_palindrome, reverse_sequence


class TestIsPalindrome:
    """Whole-sequence checks"""

    def test_empty_string(self):
        assert is_palindrome('') is True

    def test_not_palindrome(self):
        assert is_palindrome('1234') is False

    def test_even_length_palindrome(self):
        assert is_palindrome('1221') is True

    @pytest.mark.parametrize("s", ['a', 'aba', 'racecar', [1, 2, 1], (3,), ()])
    def test_palindromes(self, s):
        assert is_palindrome(s) is True

    @pytest.mark.parametrize("s", ['ab', 'abca', [1, 2], ('x', 'y', 'z')])
    def test_non_palindromes(self, s):
        assert is_palindrome(s) is False

    def test_case_sensitive(self):
        assert is_palindrome('Aa') is False

    def test_input_not_mutated(self):
        items = [1, 2, 3, 2, 1]
        assert is_palindrome(items) is True
        assert items == [1, 2, 3, 2, 1]

    @pytest.mark.parametrize("s", ['', 'a', '1221', '1234', 'abcba', 'abccbx'])
    def test_agrees_with_reversed_copy(self, s):
        assert is_palindrome(s) == is_palindrome(reverse_sequence(list(s)))

    def test_short_circuits_on_first_mismatch(self):
        """Only the outer pair is compared when it already differs"""
        compared = []

        class Probe:
            def __init__(self, value):
                self.value = value

            def __eq__(self, other):
                compared.append((self.value, other.value))
                return self.value == other.value

            def __ne__(self, other):
                return not self.__eq__(other)

        items = [Probe(v) for v in 'xbcdbay']
        assert is_palindrome(items) is False
        assert compared == [('x', 'y')]

    @pytest.mark.parametrize("bad", [iter('aba'), {'a'}, 12])
    def test_non_indexable_rejected(self, bad):
        with pytest.raises(InvalidArgumentError):
            is_palindrome(bad)


class TestCheckPalindrome:
    """Windowed checks with explicit cursors"""

    def test_window_inside_non_palindrome(self):
        assert check_palindrome('xabay', 1, 3) is True

    def test_window_mismatch(self):
        assert check_palindrome('xabcy', 1, 3) is False

    def test_crossed_cursors(self):
        assert check_palindrome('ab', 1, 0) is True

    def test_default_end(self):
        assert check_palindrome('abba', 0) is True

    @pytest.mark.parametrize("start, end", [(-1, 2), (0, 4), (2, 10)])
    def test_out_of_range_cursor_rejected(self, start, end):
        with pytest.raises(InvalidArgumentError, match="outside"):
            check_palindrome('abba', start, end)

    @pytest.mark.parametrize("start, end", [(0.0, 2), (0, "3"), (True, 2)])
    def test_non_int_cursor_rejected(self, start, end):
        with pytest.raises(InvalidArgumentError):
            check_palindrome('abba', start, end)

    def test_empty_sequence_default_cursors(self):
        assert check_palindrome([], 0) is True
