from unittest import TestCase
from unittest.mock import Mock

from aurapy.pipe import Pipe, pipe


class PipeTest(TestCase):
    def test_chain(self) -> None:
        result = Pipe(1).pipe(lambda x: x + 1).pipe(lambda x: x * 2).into_inner()
        self.assertEqual(result, 4)

    def test_pipe_function(self) -> None:
        self.assertEqual(pipe(1, lambda x: x + 1, lambda x: x * 2), 4)
        self.assertEqual(pipe(" Aura ", str.strip, str.lower, len), 4)

    def test_order(self) -> None:
        """Functions apply left to right."""
        self.assertEqual(pipe("a", lambda s: s + "b", lambda s: s + "c"), "abc")

    def test_no_functions(self) -> None:
        value = object()
        self.assertIs(pipe(value), value)
        self.assertIs(Pipe(value).into_inner(), value)

    def test_pipe_returns_new_instance(self) -> None:
        first = Pipe(1)
        second = first.pipe(str)
        self.assertEqual(first, Pipe(1))
        self.assertEqual(second, Pipe("1"))

    def test_error_stops_chain(self) -> None:
        after = Mock()
        with self.assertRaises(ZeroDivisionError):
            pipe(1, lambda x: x / 0, after)
        after.assert_not_called()
