from __future__ import annotations

import copy
import logging
import typing as t
from pathlib import Path
from time import perf_counter_ns

from termcolor import colored

from ._compat import Self
from .cache import acquire
from .cache import default_input_path
from .cache import Fetcher
from .config import resolve_session_id
from .dates import validate_date
from .exceptions import AocHelperError
from .exceptions import MissingSessionIdError
from .exceptions import NoSolversError
from .utils import format_elapsed


log = logging.getLogger(__name__)

T = t.TypeVar("T")
D = t.TypeVar("D")

_PARTS = {1: 1, "1": 1, "a": 1, 2: 2, "2": 2, "b": 2}


def _normalize_part(part: t.Any) -> int:
    if isinstance(part, str):
        part = part.strip().lower()
    try:
        return _PARTS[part]
    except (KeyError, TypeError):
        raise AocHelperError("part must be 1 or 2") from None


def _identity(data: str) -> t.Any:
    return data


class Puzzle(t.Generic[T, D]):
    """
    One part of an Advent of Code puzzle: the part number (1 or 2), the solver
    function, and some example inputs for the solver to be tested against. The
    solver's return value is rendered with `str` when it's reported.
    """

    def __init__(
        self, part: int | str, solver: t.Callable[[T], D], examples: t.Iterable[str] = ()
    ) -> None:
        if not callable(solver):
            raise AocHelperError(f"solver for part {part} must be callable, got {solver!r}")
        self._part = _normalize_part(part)
        self._solver = solver
        self.examples = examples

    @property
    def part(self) -> int:
        return self._part

    @property
    def solver(self) -> t.Callable[[T], D]:
        return self._solver

    @property
    def examples(self) -> tuple[str, ...]:
        return self._examples

    @examples.setter
    def examples(self, examples: t.Iterable[str]) -> None:
        # replaces, doesn't append. a lone string is a single example
        if isinstance(examples, str):
            examples = (examples,)
        self._examples = tuple(str(example) for example in examples)

    def with_examples(self, examples: t.Iterable[str]) -> Self:
        """Chainable version of setting the examples."""
        self.examples = examples
        return self

    def solve(self, data: T) -> D:
        return self._solver(data)

    def __repr__(self) -> str:
        name = getattr(self._solver, "__name__", repr(self._solver))
        return f"<{type(self).__name__} part={self._part} solver={name} examples={len(self._examples)}>"


class AocDay(t.Generic[T]):
    """
    Runner for a single day of Advent of Code.

    The optional `parser` turns the raw input text (stripped of leading and trailing
    whitespace) into whatever the solvers want to work with. Without a parser the
    solvers receive the text itself.

        day = AocDay(2015, 1)

        @day.part1(examples=["(())", "))((((("])
        def floor(instructions):
            return instructions.count("(") - instructions.count(")")

        day.test()
        day.run()

    The session id is taken from the environment or config file when the instance
    is created (see `aoc_helper.config.resolve_session_id`), but an explicitly given
    one always wins.
    """

    def __init__(
        self,
        year: int,
        day: int,
        parser: t.Callable[[str], T] | None = None,
        session_id: str | None = None,
        input_path: str | Path | None = None,
    ) -> None:
        self.year = year
        self.day = day
        self.parser = parser if parser is not None else _identity
        self._session_id = resolve_session_id(session_id)
        if input_path is None:
            input_path = default_input_path(year, day)
        self._input_path = Path(input_path)
        self._puzzles: dict[int, Puzzle[T, t.Any]] = {}

    def __repr__(self) -> str:
        return f"<{type(self).__name__}({self.year}, {self.day}) parts={list(self._puzzles)}>"

    @property
    def session_id(self) -> str | None:
        return self._session_id

    @session_id.setter
    def session_id(self, value: str | None) -> None:
        self._session_id = value

    def with_session_id(self, value: str) -> Self:
        self.session_id = value
        return self

    @property
    def input_path(self) -> Path:
        """Where the puzzle input is cached, by default inputs/{year}/day{day}.txt"""
        return self._input_path

    @input_path.setter
    def input_path(self, value: str | Path) -> None:
        self._input_path = Path(value)

    def with_input(self, path: str | Path) -> Self:
        self.input_path = path
        return self

    @property
    def puzzles(self) -> list[Puzzle[T, t.Any]]:
        """The configured puzzle parts, in part order."""
        return [self._puzzles[part] for part in sorted(self._puzzles)]

    def add(self, puzzle: Puzzle[T, t.Any]) -> Self:
        """Add a puzzle part. Replaces any previously added puzzle for the same part."""
        if puzzle.part in self._puzzles:
            log.debug("replacing solver for part %s of %s/%02d", puzzle.part, self.year, self.day)
        self._puzzles[puzzle.part] = puzzle
        return self

    def _part(self, part, solver, examples):
        if solver is None:
            def decorator(func):
                self.add(Puzzle(part, func, examples))
                return func
            return decorator
        puzzle = Puzzle(part, solver, examples)
        self.add(puzzle)
        return puzzle

    def part1(self, solver: t.Callable[[T], t.Any] | None = None, examples: t.Iterable[str] = ()):
        """
        Set the solver for part 1. Returns the `Puzzle`, or a decorator if no solver
        function was given.
        """
        return self._part(1, solver, examples)

    def part2(self, solver: t.Callable[[T], t.Any] | None = None, examples: t.Iterable[str] = ()):
        """
        Set the solver for part 2. Returns the `Puzzle`, or a decorator if no solver
        function was given.
        """
        return self._part(2, solver, examples)

    def test(self) -> list[t.Any]:
        """
        Run the solvers against their example inputs and print the results. Example
        inputs are passed through the parser as-is. Returns the results in the order
        they were printed.
        """
        print(f"Testing day {self.day} of AOC {self.year}")
        if not self._puzzles:
            log.warning("no solvers configured for %s/%02d, nothing to test", self.year, self.day)
        results = []
        for puzzle in self.puzzles:
            for i, example in enumerate(puzzle.examples, start=1):
                result = puzzle.solve(self.parser(example))
                print(f"Part {puzzle.part}, Example {i}: {result}")
                results.append(result)
        return results

    def run(self, fetch: Fetcher | None = None) -> dict[int, t.Any]:
        """
        Get the puzzle input (from the cache file, or from adventofcode.com), parse it
        once and run each solver on its own copy of the parsed data. Prints each
        answer along with the time the solver took. Returns a dict {part: answer}.
        """
        if not self._puzzles:
            raise NoSolversError(f"no solvers configured for {self.year}/{self.day:02d}")
        if not self.session_id:
            raise MissingSessionIdError("No session ID specified")
        validate_date(self.year, self.day)
        data = acquire(self.input_path, self.year, self.day, self.session_id, fetch=fetch)
        parsed = self.parser(data.strip())
        results = {}
        puzzles = self.puzzles
        for i, puzzle in enumerate(puzzles, start=1):
            # the last solver to run can have the original
            own_copy = parsed if i == len(puzzles) else copy.deepcopy(parsed)
            t0 = perf_counter_ns()
            result = puzzle.solve(own_copy)
            elapsed = perf_counter_ns() - t0
            results[puzzle.part] = result
            head = (
                f"[{colored('AoC', 'yellow')} {self.year}, "
                f"{colored('day', 'light_cyan')} {self.day}, "
                f"{colored('part', 'light_cyan')} {puzzle.part}]"
            )
            print(f"{head}: {colored(str(result), 'white')}")
            print(f"{colored('Finished in', 'light_green')} {format_elapsed(elapsed)}")
            log.debug("part %s took %dns", puzzle.part, elapsed)
        return results
