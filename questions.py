"""
Question generators.

Every generator reads the player's grade and the engine's current difficulty
at call time, so two questions of one batch share the same ranges only because
nothing is answered while a batch is being built.

Upper bounds are exclusive everywhere (``random.randrange``).
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Protocol, Union

Number = Union[int, float]


class Category(str, Enum):
    ADDITION = "Category_Addition"
    SUBTRACTION = "Category_Subtraction"
    MULTIPLICATION = "Category_Multiplication"
    DIVISION = "Category_Division"
    ALGEBRA = "Category_Algebra"
    PROBLEM_SOLVING = "Category_ProblemSolving"
    GRAPHS = "Category_Graphs"

    @classmethod
    def parse(cls, key: Union[str, "Category", None]) -> "Category":
        """Map a category key to a member; anything unknown is Addition."""
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError:
            return cls.ADDITION


@dataclass(frozen=True)
class Question:
    text: str
    answer: Number


class Templates(Protocol):
    def get(self, key: str, *args) -> str: ...


# Numbers grow with grade, then with difficulty on top of that
GRADE_MULTIPLIER: Dict[int, int] = {0: 10, 1: 15, 2: 20, 3: 30, 4: 50, 5: 100}

# Multiplication/division stay on the times tables below this point
TABLES_MAX_GRADE = 2
TABLES_MAX_DIFFICULTY = 3


@dataclass
class QuestionContext:
    grade: int
    difficulty: int
    rng: random.Random
    templates: Templates

    def draw(self, low: int, high: int) -> int:
        return self.rng.randrange(low, high)


def base_max(grade: int, difficulty: int) -> int:
    return GRADE_MULTIPLIER.get(grade, GRADE_MULTIPLIER[5]) + difficulty * 5


def _factor_max(ctx: QuestionContext) -> int:
    d = ctx.difficulty
    if ctx.grade <= TABLES_MAX_GRADE or d <= TABLES_MAX_DIFFICULTY:
        return min(12, 5 + d)
    if ctx.grade == 3:
        return 15 + d * 2
    if ctx.grade == 4:
        return 20 + d * 3
    return 30 + d * 4


def _factors(ctx: QuestionContext):
    top = _factor_max(ctx)
    return ctx.draw(1, top), ctx.draw(1, top)


def _operands(ctx: QuestionContext):
    top = base_max(ctx.grade, ctx.difficulty)
    # b never zero so it can be a divisor
    return ctx.draw(0, top), ctx.draw(1, top)


def addition(ctx: QuestionContext) -> Question:
    a, b = _operands(ctx)
    return Question(text=f"{a} + {b}", answer=a + b)


def subtraction(ctx: QuestionContext) -> Question:
    # operands are not reordered, the answer can be negative
    a, b = _operands(ctx)
    return Question(text=f"{a} - {b}", answer=a - b)


def multiplication(ctx: QuestionContext) -> Question:
    a, b = _factors(ctx)
    return Question(text=f"{a} × {b}", answer=a * b)


def division(ctx: QuestionContext) -> Question:
    a, b = _factors(ctx)
    return Question(text=f"{a * b} ÷ {b}", answer=a)


def algebra(ctx: QuestionContext) -> Question:
    d = ctx.difficulty
    if ctx.grade == 3:
        max_x, max_m, max_b = 10 + d, 5 + d, 10 + d
    elif ctx.grade == 4:
        max_x, max_m, max_b = 15 + d * 2, 8 + d, 20 + d * 2
    else:
        max_x, max_m, max_b = 20 + d * 2, 12 + d * 2, 30 + d * 3

    x = ctx.draw(1, max_x)
    m = ctx.draw(1, max_m)
    b = ctx.draw(0, max_b)
    y = m * x + b
    return Question(text=ctx.templates.get("Question_Algebra", m, b, y), answer=x)


def word_problem(ctx: QuestionContext) -> Question:
    d = ctx.difficulty
    if ctx.grade == 3:
        max_apples = 10 + d * 2
    elif ctx.grade == 4:
        max_apples = 20 + d * 3
    else:
        max_apples = 30 + d * 4

    apples = ctx.draw(3, max_apples)
    eaten = ctx.draw(1, apples)
    return Question(
        text=ctx.templates.get("Question_WordProblem", apples, eaten), answer=apples - eaten
    )


def graph(ctx: QuestionContext) -> Question:
    d = ctx.difficulty
    if ctx.grade == 4:
        max_coord, max_slope = 10 + d * 2, 5 + d
    else:
        max_coord, max_slope = 15 + d * 3, 8 + d * 2

    x1 = 0
    y1 = ctx.draw(0, max_coord)
    x2 = ctx.draw(1, max_coord)
    slope = ctx.draw(-max_slope, max_slope + 1)
    y2 = y1 + slope * (x2 - x1)
    return Question(text=ctx.templates.get("Question_Graph", x1, y1, x2, y2), answer=slope)


GENERATORS: Dict[Category, Callable[[QuestionContext], Question]] = {
    Category.ADDITION: addition,
    Category.SUBTRACTION: subtraction,
    Category.MULTIPLICATION: multiplication,
    Category.DIVISION: division,
    Category.ALGEBRA: algebra,
    Category.PROBLEM_SOLVING: word_problem,
    Category.GRAPHS: graph,
}


def generate(category: Union[Category, str], ctx: QuestionContext) -> Question:
    return GENERATORS[Category.parse(category)](ctx)
