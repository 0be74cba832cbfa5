"""
Glyph Demo Programs
===================
The sample programs shipped with the interpreter, with what each one shows
and the value it produces.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class DemoProgram:
    source: str
    description: str
    expected: int


DEMO_PROGRAMS: list[DemoProgram] = [
    DemoProgram("_", "Unit value (1)", 1),
    DemoProgram("(+__)", "1 + 1 = 2", 2),
    DemoProgram("(+(+__)_)", "2 + 1 = 3", 3),
    DemoProgram("(^(+__)_)", "2 ^ 1 = 2", 2),
    DemoProgram("(^(+__)(+__))", "2 ^ 2 = 4", 4),
    DemoProgram("(*(+__)(+(+__)_))", "2 * 3 = 6", 6),
    DemoProgram("(-(+(+(+__)_)_)_)", "4 - 1 = 3", 3),
    # '(' right after '%' selects the conditional: if 3 then 1 else 1
    DemoProgram("(%(+(+__)_)__)", "Conditional: if 3 then 1 else 1", 1),
    DemoProgram("(%_(+__))", "1 % 2 = 1", 1),
    DemoProgram("(:___)", "Let binding: let 1 = 1 in 1", 1),
    DemoProgram("(%(+__)__)", "Conditional: if 2 then 1 else 1", 1),
    DemoProgram("(%(-__)(+__)(+(+__)_))", "Conditional: if 0 then 2 else 3", 3),
]
