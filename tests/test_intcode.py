import pytest

from aoc2019.intcode import (
    IntcodeError,
    Operation,
    OpKind,
    find_noun_verb,
    parse_program,
    run,
    solve_day2a,
)

PADDED = [1, 0, 0, 0, 99] + list(range(5, 100))


def test_parse_add():
    assert Operation.parse([1, 5, 6, 7]) == Operation(OpKind.ADD, 5, 6, 7)


def test_parse_multiply_ignores_trailing():
    assert Operation.parse([2, 3, 4, 5, 99]) == Operation(OpKind.MULTIPLY, 3, 4, 5)


def test_parse_halt():
    assert Operation.parse([99]).kind is OpKind.HALT


@pytest.mark.parametrize("memory", [[], [1, 2], [2, 0, 0], [7, 0, 0, 0]])
def test_parse_errors(memory):
    with pytest.raises(IntcodeError):
        Operation.parse(memory)


def test_execute_add_and_multiply():
    memory = [3, 4, 0]
    Operation(OpKind.ADD, 0, 1, 2).execute(memory)
    assert memory[2] == memory[0] + memory[1]
    Operation(OpKind.MULTIPLY, 0, 1, 2).execute(memory)
    assert memory[2] == memory[0] * memory[1]


def test_execute_out_of_range():
    with pytest.raises(IntcodeError):
        Operation(OpKind.ADD, 0, 10, 1).execute([1, 2])


def test_run_worked_example():
    program = parse_program("1,9,10,3,2,3,11,0,99,30,40,50")
    assert run(program, 9, 10)[0] == 3500


def test_run_does_not_mutate_input():
    program = [1, 0, 0, 0, 99]
    result = run(program, 0, 0)
    assert result == [2, 0, 0, 0, 99]
    assert program == [1, 0, 0, 0, 99]


def test_run_unknown_opcode():
    with pytest.raises(IntcodeError):
        run([1, 0, 0, 0, 42], 0, 0)


def test_parse_program_round_trip():
    program = [1, 9, 10, 3, 2, 3, 11, 0, 99]
    assert parse_program(",".join(map(str, program)) + "\n") == program


@pytest.mark.parametrize("text", ["1,a,3", "1,-2", "1,,2"])
def test_parse_program_errors(text):
    with pytest.raises(ValueError):
        parse_program(text)


def test_find_noun_verb_reproduces_target():
    target = 150
    answer = find_noun_verb(PADDED, target)
    noun, verb = divmod(answer, 100)
    assert run(PADDED, noun, verb)[0] == target


def test_find_noun_verb_unreachable():
    with pytest.raises(IntcodeError):
        find_noun_verb(PADDED, 10**6)


def test_solve_day2a(tmp_path):
    program = [1, 0, 0, 0, 99] + [0] * 95
    program[50] = 19690720
    path = tmp_path / "program.txt"
    path.write_text(",".join(map(str, program)) + "\n", encoding="utf-8")
    noun, verb = divmod(solve_day2a(path), 100)
    assert run(program, noun, verb)[0] == 19690720


def test_solve_day2a_no_solution(tmp_path):
    path = tmp_path / "program.txt"
    path.write_text(",".join(map(str, PADDED)), encoding="utf-8")
    with pytest.raises(IntcodeError):
        solve_day2a(path)