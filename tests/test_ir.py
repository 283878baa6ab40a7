import pytest

from knightlang.errors import KnightError
from knightlang.ir import (
    Block,
    Function,
    IROp,
    IRType,
    Instruction,
    generate_ssa,
    load_literal,
)
from knightlang.parser import LiteralKind, parse_source
from knightlang.value import Value, ValueType


def test_next_id_is_sequential():
    function = Function()
    ids = [function.next_id() for _ in range(5)]
    assert ids == list(range(5))
    assert function.next_value_id == 5


def test_emit_appends_with_fresh_ids():
    function = Function()
    block = Block()
    emitted = [function.emit(IROp.ADD, block) for _ in range(20)]
    assert block.instructions == emitted
    assert [instr.result for instr in emitted] == list(range(20))
    assert all(instr.type is IRType.NULL for instr in emitted)


def test_load_literal_number():
    assert load_literal("42", LiteralKind.NUMBER) == Value(ValueType.NUMBER, 42)


def test_load_literal_booleans():
    assert load_literal("TRUE", LiteralKind.BOOLEAN) == Value(ValueType.BOOLEAN, True)
    assert load_literal("FALSE", LiteralKind.BOOLEAN) == Value(ValueType.BOOLEAN, False)


def test_load_literal_string_and_null():
    assert load_literal("hi", LiteralKind.STRING) == Value(ValueType.STRING, "hi")
    assert load_literal("NULL", LiteralKind.NULL) == Value(ValueType.NULL, None)


def test_load_literal_identifier_raises():
    with pytest.raises(KnightError):
        load_literal("x", LiteralKind.IDENTIFIER)


@pytest.mark.parametrize(
    "source, op, value",
    [
        ("42", IROp.CONST_NUMBER, Value(ValueType.NUMBER, 42)),
        ("'abc'", IROp.CONST_STRING, Value(ValueType.STRING, "abc")),
        ("T", IROp.CONST_BOOLEAN, Value(ValueType.BOOLEAN, True)),
        ("NULL", IROp.CONST_NULL, Value(ValueType.NULL, None)),
    ],
)
def test_generate_constants(source, op, value):
    function = Function()
    block = Block()
    result = generate_ssa(parse_source(source), function, block)
    [instr] = block.instructions
    assert instr.result == result
    assert instr.op is op
    assert instr.value == value


def test_generate_identifier_uses_symbol_table():
    function = Function()
    function.symbol_table.set("x", 7)
    block = Block()
    result = generate_ssa(parse_source("x"), function, block)
    [instr] = block.instructions
    assert instr == Instruction(result=result, op=IROp.LOAD, var_id=7)


def test_generate_unknown_identifier_loads_zero():
    function = Function()
    block = Block()
    generate_ssa(parse_source("missing"), function, block)
    assert block.instructions[0].var_id == 0


def test_generate_prompt_and_random():
    function = Function()
    block = Block()
    first = generate_ssa(parse_source("PROMPT"), function, block)
    second = generate_ssa(parse_source("RANDOM"), function, block)
    assert [i.op for i in block.instructions] == [IROp.PROMPT, IROp.RANDOM]
    assert [first, second] == [i.result for i in block.instructions]
    assert first < second


def test_generate_unsupported_node_raises():
    with pytest.raises(KnightError):
        generate_ssa(parse_source("+ 1 2"), Function(), Block())


def test_generate_list_literal_raises():
    with pytest.raises(KnightError):
        generate_ssa(parse_source("@"), Function(), Block())