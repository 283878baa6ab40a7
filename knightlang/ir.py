"""SSA intermediate representation and its generation from syntax trees."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum, auto

from .errors import KnightError
from .parser import AstKind, LiteralKind, Node
from .symbols import SymbolTable
from .value import Value, ValueType, create_string, create_value


class IRType(IntEnum):
    NUMBER = 0
    STRING = 1
    BOOLEAN = 2
    NULL = 3
    ARRAY = 4
    BLOCK = 5


class IROp(IntEnum):
    CONST_NUMBER = 0
    CONST_STRING = auto()
    CONST_BOOLEAN = auto()
    CONST_NULL = auto()
    LOAD = auto()
    STORE = auto()
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    MOD = auto()
    POW = auto()
    NEG = auto()
    LT = auto()
    GT = auto()
    EQ = auto()
    AND = auto()
    OR = auto()
    NOT = auto()
    GUARD = auto()
    COERCE = auto()
    BRANCH = auto()
    JUMP = auto()
    CALL = auto()
    RETURN = auto()
    OUTPUT = auto()
    RANDOM = auto()
    PROMPT = auto()
    BOX = auto()
    ASCII = auto()
    PRIME = auto()
    ULTIMATE = auto()
    LENGTH = auto()
    GET = auto()
    SET = auto()
    PHI = auto()


@dataclass
class Instruction:
    """One SSA instruction; which fields matter depends on ``op``."""

    result: int
    op: IROp
    type: IRType = IRType.NULL
    operands: list[int] = field(default_factory=list)
    value: Value | None = None
    var_id: int = 0
    phi_values: list[int] = field(default_factory=list)
    phi_blocks: list[int] = field(default_factory=list)
    condition: int = 0
    body_block: int = 0
    fallback_block: int = 0


@dataclass
class Block:
    """A basic block of instructions."""

    id: int = 0
    instructions: list[Instruction] = field(default_factory=list)
    phis: list[Instruction] = field(default_factory=list)
    terminator: Instruction | None = None
    predecessors: list[int] = field(default_factory=list)
    successors: list[int] = field(default_factory=list)


@dataclass
class Function:
    """A function under construction: its blocks, id counters and symbols."""

    blocks: list[Block] = field(default_factory=list)
    next_value_id: int = 0
    next_block_id: int = 0
    symbol_table: SymbolTable = field(default_factory=SymbolTable)
    var_id: int = 0

    def next_id(self) -> int:
        """Return a fresh value id."""
        value_id = self.next_value_id
        self.next_value_id += 1
        return value_id

    def emit(self, op: IROp, block: Block) -> Instruction:
        """Append a new instruction with a fresh result id to ``block``."""
        instruction = Instruction(result=self.next_id(), op=op, type=IRType.NULL)
        block.instructions.append(instruction)
        return instruction


_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def load_literal(value: str, literal_kind: LiteralKind) -> Value:
    """Turn literal source text into a runtime value."""
    if literal_kind is LiteralKind.BOOLEAN:
        return create_value(ValueType.BOOLEAN, value[:1] == "T")
    if literal_kind is LiteralKind.STRING:
        return create_string(value)
    if literal_kind is LiteralKind.NUMBER:
        return create_value(ValueType.NUMBER, _parse_int(value))
    if literal_kind is LiteralKind.NULL:
        return create_value(ValueType.NULL, None)
    raise KnightError(f"Cannot load literal of kind {literal_kind.name}")


_CONSTANT_OPS = {
    LiteralKind.NUMBER: IROp.CONST_NUMBER,
    LiteralKind.STRING: IROp.CONST_STRING,
    LiteralKind.BOOLEAN: IROp.CONST_BOOLEAN,
    LiteralKind.NULL: IROp.CONST_NULL,
}


def generate_ssa(node: Node, function: Function, block: Block) -> int:
    """Emit instructions for ``node`` into ``block`` and return the result id."""
    if node.kind is AstKind.LITERAL:
        if node.literal_kind is LiteralKind.IDENTIFIER:
            var_id = function.symbol_table.get(node.value or "")
            instruction = function.emit(IROp.LOAD, block)
            instruction.var_id = var_id
            return instruction.result
        op = _CONSTANT_OPS.get(node.literal_kind)
        if op is None:
            raise KnightError(f"Cannot generate IR for literal {node.literal_kind!r}")
        value = load_literal(node.value or "", node.literal_kind)
        instruction = function.emit(op, block)
        instruction.value = value
        return instruction.result
    if node.kind is AstKind.PROMPT:
        return function.emit(IROp.PROMPT, block).result
    if node.kind is AstKind.RANDOM:
        return function.emit(IROp.RANDOM, block).result
    raise KnightError(f"Cannot generate IR for node kind {node.kind.name}")