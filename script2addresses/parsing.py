from __future__ import annotations
from .classes import Tape, Opcode, Data, PushEncoding, Token
from .errors import iert, tert, InvalidInputType
from .opcodes import OpCodes, MAX_DIRECT_PUSH
from typing import Iterator


_pushdata_sizes = {
    OpCodes.OP_PUSHDATA1: (1, PushEncoding.PUSHDATA1),
    OpCodes.OP_PUSHDATA2: (2, PushEncoding.PUSHDATA2),
    OpCodes.OP_PUSHDATA4: (4, PushEncoding.PUSHDATA4),
}


def normalize_script(script: bytes|bytearray|memoryview|str) -> bytes:
    """Convert a script given as bytes or hex into bytes. Raises
        InvalidInputType for anything else, including odd-length,
        non-hex, or whitespace-containing strings.
    """
    if isinstance(script, (bytes, bytearray, memoryview)):
        return bytes(script)

    iert(type(script) is str, f'script must be bytes or hex str, not {type(script)}')
    iert(not any(c.isspace() for c in script), 'script hex must not contain whitespace')
    try:
        return bytes.fromhex(script)
    except ValueError as e:
        raise InvalidInputType(f'script is not valid hex: {e}') from None

def read_token(tape: Tape) -> Token:
    """Read the next token from the tape. Raises MalformedEncoding if
        a push would read past the end of the script.
    """
    op_code = tape.read(1)[0]

    if 0 < op_code <= MAX_DIRECT_PUSH:
        return Data(tape.read(op_code), PushEncoding.DIRECT)

    if op_code in _pushdata_sizes:
        size, encoding = _pushdata_sizes[op_code]
        length = tape.read_uint(size)
        return Data(tape.read(length), encoding)

    return Opcode(op_code)

def decode_script(script: bytes) -> Iterator[Token]:
    """Lazily decode the script into Opcode and Data tokens. The
        generator raises MalformedEncoding when it reaches a truncated
        push.
    """
    tert(type(script) is bytes, 'script must be bytes')
    tape = Tape(script)

    while not tape.has_terminated():
        yield read_token(tape)

def decompile_script(script: bytes) -> str:
    """Decompile the byte code into human-readable ASM. Raises
        MalformedEncoding for truncated scripts.
    """
    symbols = []

    for token in decode_script(script):
        match token:
            case Data(data=data, encoding=PushEncoding.DIRECT):
                symbols.append(data.hex())
            case Data(data=data, encoding=encoding):
                symbols.append(f'OP_{encoding.name}')
                symbols.append(data.hex())
            case Opcode():
                symbols.append(token.name)

    return ' '.join(symbols)
