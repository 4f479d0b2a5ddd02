from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from .errors import mert
from .opcodes import OpCodes, opcode_names, MAX_DIRECT_PUSH


@dataclass
class Tape:
    """Class for reading the byte code of the script."""
    data: bytes
    pointer: int = field(default=0)

    def read(self, size: int, move_pointer: bool = True) -> bytes:
        """Read symbols from the data. Raises MalformedEncoding if fewer
            than size bytes remain.
        """
        mert(self.pointer + size <= len(self.data),
            f'cannot read {size} bytes at offset {self.pointer}')
        data = self.data[self.pointer:self.pointer+size]

        if move_pointer:
            self.move_pointer(size)

        return data

    def read_uint(self, size: int) -> int:
        """Read a little-endian unsigned int of the given byte size."""
        return int.from_bytes(self.read(size), 'little')

    def move_pointer(self, n: int) -> int:
        """Move the pointer the given number of places."""
        mert(self.pointer + n <= len(self.data), 'cannot move pointer that far')
        self.pointer += n
        return self.pointer

    def has_terminated(self) -> bool:
        """Return whether or not the tape has terminated."""
        return self.pointer >= len(self.data)


class PushEncoding(Enum):
    """How the length of a Data token was encoded in the script."""
    DIRECT = 0
    PUSHDATA1 = 1
    PUSHDATA2 = 2
    PUSHDATA4 = 4

    @classmethod
    def minimal_for(cls, length: int) -> PushEncoding:
        """Return the shortest encoding able to push length bytes."""
        if length <= MAX_DIRECT_PUSH:
            return cls.DIRECT
        if length <= 0xff:
            return cls.PUSHDATA1
        if length <= 0xffff:
            return cls.PUSHDATA2
        return cls.PUSHDATA4


@dataclass(frozen=True)
class Opcode:
    """A single-byte operator token."""
    code: int

    @property
    def name(self) -> str:
        return opcode_names.get(self.code, f'OP_UNKNOWN_{self.code:#04x}')

    @property
    def small_int(self) -> int|None:
        """Return 1-16 for OP_1 through OP_16, otherwise None."""
        if OpCodes.OP_1 <= self.code <= OpCodes.OP_16:
            return self.code - OpCodes.OP_1 + 1
        return None


@dataclass(frozen=True)
class Data:
    """A push-data token: the pushed bytes and how their length was
        encoded.
    """
    data: bytes
    encoding: PushEncoding = field(default=PushEncoding.DIRECT)

    def __len__(self) -> int:
        return len(self.data)

    def is_minimal(self) -> bool:
        """Return True if no shorter push encoding exists for the data."""
        return self.encoding is PushEncoding.minimal_for(len(self.data))


Token = Opcode | Data


class ScriptType(str, Enum):
    PUBKEYHASH = 'pubkeyhash'
    SCRIPTHASH = 'scripthash'
    PUBKEY = 'pubkey'
    MULTISIG = 'multisig'
    NULLDATA = 'nulldata'
    UNKNOWN = 'unknown'

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ClassificationResult:
    """The template a script matched and the addresses it pays to."""
    type: ScriptType = field(default=ScriptType.UNKNOWN)
    addresses: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        """Return a plain dict with a str type and a list of addresses."""
        return {'type': self.type.value, 'addresses': list(self.addresses)}
