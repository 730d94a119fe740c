from .opcodes import OPCODE_MASK, Mode, Opcode, mode_suffixes, zero_ops


# the first page of memory is never loaded from a rom
BASE_ADDRESS = 0x100

DUMP_WIDTH = 3
MNEMONIC_WIDTH = 7
COMMENT_CHARS = b"()"


def immediate_size(opcode):
    """Number of literal bytes following a LIT/LIT2 opcode, 0 for anything else."""
    if opcode & 0x9F == 0x80:
        return 2 if opcode & Mode.SHORT else 1
    return 0


def decode(opcode):
    """Decode a single opcode byte into (mnemonic, suffix, immediate size).

    Every byte value decodes to something: the base operations come from
    the low five bits, and the eight patterns with those bits clear are BRK,
    three reserved codes and the LIT family. For LIT the keep bit is part of
    the opcode rather than a modifier, and BRK and the reserved codes never
    carry modifiers.
    """
    op = opcode & OPCODE_MASK
    if op:
        mnemonic = Opcode(op).name
        modes = opcode
    else:
        mnemonic = zero_ops[opcode >> 5]
        if opcode & Mode.KEEP:
            modes = opcode & ~Mode.KEEP
        else:
            modes = 0

    suffix = "".join(s for mode, s in mode_suffixes.items() if modes & mode)
    return mnemonic, suffix, immediate_size(opcode)


def hexdump(data):
    return "".join(f"{b:02x} " for b in data)


def asciidump(data):
    return "".join(
        chr(b) if 0x20 <= b < 0x7F and b not in COMMENT_CHARS else "."
        for b in data
    )


class Instruction:
    def __init__(self, address, opcode, operand=None):
        self.address = address
        self.opcode = opcode
        self.operand = operand
        self.mnemonic, self.suffix, self.immediate_size = decode(opcode)

    @property
    def size(self):
        return 1 + self.immediate_size

    @property
    def data(self):
        data = bytes([self.opcode])
        if self.operand is not None:
            data += self.operand.to_bytes(self.immediate_size, "big")
        return data

    @property
    def reserved(self):
        return self.opcode & OPCODE_MASK == 0 and 0 < self.opcode >> 5 < 4

    @property
    def body(self):
        text = self.mnemonic + self.suffix
        if self.reserved:
            # written as a bare hex token, like raw bytes
            return text + " "
        if self.operand is None:
            return text
        return f"{text:<{MNEMONIC_WIDTH}}{self.operand:0{self.immediate_size * 2}x} "

    def __repr__(self):
        return f"{self.address:#06x}: {self.body.rstrip()}"

    __str__ = __repr__


class RawBytes:
    """Trailing bytes too short to hold the instruction their opcode announces."""

    def __init__(self, address, data):
        self.address = address
        self.data = bytes(data)

    @property
    def size(self):
        return len(self.data)

    @property
    def body(self):
        return hexdump(self.data)

    def __repr__(self):
        return f"{self.address:#06x}: {self.body.rstrip()}"

    __str__ = __repr__


def read_instruction(code, cursor):
    opcode = code[cursor]
    size = 1 + immediate_size(opcode)
    address = BASE_ADDRESS + cursor

    if len(code) - cursor < size:
        return RawBytes(address, code[cursor:])

    operand = None
    if size > 1:
        operand = int.from_bytes(code[cursor + 1 : cursor + size], "big")
    return Instruction(address, opcode, operand)


def format_line(record):
    data = record.data
    return (
        f"( {record.address:04x} "
        f"{hexdump(data):<{DUMP_WIDTH * 3}}"
        f"{asciidump(data):<{DUMP_WIDTH}}"
        f" )\t{record.body}"
    )


def build_line(code, cursor):
    """Render the record starting at cursor, returning (line, bytes consumed)."""
    record = read_instruction(code, cursor)
    return format_line(record), record.size


def disassemble(code):
    code = bytes(code)
    records = []
    cursor = 0

    while cursor < len(code):
        record = read_instruction(code, cursor)
        records.append(record)
        cursor += record.size

    return records


def listing(code):
    code = bytes(code)
    yield f"|{BASE_ADDRESS:04x}"

    cursor = 0
    while cursor < len(code):
        line, size = build_line(code, cursor)
        yield line
        cursor += size
