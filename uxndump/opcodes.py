import enum


OPCODE_MASK = 0x1F


class Opcode(enum.IntEnum):
    INC = 1
    POP = 2
    NIP = 3
    SWP = 4
    ROT = 5
    DUP = 6
    OVR = 7
    EQU = 8
    NEQ = 9
    GTH = 10
    LTH = 11
    JMP = 12
    JCN = 13
    JSR = 14
    STH = 15
    LDZ = 16
    STZ = 17
    LDR = 18
    STR = 19
    LDA = 20
    STA = 21
    DEI = 22
    DEO = 23
    ADD = 24
    SUB = 25
    MUL = 26
    DIV = 27
    AND = 28
    ORA = 29
    EOR = 30
    SFT = 31


class Mode(enum.IntEnum):
    SHORT = 0x20
    RETURN = 0x40
    KEEP = 0x80


# indexed by the top three bits of an opcode whose low five bits are clear
zero_ops = ("BRK", "20", "40", "60", "LIT", "LIT", "LIT", "LIT")

# suffixes are always written in this order
mode_suffixes = {
    Mode.SHORT: "2",
    Mode.KEEP: "k",
    Mode.RETURN: "r",
}
